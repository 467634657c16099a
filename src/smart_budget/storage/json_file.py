import json
import os
import tempfile

from pydantic import ValidationError

from smart_budget.domain.money import AmountLike
from smart_budget.logger import get_logger
from smart_budget.models import SavingsGoal, Transaction, TransactionDraft

from .memory import InMemoryStore

logger = get_logger(__name__)


class JsonFileStore(InMemoryStore):
    """In-memory store that writes every change through to a JSON file."""

    def __init__(self, data_path: str = "budget.json") -> None:
        super().__init__()
        self.data_path = data_path
        self.load()

    def load(self) -> None:
        if not os.path.exists(self.data_path):
            return
        try:
            with open(self.data_path, encoding="utf-8") as f:
                data = json.load(f)
            transactions = [Transaction.model_validate(t) for t in data.get("transactions", [])]
            goals = [SavingsGoal.model_validate(g) for g in data.get("goals", [])]
        except (json.JSONDecodeError, ValidationError, AttributeError) as exc:
            logger.error("[STORE] Could not load %s, starting empty: %s", self.data_path, exc)
            return

        with self._lock:
            self.transactions = transactions
            self.goals = {goal.id: goal for goal in goals}
        logger.info(
            "[STORE] Loaded %d transaction(s) and %d goal(s) from %s.",
            len(transactions),
            len(goals),
            self.data_path,
        )

    def save(self) -> None:
        with self._lock:
            payload = {
                "transactions": [t.model_dump(mode="json") for t in self.transactions],
                "goals": [g.model_dump(mode="json") for g in self.goals.values()],
            }
            directory = os.path.dirname(os.path.abspath(self.data_path))
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                os.replace(tmp_path, self.data_path)
            except Exception:
                os.unlink(tmp_path)
                raise

    def add_transaction(self, draft: TransactionDraft) -> Transaction:
        with self._lock:
            record = super().add_transaction(draft)
            self.save()
        return record

    def add_goal(self, goal: SavingsGoal) -> SavingsGoal:
        with self._lock:
            super().add_goal(goal)
            self.save()
        return goal

    def save_goal(self, goal: SavingsGoal) -> SavingsGoal:
        with self._lock:
            super().save_goal(goal)
            self.save()
        return goal

    def add_contribution(self, goal_id: str, amount: AmountLike) -> SavingsGoal:
        with self._lock:
            goal = super().add_contribution(goal_id, amount)
            self.save()
        return goal
