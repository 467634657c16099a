import threading
from uuid import uuid4

from smart_budget.domain.money import AmountLike
from smart_budget.models import SavingsGoal, Transaction, TransactionDraft
from smart_budget.services import savings

from .base import GoalNotFoundError, Store


def newest_first(transactions: list[Transaction], limit: int | None) -> list[Transaction]:
    # sorted() is stable, so same-day records keep newest-inserted first too
    ordered = sorted(reversed(transactions), key=lambda t: t.date, reverse=True)
    return ordered[:limit] if limit is not None else ordered


class InMemoryStore(Store):
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.transactions: list[Transaction] = []
        self.goals: dict[str, SavingsGoal] = {}

    def add_transaction(self, draft: TransactionDraft) -> Transaction:
        record = Transaction(id=uuid4().hex, **draft.model_dump(exclude={"id"}))
        with self._lock:
            self.transactions.append(record)
        return record

    def list_transactions(self, limit: int | None = None) -> list[Transaction]:
        with self._lock:
            snapshot = list(self.transactions)
        return newest_first(snapshot, limit)

    def add_goal(self, goal: SavingsGoal) -> SavingsGoal:
        with self._lock:
            self.goals[goal.id] = goal
        return goal

    def get_goal(self, goal_id: str) -> SavingsGoal:
        with self._lock:
            goal = self.goals.get(goal_id)
        if goal is None:
            raise GoalNotFoundError(goal_id)
        return goal

    def save_goal(self, goal: SavingsGoal) -> SavingsGoal:
        with self._lock:
            if goal.id not in self.goals:
                raise GoalNotFoundError(goal.id)
            self.goals[goal.id] = goal
        return goal

    def add_contribution(self, goal_id: str, amount: AmountLike) -> SavingsGoal:
        with self._lock:
            goal = self.get_goal(goal_id).model_copy()
            savings.add_contribution(goal, amount)
            self.goals[goal.id] = goal
        return goal

    def list_goals(self) -> list[SavingsGoal]:
        with self._lock:
            return list(self.goals.values())
