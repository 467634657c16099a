from abc import ABC, abstractmethod

from smart_budget.domain.money import AmountLike
from smart_budget.models import SavingsGoal, Transaction, TransactionDraft


class GoalNotFoundError(LookupError):
    pass


class Store(ABC):
    @abstractmethod
    def add_transaction(self, draft: TransactionDraft) -> Transaction:
        """Persist a draft and return the stored record with its id."""
        pass

    @abstractmethod
    def list_transactions(self, limit: int | None = None) -> list[Transaction]:
        """Stored transactions, newest date first."""
        pass

    @abstractmethod
    def add_goal(self, goal: SavingsGoal) -> SavingsGoal:
        pass

    @abstractmethod
    def get_goal(self, goal_id: str) -> SavingsGoal:
        """Raise GoalNotFoundError for unknown ids."""
        pass

    @abstractmethod
    def save_goal(self, goal: SavingsGoal) -> SavingsGoal:
        pass

    @abstractmethod
    def add_contribution(self, goal_id: str, amount: AmountLike) -> SavingsGoal:
        """
        Add money to a stored goal as one atomic update and return the new state.

        Raise GoalNotFoundError for unknown ids and InvalidContributionError
        for amounts that are not positive; the stored goal is left untouched.
        """
        pass

    @abstractmethod
    def list_goals(self) -> list[SavingsGoal]:
        pass
