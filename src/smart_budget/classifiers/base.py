from abc import ABC, abstractmethod

from smart_budget.models import CategorizationResult


class Classifier(ABC):
    @abstractmethod
    def classify(self, text: str) -> CategorizationResult | None:
        """Return a match for the text, or None to let the next classifier try."""
        pass
