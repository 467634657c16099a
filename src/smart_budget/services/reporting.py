from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeVar

from smart_budget.domain.money import ZERO, mean
from smart_budget.models import TransactionDraft

T = TypeVar("T", bound=TransactionDraft)

DEFAULT_ANOMALY_MULTIPLIER = Decimal("2")

BALANCED_MESSAGE = "Your spending is well balanced this month."


@dataclass(frozen=True)
class InsightRule:
    category: str
    threshold: Decimal
    message: str


INSIGHT_RULES: tuple[InsightRule, ...] = (
    InsightRule(
        category="Food",
        threshold=Decimal("3000"),
        message="Your food spending is high this month. Consider reducing dining out.",
    ),
    InsightRule(
        category="Transport",
        threshold=Decimal("2000"),
        message="Transport costs are rising. Try carpooling or public transport.",
    ),
    InsightRule(
        category="Shopping",
        threshold=Decimal("5000"),
        message="Shopping is taking a big share of your budget. Try a wishlist before buying.",
    ),
    InsightRule(
        category="Entertainment",
        threshold=Decimal("1500"),
        message="Entertainment spending is up. Review subscriptions you no longer use.",
    ),
)


def detect_anomalies(
    transactions: Sequence[T],
    multiplier: Decimal | float = DEFAULT_ANOMALY_MULTIPLIER,
) -> list[T]:
    """Transactions whose amount is above ``multiplier`` times the mean amount."""
    threshold = mean([t.amount for t in transactions]) * Decimal(str(multiplier))
    return [t for t in transactions if t.amount > threshold]


def category_totals(transactions: Sequence[TransactionDraft]) -> dict[str, Decimal]:
    totals: dict[str, Decimal] = {}
    for t in transactions:
        totals[t.category] = totals.get(t.category, ZERO) + t.amount
    return totals


def generate_insights(
    transactions: Sequence[TransactionDraft],
    rules: Sequence[InsightRule] = INSIGHT_RULES,
) -> list[str]:
    totals = category_totals(transactions)
    insights = [rule.message for rule in rules if totals.get(rule.category, ZERO) > rule.threshold]
    if not insights:
        insights.append(BALANCED_MESSAGE)
    return insights


def category_breakdown(transactions: Sequence[TransactionDraft]) -> list[tuple[str, Decimal]]:
    """Debit totals per category, largest first."""
    spending = category_totals([t for t in transactions if t.direction == "debit"])
    return sorted(spending.items(), key=lambda item: item[1], reverse=True)
