from decimal import Decimal

from smart_budget.models import TransactionDraft
from smart_budget.services.reporting import (
    BALANCED_MESSAGE,
    INSIGHT_RULES,
    InsightRule,
    category_breakdown,
    detect_anomalies,
    generate_insights,
)


def _tx(amount: str, category: str = "Other", direction: str = "debit") -> TransactionDraft:
    return TransactionDraft(amount=Decimal(amount), category=category, direction=direction)


def test_detect_anomalies_flags_amounts_above_twice_the_mean() -> None:
    transactions = [_tx("10"), _tx("10"), _tx("100")]

    anomalies = detect_anomalies(transactions)
    assert anomalies == [transactions[2]]


def test_detect_anomalies_threshold_is_strict() -> None:
    # mean 20, threshold 40: an amount equal to it is not flagged
    assert detect_anomalies([_tx("10"), _tx("10"), _tx("40")]) == []


def test_detect_anomalies_empty_and_uniform() -> None:
    assert detect_anomalies([]) == []
    assert detect_anomalies([_tx("500"), _tx("500")]) == []


def test_detect_anomalies_custom_multiplier() -> None:
    transactions = [_tx("10"), _tx("10"), _tx("25")]
    assert detect_anomalies(transactions, multiplier=1.5) == [transactions[2]]


def test_generate_insights_default_message() -> None:
    assert generate_insights([]) == [BALANCED_MESSAGE]
    assert generate_insights([_tx("2999", "Food")]) == [BALANCED_MESSAGE]


def test_generate_insights_thresholds() -> None:
    insights = generate_insights([_tx("2000", "Food"), _tx("1500", "Food"), _tx("2500", "Transport")])

    food_rule, transport_rule = INSIGHT_RULES[0], INSIGHT_RULES[1]
    assert insights == [food_rule.message, transport_rule.message]


def test_generate_insights_custom_rules() -> None:
    rules = [InsightRule(category="Pets", threshold=Decimal("100"), message="Lots of treats.")]
    assert generate_insights([_tx("150", "Pets")], rules) == ["Lots of treats."]


def test_category_breakdown_counts_only_spending() -> None:
    transactions = [
        _tx("300", "Food"),
        _tx("1200", "Shopping"),
        _tx("200", "Food"),
        _tx("50000", "Income", direction="credit"),
    ]

    assert category_breakdown(transactions) == [
        ("Shopping", Decimal("1200")),
        ("Food", Decimal("500")),
    ]
