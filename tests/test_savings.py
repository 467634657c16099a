import datetime as dt
from decimal import Decimal

import pytest

from smart_budget.models import SavingsGoal, TransactionDraft
from smart_budget.services.savings import (
    InvalidContributionError,
    add_contribution,
    classify_feasibility,
    days_until,
    goal_progress,
    goal_status,
    is_overdue,
    project_goal,
    project_savings,
    summarize_cashflow,
)

TODAY = dt.date(2026, 1, 1)


def _goal(target: str = "12000", current: str = "0", days: int = 360) -> SavingsGoal:
    return SavingsGoal(
        name="Laptop",
        target_amount=Decimal(target),
        current_amount=Decimal(current),
        deadline=TODAY + dt.timedelta(days=days),
    )


def test_ten_percent_of_income_is_easily_achievable() -> None:
    projection = project_savings(
        12000, 0, TODAY + dt.timedelta(days=360), Decimal("10000"), today=TODAY
    )

    assert projection.months_left == 12
    assert projection.monthly == Decimal("1000")
    assert projection.income_percentage == 10.0
    assert projection.feasibility == "easily achievable"
    assert projection.message == "Easily achievable"
    assert projection.amount_needed == Decimal("12000")


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        ("10", "easily achievable"),
        ("10.01", "reasonable"),
        ("20", "reasonable"),
        ("20.5", "moderate"),
        ("30", "moderate"),
        ("31", "challenging"),
    ],
)
def test_feasibility_bands(percentage: str, expected: str) -> None:
    assert classify_feasibility(Decimal(percentage)) == expected


def test_zero_income_is_indeterminate() -> None:
    projection = project_savings(12000, 0, TODAY + dt.timedelta(days=90), 0, today=TODAY)

    assert projection.feasibility == "indeterminate"
    assert projection.income_percentage is None
    # Spread over a year when there is nothing to compare against.
    assert projection.monthly == Decimal("1000")
    assert projection.weekly == Decimal("231")


def test_amounts_round_up() -> None:
    projection = project_savings(1000, 0, TODAY + dt.timedelta(days=90), 50000, today=TODAY)

    assert projection.months_left == 3
    assert projection.weeks_left == 13
    assert projection.monthly == Decimal("334")
    assert projection.weekly == Decimal("77")


def test_past_deadline_needs_everything_now() -> None:
    projection = project_savings(5000, 1000, TODAY - dt.timedelta(days=10), 10000, today=TODAY)

    assert projection.days_left == -10
    assert projection.months_left == 1
    assert projection.weeks_left == 1
    assert projection.monthly == Decimal("4000")
    assert projection.feasibility == "challenging"


def test_project_goal_uses_saved_amount() -> None:
    projection = project_goal(_goal(current="6000"), 10000, today=TODAY)
    assert projection.amount_needed == Decimal("6000")
    assert projection.monthly == Decimal("500")


def test_add_contribution_clamps_to_target() -> None:
    goal = _goal(target="1000", current="900")

    add_contribution(goal, 50)
    assert goal.current_amount == Decimal("950")

    add_contribution(goal, "500")
    assert goal.current_amount == Decimal("1000")
    assert goal_status(goal) == "completed"
    assert goal_progress(goal) == 100.0


@pytest.mark.parametrize("amount", [0, -10, "abc", None])
def test_add_contribution_rejects_non_positive(amount) -> None:
    goal = _goal()
    with pytest.raises(InvalidContributionError):
        add_contribution(goal, amount)
    assert goal.current_amount == Decimal("0")


def test_progress_and_overdue() -> None:
    goal = _goal(target="3000", current="1000", days=-1)

    assert goal_progress(goal) == 33.3
    assert goal_status(goal) == "in-progress"
    assert is_overdue(goal, today=TODAY)
    assert days_until(goal.deadline, TODAY) == -1

    add_contribution(goal, 2000)
    assert not is_overdue(goal, today=TODAY)


def test_summarize_cashflow() -> None:
    transactions = [
        TransactionDraft(amount=Decimal("50000"), direction="credit", category="Income"),
        TransactionDraft(amount=Decimal("1200.50"), direction="debit", category="Food"),
        TransactionDraft(amount=Decimal("800"), direction="debit", category="Transport"),
    ]

    summary = summarize_cashflow(transactions)
    assert summary.total_income == Decimal("50000")
    assert summary.total_expenses == Decimal("2000.50")
    assert summary.net_balance == Decimal("47999.50")

    empty = summarize_cashflow([])
    assert empty.total_income == Decimal("0")
    assert empty.net_balance == Decimal("0")


def test_projection_is_repeatable() -> None:
    args = (12000, 2500, TODAY + dt.timedelta(days=200), Decimal("45000"))
    assert project_savings(*args, today=TODAY) == project_savings(*args, today=TODAY)


@pytest.mark.parametrize(
    ("target", "percentage", "expected"),
    [
        (1004, 10.0, "easily achievable"),
        (1005, 10.1, "reasonable"),
    ],
)
def test_feasibility_uses_reported_percentage(target: int, percentage: float, expected: str) -> None:
    projection = project_savings(target, 0, TODAY + dt.timedelta(days=30), 10000, today=TODAY)

    assert projection.monthly == Decimal(target)
    assert projection.income_percentage == percentage
    assert projection.feasibility == expected


def test_signed_amount() -> None:
    assert TransactionDraft(amount=Decimal("20"), direction="debit").signed_amount == Decimal("-20")
    assert TransactionDraft(amount=Decimal("20"), direction="credit").signed_amount == Decimal("20")
