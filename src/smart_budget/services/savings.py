"""
Savings goal planning.

``project_savings`` spreads the amount still needed over the months and weeks
left before a deadline and compares the monthly figure with income. It does
not reject past deadlines: the month and week counts bottom out at one, and
``days_left`` goes negative so callers can show the goal as overdue.
"""
import datetime as dt
import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from smart_budget.domain.money import ZERO, AmountLike, ceil_amount, to_decimal
from smart_budget.logger import get_logger
from smart_budget.models import (
    CashflowSummary,
    Feasibility,
    GoalStatus,
    SavingsGoal,
    SavingsProjection,
    TransactionDraft,
)

logger = get_logger(__name__)

DAYS_PER_MONTH = 30
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12
WEEKS_PER_YEAR = 52
PERCENT_PLACES = Decimal("0.1")

# (lower bound exclusive, label); the first bound the percentage exceeds wins.
FEASIBILITY_BANDS: tuple[tuple[Decimal, Feasibility], ...] = (
    (Decimal("30"), "challenging"),
    (Decimal("20"), "moderate"),
    (Decimal("10"), "reasonable"),
)

FEASIBILITY_MESSAGES: dict[str, str] = {
    "challenging": "Challenging - consider extending deadline",
    "moderate": "Moderate challenge",
    "reasonable": "Reasonable",
    "easily achievable": "Easily achievable",
    "indeterminate": "Unable to calculate without income data",
}


class InvalidContributionError(ValueError):
    pass


def days_until(deadline: dt.date, today: dt.date | None = None) -> int:
    return (deadline - (today or dt.date.today())).days


def round_percentage(value: Decimal) -> Decimal:
    return value.quantize(PERCENT_PLACES, rounding=ROUND_HALF_UP)


def classify_feasibility(income_percentage: Decimal) -> Feasibility:
    for bound, label in FEASIBILITY_BANDS:
        if income_percentage > bound:
            return label
    return "easily achievable"


def project_savings(
    target: AmountLike,
    currently_saved: AmountLike,
    deadline: dt.date,
    total_income: AmountLike,
    *,
    today: dt.date | None = None,
) -> SavingsProjection:
    target_amount = to_decimal(target)
    amount_needed = target_amount - to_decimal(currently_saved)
    income = to_decimal(total_income)

    days_left = days_until(deadline, today)
    months_left = max(1, math.ceil(days_left / DAYS_PER_MONTH))
    weeks_left = max(1, math.ceil(days_left / DAYS_PER_WEEK))

    if income == ZERO:
        return SavingsProjection(
            monthly=ceil_amount(target_amount / MONTHS_PER_YEAR),
            weekly=ceil_amount(target_amount / WEEKS_PER_YEAR),
            feasibility="indeterminate",
            message=FEASIBILITY_MESSAGES["indeterminate"],
            income_percentage=None,
            amount_needed=amount_needed,
            days_left=days_left,
            months_left=months_left,
            weeks_left=weeks_left,
        )

    monthly = ceil_amount(amount_needed / months_left)
    weekly = ceil_amount(amount_needed / weeks_left)
    # Bands are checked against the same one-decimal figure that is reported.
    income_percentage = round_percentage(monthly / income * 100)
    feasibility = classify_feasibility(income_percentage)

    return SavingsProjection(
        monthly=monthly,
        weekly=weekly,
        feasibility=feasibility,
        message=FEASIBILITY_MESSAGES[feasibility],
        income_percentage=float(income_percentage),
        amount_needed=amount_needed,
        days_left=days_left,
        months_left=months_left,
        weeks_left=weeks_left,
    )


def project_goal(
    goal: SavingsGoal, total_income: AmountLike, *, today: dt.date | None = None
) -> SavingsProjection:
    return project_savings(
        goal.target_amount,
        goal.current_amount,
        goal.deadline,
        total_income,
        today=today,
    )


def add_contribution(goal: SavingsGoal, amount: AmountLike) -> SavingsGoal:
    """Add money to a goal in place; the saved amount never exceeds the target."""
    contribution = to_decimal(amount)
    if contribution <= ZERO:
        raise InvalidContributionError("Contribution must be a positive amount")

    goal.current_amount = min(goal.current_amount + contribution, goal.target_amount)
    logger.info(
        "[GOALS] Goal %s: +%s -> %s of %s",
        goal.id,
        contribution,
        goal.current_amount,
        goal.target_amount,
    )
    return goal


def goal_progress(goal: SavingsGoal) -> float:
    progress = goal.current_amount / goal.target_amount * 100
    return min(round(float(progress), 1), 100.0)


def goal_status(goal: SavingsGoal) -> GoalStatus:
    return "completed" if goal.current_amount >= goal.target_amount else "in-progress"


def is_overdue(goal: SavingsGoal, today: dt.date | None = None) -> bool:
    return goal_status(goal) != "completed" and days_until(goal.deadline, today) < 0


def summarize_cashflow(transactions: Sequence[TransactionDraft]) -> CashflowSummary:
    total_income = sum((t.amount for t in transactions if t.direction == "credit"), ZERO)
    total_expenses = sum((t.amount for t in transactions if t.direction == "debit"), ZERO)
    return CashflowSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_balance=sum((t.signed_amount for t in transactions), ZERO),
    )
