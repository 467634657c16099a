import datetime as dt
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from smart_budget.models import (
    CashflowSummary,
    Direction,
    GoalStatus,
    SavingsGoal,
    SavingsProjection,
    Transaction,
    TransactionDraft,
)


class CategorizeRequest(BaseModel):
    text: str | None = None
    merchant: str | None = None
    description: str | None = None


class ExtractRequest(BaseModel):
    text: str
    kind: Literal["sms", "email"] = "sms"
    save: bool = False


class ExtractEmailRequest(BaseModel):
    subject: str | None = None
    body: str | None = None
    save: bool = False


class SmartAddRequest(BaseModel):
    text: str
    direction: Direction | None = None


class TransactionCreate(BaseModel):
    amount: Decimal = Field(gt=0)
    direction: Direction = "debit"
    merchant: str | None = None
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    date: dt.date | None = None
    bank_account_id: str | None = None
    payment_method: str | None = None

    @field_validator("bank_account_id", "payment_method")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class GoalCreate(BaseModel):
    name: str = Field(min_length=1)
    target_amount: Decimal = Field(gt=0)
    deadline: dt.date
    current_amount: Decimal = Field(default=Decimal("0"), ge=0)
    description: str | None = None


class ContributionRequest(BaseModel):
    amount: Decimal


class GoalView(BaseModel):
    goal: SavingsGoal
    progress: float
    status: GoalStatus
    days_left: int
    overdue: bool
    projection: SavingsProjection | None = None


class CategoryTotal(BaseModel):
    category: str
    total: Decimal


class SummaryResponse(BaseModel):
    cashflow: CashflowSummary
    breakdown: list[CategoryTotal]


class AnomaliesResponse(BaseModel):
    anomalies: list[Transaction]


class ExtractResponse(BaseModel):
    transaction: TransactionDraft
    saved: bool = False
    id: str | None = None
