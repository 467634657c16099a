import datetime as dt
from decimal import Decimal
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smart_budget.domain.keywords import normalize_keywords

Direction = Literal["credit", "debit"]
SourceKind = Literal["sms", "email", "text", "manual"]
Feasibility = Literal[
    "challenging",
    "moderate",
    "reasonable",
    "easily achievable",
    "indeterminate",
]
GoalStatus = Literal["completed", "in-progress"]

FALLBACK_CATEGORY = "Other"


class CategoryRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str = Field(min_length=1)
    subcategory: str | None = None
    keywords: tuple[str, ...] = Field(min_length=1)

    @field_validator("keywords", mode="before")
    @classmethod
    def _normalize_keywords(cls, value: Any) -> tuple[str, ...]:
        return tuple(normalize_keywords(value))


class CategorizationResult(BaseModel):
    category: str = Field(min_length=1)
    subcategory: str | None = None
    confidence: float = Field(ge=0.0, le=1.0)  # heuristic, not a probability
    source: str  # "custom_rules", "keywords", "fallback"
    keyword: str | None = None


class TransactionDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    direction: Direction = "debit"
    merchant: str = ""
    description: str = ""
    category: str = Field(default=FALLBACK_CATEGORY, min_length=1)
    subcategory: str | None = None
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    date: dt.date = Field(default_factory=dt.date.today)
    last_four_digits: str | None = None
    source: SourceKind = "manual"
    raw_text: str | None = None
    bank_account_id: str | None = None
    payment_method: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        if self.direction == "debit":
            return -abs(self.amount)
        return abs(self.amount)


class Transaction(TransactionDraft):
    id: str


class SavingsGoal(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(min_length=1)
    target_amount: Decimal = Field(gt=0)
    current_amount: Decimal = Field(default=Decimal("0"), ge=0)
    deadline: dt.date
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)
    description: str | None = None


class SavingsProjection(BaseModel):
    monthly: Decimal
    weekly: Decimal
    feasibility: Feasibility
    message: str
    income_percentage: float | None = None
    amount_needed: Decimal
    days_left: int
    months_left: int
    weeks_left: int


class CashflowSummary(BaseModel):
    total_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal
