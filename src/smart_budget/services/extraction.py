import datetime as dt
import re
from collections.abc import Callable
from dataclasses import dataclass

from smart_budget.domain.money import parse_amount
from smart_budget.logger import get_logger
from smart_budget.manager import CategorizerService
from smart_budget.models import Direction, SourceKind, TransactionDraft

logger = get_logger(__name__)

_MERCHANT_CHARS = r"([A-Z0-9\s&]{3,30})"

CURRENCY_AMOUNT_PATTERN = re.compile(
    r"(?:\b(?:rs\.?|inr|rupees|usd)|₹|\$)\s*(\d[\d,]*(?:\.\d+)?)",
    re.IGNORECASE,
)
BARE_AMOUNT_PATTERN = re.compile(r"(\d[\d,]*(?:\.\d+)?)")
MASKED_ACCOUNT_PATTERN = re.compile(r"(?:[Xx]{4}-?|\*{2,4}-?)(\d{4})(?!\d)")

SUMMARY_LENGTH = 50


@dataclass(frozen=True)
class ExtractionProfile:
    kind: SourceKind
    label: str
    amount_pattern: re.Pattern[str]
    merchant_pattern: re.Pattern[str]
    default_merchant: str
    credit_words: tuple[str, ...]
    parse_account: bool = False
    classify_full_text: bool = False


SMS_PROFILE = ExtractionProfile(
    kind="sms",
    label="SMS",
    amount_pattern=CURRENCY_AMOUNT_PATTERN,
    merchant_pattern=re.compile(r"\b(?:at|on|for)\s+" + _MERCHANT_CHARS, re.IGNORECASE),
    default_merchant="Bank Transaction",
    credit_words=("credited", "credit"),
    parse_account=True,
)

EMAIL_PROFILE = ExtractionProfile(
    kind="email",
    label="Email",
    amount_pattern=CURRENCY_AMOUNT_PATTERN,
    merchant_pattern=re.compile(r"\b(?:from|via|at)\s+" + _MERCHANT_CHARS, re.IGNORECASE),
    default_merchant="Email Receipt",
    credit_words=("credited", "refunded", "returned"),
)

# Quick-add text typed by the user: "spent 250 on pizza at dominos".
TEXT_PROFILE = ExtractionProfile(
    kind="text",
    label="Note",
    amount_pattern=BARE_AMOUNT_PATTERN,
    merchant_pattern=re.compile(r"\b(?:at|from)\s+" + _MERCHANT_CHARS, re.IGNORECASE),
    default_merchant="Quick Add",
    credit_words=("credited", "received"),
    classify_full_text=True,
)

PROFILES: dict[str, ExtractionProfile] = {
    profile.kind: profile for profile in (SMS_PROFILE, EMAIL_PROFILE, TEXT_PROFILE)
}


def summarize(text: str, length: int = SUMMARY_LENGTH) -> str:
    flattened = " ".join(text.split())
    if len(flattened) <= length:
        return flattened
    return f"{flattened[:length]}..."


class TransactionExtractor:
    """
    Turns bank SMS, e-mail receipts and quick-add notes into transaction drafts.

    Extraction never raises for bad input: anything without a usable amount
    yields ``None`` and the caller reports "could not extract transaction".
    """

    def __init__(
        self,
        service: CategorizerService,
        today: Callable[[], dt.date] = dt.date.today,
    ) -> None:
        self.service = service
        self.today = today

    def extract(self, raw_text: str | None, kind: SourceKind = "sms") -> TransactionDraft | None:
        profile = PROFILES.get(kind)
        if profile is None:
            raise ValueError(f"Unsupported source kind: {kind!r}")
        if not raw_text or not raw_text.strip():
            return None
        return self._extract(raw_text, raw_text, profile)

    def extract_email(self, subject: str | None, body: str | None) -> TransactionDraft | None:
        if not subject and not body:
            return None
        full_text = f"{subject or ''} {body or ''}"
        audit_text = f"Subject: {subject or ''}\nBody: {body or ''}"
        return self._extract(full_text, audit_text, EMAIL_PROFILE)

    def smart_add(self, text: str | None, direction: Direction | None = None) -> TransactionDraft | None:
        draft = self.extract(text, kind="text")
        if draft is not None and direction is not None and draft.direction != direction:
            draft = draft.model_copy(update={"direction": direction})
        return draft

    def _extract(
        self, text: str, audit_text: str, profile: ExtractionProfile
    ) -> TransactionDraft | None:
        amount_match = profile.amount_pattern.search(text)
        amount = parse_amount(amount_match.group(1)) if amount_match else None
        if amount is None or amount <= 0:
            logger.info("[EXTRACT] No amount found in %s text; skipping.", profile.label)
            return None

        merchant = profile.default_merchant
        merchant_match = profile.merchant_pattern.search(text)
        if merchant_match:
            candidate = " ".join(merchant_match.group(1).split())
            if candidate:
                merchant = candidate

        lowered = text.lower()
        direction: Direction = "debit"
        if any(word in lowered for word in profile.credit_words):
            direction = "credit"

        last_four = None
        if profile.parse_account:
            account_match = MASKED_ACCOUNT_PATTERN.search(text)
            last_four = account_match.group(1) if account_match else None

        result = self.service.classify(text if profile.classify_full_text else merchant)

        draft = TransactionDraft(
            amount=amount,
            direction=direction,
            merchant=merchant,
            description=f"{profile.label}: {summarize(text)}",
            category=result.category,
            subcategory=result.subcategory,
            confidence=result.confidence,
            date=self.today(),
            last_four_digits=last_four,
            source=profile.kind,
            raw_text=audit_text,
        )
        logger.debug(
            "[EXTRACT] %s: %s %s at '%s' -> %s",
            profile.label,
            draft.direction,
            draft.amount,
            draft.merchant,
            draft.category,
        )
        return draft
