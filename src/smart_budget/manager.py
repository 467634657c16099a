from smart_budget.classifiers.base import Classifier
from smart_budget.classifiers.keyword import KeywordClassifier, load_rules_file
from smart_budget.domain.rules import DEFAULT_RULES
from smart_budget.logger import get_logger
from smart_budget.models import FALLBACK_CATEGORY, CategorizationResult, CategoryRule

logger = get_logger(__name__)

FALLBACK_CONFIDENCE = 0.4


class CategorizerService:
    def __init__(
        self,
        rules_path: str | None = None,
        rules: tuple[CategoryRule, ...] = DEFAULT_RULES,
    ):
        self.classifiers: list[Classifier] = []

        # 1. Deployment specific rules (highest priority)
        custom_rules = load_rules_file(rules_path)
        if custom_rules:
            self.classifiers.append(KeywordClassifier(custom_rules, source="custom_rules"))

        # 2. Built-in keyword table
        self.classifiers.append(KeywordClassifier(rules, source="keywords"))

    def classify(self, text: str | None) -> CategorizationResult:
        """Categorize free text. Always returns a result, falling back to "Other"."""
        text = text or ""
        for classifier in self.classifiers:
            result = classifier.classify(text)
            if result:
                logger.debug(
                    "[CLASSIFY] '%s' -> %s/%s via %s (keyword '%s')",
                    text[:50],
                    result.category,
                    result.subcategory,
                    result.source,
                    result.keyword,
                )
                return result

        logger.debug("[CLASSIFY] No rule matched '%s'; using %s.", text[:50], FALLBACK_CATEGORY)
        return CategorizationResult(
            category=FALLBACK_CATEGORY,
            subcategory=None,
            confidence=FALLBACK_CONFIDENCE,
            source="fallback",
        )

    def categorize_fields(
        self, merchant: str | None = None, description: str | None = None
    ) -> CategorizationResult:
        return self.classify(f"{merchant or ''} {description or ''}".strip())
