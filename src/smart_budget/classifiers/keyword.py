import json
import os
from collections.abc import Iterable

from pydantic import ValidationError

from smart_budget.domain.keywords import first_keyword_in
from smart_budget.logger import get_logger
from smart_budget.models import CategorizationResult, CategoryRule

from .base import Classifier

logger = get_logger(__name__)

MATCH_CONFIDENCE = 0.9


class KeywordClassifier(Classifier):
    def __init__(self, rules: Iterable[CategoryRule], source: str = "keywords"):
        # Kept as a tuple: order is the tie-break between matching rules.
        self.rules: tuple[CategoryRule, ...] = tuple(rules)
        self.source = source

    def classify(self, text: str) -> CategorizationResult | None:
        if not text:
            return None
        lowered = text.lower()
        for rule in self.rules:
            keyword = first_keyword_in(lowered, rule.keywords)
            if keyword is not None:
                return CategorizationResult(
                    category=rule.category,
                    subcategory=rule.subcategory,
                    confidence=MATCH_CONFIDENCE,
                    source=self.source,
                    keyword=keyword,
                )
        return None


def load_rules_file(path: str | None) -> list[CategoryRule]:
    """
    Load extra rules from a JSON list of
    ``{"category": ..., "subcategory": ..., "keywords": [...]}`` objects.

    A missing file means no extra rules. Broken files and invalid entries
    are logged and skipped.
    """
    if not path or not os.path.exists(path):
        return []

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("[RULES] Could not read rules file %s: %s", path, exc)
        return []

    if not isinstance(raw, list):
        logger.warning("[RULES] Rules file %s must contain a JSON list; ignoring it.", path)
        return []

    rules: list[CategoryRule] = []
    for index, entry in enumerate(raw):
        try:
            rules.append(CategoryRule.model_validate(entry))
        except ValidationError as exc:
            logger.warning(
                "[RULES] Skipping rule #%d in %s: %s",
                index,
                path,
                exc.errors()[0].get("msg", "invalid"),
            )
    logger.info("[RULES] Loaded %d custom rule(s) from %s.", len(rules), path)
    return rules
