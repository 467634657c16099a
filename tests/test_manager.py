import json
from unittest.mock import patch

import pytest

from smart_budget.manager import FALLBACK_CONFIDENCE, CategorizerService
from smart_budget.models import CategorizationResult


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps([{"category": "Coffee Club", "keywords": ["starbucks"]}]))
    return str(path)


def test_custom_rules_take_priority(rules_file: str) -> None:
    service = CategorizerService(rules_path=rules_file)

    result = service.classify("STARBUCKS MG ROAD")
    assert result.category == "Coffee Club"
    assert result.source == "custom_rules"

    # Texts the custom rules do not cover still reach the built-in table.
    result = service.classify("zomato")
    assert result.category == "Food"
    assert result.source == "keywords"


def test_fallback_when_nothing_matches() -> None:
    service = CategorizerService()

    for text in ("", None, "xyzzy"):
        result = service.classify(text)
        assert result.category == "Other"
        assert result.subcategory is None
        assert result.confidence == FALLBACK_CONFIDENCE
        assert result.source == "fallback"


def test_chain_stops_at_first_result() -> None:
    with patch("smart_budget.manager.KeywordClassifier") as mock_cls, \
         patch("smart_budget.manager.load_rules_file", return_value=["rule"]):
        instance = mock_cls.return_value
        service = CategorizerService(rules_path="rules.json")

    assert len(service.classifiers) == 2
    instance.classify.return_value = CategorizationResult(
        category="Mocked", confidence=0.9, source="custom_rules"
    )
    result = service.classify("anything")
    assert result.category == "Mocked"
    # Both entries share one mock instance, so a single call means the chain stopped.
    assert instance.classify.call_count == 1


def test_categorize_fields_joins_merchant_and_description() -> None:
    service = CategorizerService()

    assert service.categorize_fields("Corner Shop", "netflix renewal").category == "Entertainment"
    assert service.categorize_fields(None, None).category == "Other"


def test_classify_is_repeatable() -> None:
    service = CategorizerService()

    for text in ("UBER EATS order", "", "xyzzy"):
        assert service.classify(text) == service.classify(text)
