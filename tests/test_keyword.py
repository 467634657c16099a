import json

import pytest

from smart_budget.classifiers.keyword import MATCH_CONFIDENCE, KeywordClassifier, load_rules_file
from smart_budget.domain.rules import DEFAULT_RULES
from smart_budget.models import CategoryRule


@pytest.fixture
def classifier() -> KeywordClassifier:
    return KeywordClassifier(DEFAULT_RULES)


@pytest.mark.parametrize(
    ("text", "category", "subcategory"),
    [
        ("SWIGGY ORDER 1234", "Food", "Food Delivery"),
        ("Dominos Pizza", "Food", "Pizza"),
        ("UBER EATS", "Food", "Food Delivery"),
        ("Uber trip", "Transport", "Cab"),
        ("AMAZON", "Shopping", "Online"),
        ("Netflix subscription", "Entertainment", "Streaming"),
        ("Salary for March", "Income", "Salary"),
    ],
)
def test_builtin_rules(classifier: KeywordClassifier, text: str, category: str, subcategory: str) -> None:
    result = classifier.classify(text)
    assert result is not None
    assert result.category == category
    assert result.subcategory == subcategory
    assert result.confidence == MATCH_CONFIDENCE
    assert result.source == "keywords"


def test_first_matching_rule_wins() -> None:
    rules = [
        CategoryRule(category="First", keywords=["coffee"]),
        CategoryRule(category="Second", keywords=["coffee", "beans"]),
    ]
    result = KeywordClassifier(rules).classify("coffee beans")
    assert result is not None
    assert result.category == "First"
    assert result.keyword == "coffee"


def test_match_is_case_insensitive() -> None:
    rules = [CategoryRule(category="Food", keywords=["Swiggy"])]
    result = KeywordClassifier(rules).classify("paid to SwIgGy")
    assert result is not None
    assert result.keyword == "swiggy"


def test_no_match_or_empty_text(classifier: KeywordClassifier) -> None:
    assert classifier.classify("") is None
    assert classifier.classify("xyzzy plugh") is None


def test_fallback_merchant_labels_do_not_match(classifier: KeywordClassifier) -> None:
    for label in ("Bank Transaction", "Email Receipt", "Quick Add"):
        assert classifier.classify(label) is None


def test_category_rule_normalizes_keywords() -> None:
    rule = CategoryRule(category="Food", keywords=" Pizza, pizza ,DOMINOS ")
    assert rule.keywords == ("pizza", "dominos")


def test_load_rules_file(tmp_path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps(
            [
                {"category": "Pets", "subcategory": "Food", "keywords": ["Pedigree", "whiskas"]},
                {"category": "Broken"},
                {"category": "", "keywords": ["x"]},
            ]
        )
    )

    rules = load_rules_file(str(path))
    assert len(rules) == 1
    assert rules[0].category == "Pets"
    assert rules[0].keywords == ("pedigree", "whiskas")


def test_load_rules_file_missing_or_broken(tmp_path) -> None:
    assert load_rules_file(None) == []
    assert load_rules_file(str(tmp_path / "missing.json")) == []

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert load_rules_file(str(broken)) == []

    not_a_list = tmp_path / "object.json"
    not_a_list.write_text(json.dumps({"category": "Pets", "keywords": ["dog"]}))
    assert load_rules_file(str(not_a_list)) == []


@pytest.mark.parametrize(
    "text",
    ["Tata Play cable tv bill", "small business loan EMI", "Toyota service centre"],
)
def test_short_keywords_do_not_match_inside_words(classifier: KeywordClassifier, text: str) -> None:
    assert classifier.classify(text) is None
