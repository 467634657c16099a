from typing import Any


def parse_keyword_list(raw_keywords: str | None) -> list[str]:
    if not raw_keywords:
        return []
    return normalize_keywords(raw_keywords.split(","))


def normalize_keywords(value: Any) -> list[str]:
    """Lower-case, strip and de-duplicate keywords, keeping their order."""
    if not value:
        return []
    if isinstance(value, str):
        return parse_keyword_list(value)
    if not isinstance(value, (list, tuple)):
        return []

    keywords: list[str] = []
    seen = set()
    for item in value:
        keyword = str(item).strip().lower()
        if keyword and keyword not in seen:
            keywords.append(keyword)
            seen.add(keyword)
    return keywords


def first_keyword_in(text: str, keywords: tuple[str, ...] | list[str]) -> str | None:
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None
