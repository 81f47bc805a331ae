"""Name and car-string normalisation shared by the roster and the matcher."""

from __future__ import annotations

import re
from collections.abc import Iterable

from actiming.constants import CAR_TOKEN_MIN_OVERLAP, UNKNOWN_DRIVER

_WHITESPACE_RE = re.compile(r"\s+")
_CAR_TOKEN_SPLIT_RE = re.compile(r"[\s\-_]+")
_YEAR_RE = re.compile(r"^\d{4}$")
_NAME_PART_SPLIT_RE = re.compile(r"([-'’])")

CAR_TOKEN_STOPWORDS: frozenset[str] = frozenset()


def normalize_text(value: str) -> str:
    """Trimmed, lower-cased text for case-insensitive keys."""
    return value.strip().lower()


def to_name_key(value: str) -> str:
    """Word-order-independent identity key for a driver name.

    "Ivanov  Ivan" and "ivan ivanov" both map to "ivan ivanov".
    """
    words = [word for word in _WHITESPACE_RE.split(normalize_text(value)) if word]
    return " ".join(sorted(words))


def to_car_tokens(car: str) -> tuple[str, ...]:
    """Split a car name into comparable lower-case words.

    Separators are whitespace, hyphens and underscores. Single characters,
    four-digit years and stopwords are dropped.
    """
    tokens = []
    for token in _CAR_TOKEN_SPLIT_RE.split(normalize_text(car)):
        if len(token) <= 1:
            continue
        if _YEAR_RE.match(token):
            continue
        if token in CAR_TOKEN_STOPWORDS:
            continue
        tokens.append(token)
    return tuple(tokens)


def has_declared_car(value: str) -> bool:
    """Empty and "-" mean the roster row does not declare a car."""
    normalized = value.strip()
    return normalized != "" and normalized != "-"


def count_token_overlap(
    a: Iterable[str],
    b: Iterable[str],
    limit: int | None = None,
) -> int:
    """Count distinct tokens present in both collections, stopping at *limit*."""
    other = set(b)
    count = 0
    for token in set(a):
        if token in other:
            count += 1
            if limit is not None and count >= limit:
                break
    return count


def has_car_token_overlap(
    a: Iterable[str],
    b: Iterable[str],
    min_overlap: int = CAR_TOKEN_MIN_OVERLAP,
) -> bool:
    """True when the two token collections share at least *min_overlap* tokens."""
    return count_token_overlap(a, b, limit=min_overlap) >= min_overlap


def _capitalize_part(part: str) -> str:
    if not part or _NAME_PART_SPLIT_RE.fullmatch(part):
        return part
    return part[0].upper() + part[1:]


def normalize_driver_name(raw_name: str) -> str:
    """Title-case a driver name for display.

    Whitespace is collapsed, and parts joined by hyphens or apostrophes are
    capitalised separately ("o'neil-smith" -> "O'Neil-Smith").
    """
    collapsed = _WHITESPACE_RE.sub(" ", raw_name.strip())
    if not collapsed:
        return UNKNOWN_DRIVER

    words = []
    for word in collapsed.lower().split(" "):
        parts = _NAME_PART_SPLIT_RE.split(word)
        words.append("".join(_capitalize_part(part) for part in parts))
    return " ".join(words)
