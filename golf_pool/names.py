"""Match roster golfer names against provider-supplied names.

Matching is exact on a normalized form: case, accents, punctuation and
spacing are ignored, a single-letter middle initial is optional, and
"Last, First" is read as "First Last". There is no edit-distance matching,
so a genuinely different spelling is a non-match.
"""

from __future__ import annotations

from collections.abc import Iterable
import re
from typing import TypeVar
import unicodedata

_NON_ALPHA = re.compile(r"[^a-z\s]")
# Letters NFKD leaves intact.
_TRANSLITERATE = str.maketrans({"ø": "o", "æ": "ae", "ß": "ss", "ł": "l", "đ": "d"})

T = TypeVar("T")


def normalize_name(name: str | None) -> str:
    if not name:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(name))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = stripped.strip().lower().translate(_TRANSLITERATE)
    if "," in cleaned:
        parts = [part.strip() for part in cleaned.split(",") if part.strip()]
        if len(parts) >= 2:
            cleaned = " ".join(parts[1:] + [parts[0]])
    cleaned = _NON_ALPHA.sub("", cleaned)
    return " ".join(cleaned.split())


def _without_middle_initials(normalized: str) -> str:
    tokens = normalized.split()
    if len(tokens) <= 2:
        return normalized
    middle = [token for token in tokens[1:-1] if len(token) > 1]
    return " ".join([tokens[0], *middle, tokens[-1]])


def names_match(roster_name: str | None, provider_name: str | None) -> bool:
    left = normalize_name(roster_name)
    right = normalize_name(provider_name)
    if not left or not right:
        return False
    if left == right:
        return True
    return _without_middle_initials(left) == _without_middle_initials(right)


def find_match(roster_name: str, candidates: Iterable[tuple[str, T]]) -> T | None:
    """Return the value of the first ``(provider_name, value)`` pair naming ``roster_name``."""
    for provider_name, value in candidates:
        if names_match(roster_name, provider_name):
            return value
    return None
