# -*- coding: utf-8 -*-
"""
brain.utils_text

Shared text helpers for the notes extractors.

Role
----
- normalize(text): lower-cased copy of the notes used for keyword checks
- contains_any(text, keywords): True if any keyword is a substring of text
- first_match(text, rules, default): run an ordered (keywords, value) rule
  table and return the value of the first rule that hits
- first_count(pattern, text): first captured count as a digit string
- multiply_digits(digits, factor): digit-string multiplication

Every extractor in brain.client_rules / brain.project_rules goes through
these helpers, so matching stays plain substring / regex matching.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

# int() <-> str() conversions above ~4300 digits raise on Python 3.11+
MAX_INT_DIGITS = 4000

# (keywords, value) pairs. Order of the table is the priority order.
Rule = Tuple[Sequence[str], T]


# ------------------------------------------------------------
# 1. Normalization
# ------------------------------------------------------------

def normalize(text: Optional[str]) -> str:
    """
    Lower-case the notes for keyword comparison.

    Punctuation and line breaks are kept as-is: several keywords
    ("e-commerce", "no rush") depend on them.
    """
    if not text:
        return ""
    return text.lower()


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    """
    True if any of keywords appears in text.
    Assumes text already went through normalize().
    """
    if not text:
        return False

    return any(kw in text for kw in keywords)


# ------------------------------------------------------------
# 2. Rule table helpers
# ------------------------------------------------------------

def first_match(text: str, rules: Sequence[Rule], default: T) -> T:
    """
    Ordered first-match evaluation.

    rules are tried top to bottom, the first rule with any keyword present
    decides the value and the rest are ignored. default when nothing hits.
    """
    for keywords, value in rules:
        if contains_any(text, keywords):
            return value
    return default


def first_count(
    pattern: "re.Pattern[str]", text: str, positive: bool = False
) -> Optional[str]:
    """
    Digit string of group(1) for the first match of pattern, or None.

    Leading zeros are dropped ("007" -> "7", "000" -> "0"). With
    positive=True zero counts are skipped and later matches are tried.
    The value stays a string so arbitrarily long numerals never go
    through int().
    """
    if not text:
        return None

    for m in pattern.finditer(text):
        digits = m.group(1).lstrip("0")
        if digits:
            return digits
        if not positive:
            return "0"
    return None


def multiply_digits(digits: str, factor: int) -> str:
    """digits * factor as a digit string, for a small positive factor."""
    if len(digits) <= MAX_INT_DIGITS:
        return str(int(digits) * factor)

    # long-hand, right to left
    out: List[str] = []
    carry = 0
    for ch in reversed(digits):
        carry, d = divmod(int(ch) * factor + carry, 10)
        out.append(str(d))
    while carry:
        carry, d = divmod(carry, 10)
        out.append(str(d))
    return "".join(reversed(out))
