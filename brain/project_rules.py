# -*- coding: utf-8 -*-
"""
brain.project_rules

Extractors for what the client wants.

- extract_project_title(text): first-match keyword table -> project title
- extract_timeline(text): explicit weeks/months, then urgency keywords
- extract_services(text): additive, every matching service tag is kept
- extract_budget(text): "$" amount, then "budget ... <number>"

Note
----
extract_services is the only extractor that is NOT first-match: each
trigger is checked on its own and appended in table order.
"""

from __future__ import annotations

import logging
import re
from typing import List, Literal, Optional, Tuple

from .utils_text import (
    contains_any,
    first_count,
    first_match,
    multiply_digits,
    normalize,
)

logger = logging.getLogger("notes_intake.brain")

ServiceTag = Literal["logo", "branding", "website", "print", "packaging", "marketing"]

DEFAULT_PROJECT_TITLE = "Design Project"
DEFAULT_TIMELINE_WEEKS = "4"
DEFAULT_SERVICES: Tuple[ServiceTag, ...] = ("branding",)
BUDGET_NOT_FOUND = ""

WEEKS_PER_MONTH = 4


# ------------------------------------------------------------
# 1. Project title
# ------------------------------------------------------------

PROJECT_TITLE_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("rebrand", "brand identity"), "Brand Identity Redesign"),
    (("website", "web design"), "Website Design Project"),
    (("logo",), "Logo Design"),
    (("packaging",), "Packaging Design"),
    (("marketing", "campaign"), "Marketing Campaign Design"),
]


def extract_project_title(text: str) -> str:
    return first_match(normalize(text), PROJECT_TITLE_RULES, DEFAULT_PROJECT_TITLE)


# ------------------------------------------------------------
# 2. Timeline (weeks)
# ------------------------------------------------------------

WEEKS_PATTERN = re.compile(r"([0-9]+)\s*weeks?", re.IGNORECASE)
MONTHS_PATTERN = re.compile(r"([0-9]+)\s*months?", re.IGNORECASE)

TIMELINE_KEYWORD_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("asap", "urgent", "rush"), "2"),
    (("soon", "quickly"), "3"),
    (("flexible", "no rush"), "8"),
]


def extract_timeline(text: str) -> str:
    """
    Timeline as a string holding a week count.

    Priority
    --------
    1) "<N> weeks"   -> N
    2) "<N> months"  -> N * 4
    3) asap / urgent / rush -> 2
    4) soon / quickly       -> 3
    5) flexible / no rush   -> 8
    6) otherwise            -> 4

    "no rush" contains "rush", so rule 3 fires first for it; the table
    order is kept as-is. Zero counts are skipped, the first positive
    "<N> weeks" (then "<N> months") mention is used.
    """
    weeks: Optional[str] = first_count(WEEKS_PATTERN, text, positive=True)
    if weeks:
        return weeks

    months = first_count(MONTHS_PATTERN, text, positive=True)
    if months:
        return multiply_digits(months, WEEKS_PER_MONTH)

    return first_match(normalize(text), TIMELINE_KEYWORD_RULES, DEFAULT_TIMELINE_WEEKS)


# ------------------------------------------------------------
# 3. Services (additive)
# ------------------------------------------------------------

SERVICE_TRIGGERS: List[Tuple[ServiceTag, Tuple[str, ...]]] = [
    ("logo", ("logo",)),
    ("branding", ("brand", "identity")),
    ("website", ("website", "web")),
    ("print", ("print", "brochure", "flyer")),
    ("packaging", ("packaging", "product design")),
    ("marketing", ("marketing", "campaign", "social")),
]


def extract_services(text: str) -> Tuple[ServiceTag, ...]:
    """
    Every service whose trigger words appear, in SERVICE_TRIGGERS order.
    Each tag is checked once, so the result has no duplicates.
    Falls back to ("branding",) when nothing is detected.
    """
    norm = normalize(text)
    services = [tag for tag, keywords in SERVICE_TRIGGERS if contains_any(norm, keywords)]

    if not services:
        return DEFAULT_SERVICES
    return tuple(services)


# ------------------------------------------------------------
# 4. Budget
# ------------------------------------------------------------

# "$12,500" / "$12500". The grouped form is tried first so that "$12500"
# is not cut down to "$125".
DOLLAR_AMOUNT_PATTERN = re.compile(r"\$([0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)")

# "budget" and the number may be far apart, across lines too.
BUDGET_WORD_PATTERN = re.compile(r"budget.*?([0-9]+,?[0-9]*)", re.IGNORECASE | re.DOTALL)


def _strip_grouping(amount: str) -> str:
    # Only the first comma is removed: "1,234,567" -> "1234,567".
    return amount.replace(",", "", 1)


def extract_budget(text: str) -> str:
    """
    Budget as a digit string, or "" when no amount is found.

    Multi-comma amounts keep every comma after the first one.
    """
    if not text:
        return BUDGET_NOT_FOUND

    for pattern in (DOLLAR_AMOUNT_PATTERN, BUDGET_WORD_PATTERN):
        m = pattern.search(text)
        if m:
            return _strip_grouping(m.group(1))

    return BUDGET_NOT_FOUND
