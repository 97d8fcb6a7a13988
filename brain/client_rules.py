# -*- coding: utf-8 -*-
"""
brain.client_rules

Extractors for who the client is.

- extract_client_name(text): labelled field / "meeting with" / legal-entity name
- extract_client_size(text): employee count buckets, then size keywords
- extract_industry(text): first industry whose keyword stem appears

All three are first-match rule lists: rules are tried in a fixed order and
the first hit decides the value. Nothing here raises on odd input, every
field falls back to a default instead.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Literal, Optional, Tuple

from .utils_text import normalize, first_match, first_count

logger = logging.getLogger("notes_intake.brain")

ClientSize = Literal["small", "medium", "large", "enterprise"]
Industry = Literal[
    "technology",
    "finance",
    "healthcare",
    "retail",
    "nonprofit",
    "education",
    "entertainment",
]

CLIENT_NAME_NOT_FOUND = "Client Name Not Found"
DEFAULT_CLIENT_SIZE: ClientSize = "small"
DEFAULT_INDUSTRY: Industry = "technology"


# ------------------------------------------------------------
# 1. Client name
# ------------------------------------------------------------

_ENTITY_SUFFIXES = "corp|corporation|inc|llc|ltd|company|foundation"

CLIENT_NAME_PATTERNS: List["re.Pattern[str]"] = [
    # "Client: Acme Corp", "Organization: Helping Hands"
    re.compile(r"(?:client|company|organization):\s*([^\n,]+)", re.IGNORECASE),
    # "Had a meeting with Jane from Bloom Studio"
    re.compile(r"meeting with\s+([^\n,]+)", re.IGNORECASE),
    # "Brightside Health Foundation", "Acme Inc" (name case-sensitive, suffix not)
    re.compile(
        r"([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*[ \t]+(?i:" + _ENTITY_SUFFIXES + r"))\b"
    ),
]


def extract_client_name(text: str) -> str:
    """
    Client name by pattern priority.

    Only the capture of the first matching pattern is used. A capture that
    is blank after stripping does not count as a match.
    """
    if not text:
        return CLIENT_NAME_NOT_FOUND

    for idx, pattern in enumerate(CLIENT_NAME_PATTERNS):
        m = pattern.search(text)
        if not m:
            continue
        name = m.group(1).strip()
        if name:
            logger.debug("client name: pattern #%d -> %r", idx, name)
            return name

    return CLIENT_NAME_NOT_FOUND


# ------------------------------------------------------------
# 2. Client size
# ------------------------------------------------------------

EMPLOYEE_COUNT_PATTERN = re.compile(r"([0-9]+)\s*employees?", re.IGNORECASE)

# (upper bound inclusive, size). Counts above the last bound are enterprise.
EMPLOYEE_BUCKETS: List[Tuple[int, ClientSize]] = [
    (10, "small"),
    (100, "medium"),
    (1000, "large"),
]

SIZE_KEYWORD_RULES: List[Tuple[Tuple[str, ...], ClientSize]] = [
    (("startup", "small business"), "small"),
    (("medium", "growing company"), "medium"),
    (("large", "established"), "large"),
    (("enterprise", "fortune"), "enterprise"),
]


def size_from_employee_count(count: int) -> ClientSize:
    for upper, size in EMPLOYEE_BUCKETS:
        if count <= upper:
            return size
    return "enterprise"


def extract_client_size(text: str) -> ClientSize:
    """
    Company size bucket.

    An explicit "<N> employees" count always wins over size keywords,
    even when the keywords point at a different bucket.
    """
    count: Optional[str] = first_count(EMPLOYEE_COUNT_PATTERN, text)
    if count is not None:
        # more than 4 digits is past every bucket bound
        if len(count) > 4:
            return "enterprise"
        return size_from_employee_count(int(count))

    return first_match(normalize(text), SIZE_KEYWORD_RULES, DEFAULT_CLIENT_SIZE)


# ------------------------------------------------------------
# 3. Industry
# ------------------------------------------------------------

# Insertion order is the test order. Plain substring checks, so "app" also
# hits "happy"; the stems are kept short on purpose to catch plurals.
INDUSTRY_KEYWORDS: Dict[Industry, Tuple[str, ...]] = {
    "technology": ("tech", "software", "app", "saas", "startup", "digital"),
    "finance": ("finance", "bank", "investment", "financial", "money"),
    "healthcare": ("health", "medical", "hospital", "clinic", "healthcare"),
    "retail": ("retail", "store", "shop", "e-commerce", "sales"),
    "nonprofit": ("nonprofit", "charity", "foundation", "ngo"),
    "education": ("school", "university", "education", "college", "learning"),
    "entertainment": ("entertainment", "media", "film", "music", "gaming"),
}


def extract_industry(text: str) -> Industry:
    return first_match(
        normalize(text),
        [(keywords, industry) for industry, keywords in INDUSTRY_KEYWORDS.items()],
        DEFAULT_INDUSTRY,
    )
