# -*- coding: utf-8 -*-
"""
brain.notes_engine

Entry point of the notes extraction engine.

parse_notes_text(text) runs every extractor over the same text and packs
the outputs into one ExtractionResult. The extractors share no state and
do not depend on each other's output, so the order of NOTES_EXTRACTORS
only decides the order fields are logged in.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .client_rules import (
    ClientSize,
    Industry,
    extract_client_name,
    extract_client_size,
    extract_industry,
)
from .project_rules import (
    ServiceTag,
    extract_budget,
    extract_project_title,
    extract_services,
    extract_timeline,
)

logger = logging.getLogger("notes_intake.brain")


class ExtractionResult(BaseModel):
    """
    Structured intake fields pulled out of one set of meeting notes.

    Every field except client_budget always carries a value; "" for the
    budget means no amount was found. Serialise with by_alias=True to get
    the camelCase keys the frontend expects.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    client_name: str = Field(..., alias="clientName", min_length=1, examples=["Acme Corp"])
    project_title: str = Field(..., alias="projectTitle", min_length=1, examples=["Logo Design"])
    client_size: ClientSize = Field(..., alias="clientSize")
    industry: Industry
    timeline: str = Field(..., pattern=r"^[1-9][0-9]*$", examples=["4"])
    services: Tuple[ServiceTag, ...] = Field(..., min_length=1)
    client_budget: str = Field("", alias="clientBudget", examples=["12500"])

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with the documented camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


# (field name, extractor). Every extractor is a pure str -> value function.
NOTES_EXTRACTORS: List[Tuple[str, Callable[[str], Any]]] = [
    ("client_name", extract_client_name),
    ("project_title", extract_project_title),
    ("client_size", extract_client_size),
    ("industry", extract_industry),
    ("timeline", extract_timeline),
    ("services", extract_services),
    ("client_budget", extract_budget),
]


def parse_notes_text(text: Optional[str]) -> ExtractionResult:
    """
    Run all extractors over text and return the combined result.

    Never raises for string input; an empty string gives the all-default
    result. None is treated like "".
    """
    text = text or ""

    fields: Dict[str, Any] = {}
    for name, extractor in NOTES_EXTRACTORS:
        fields[name] = extractor(text)

    logger.debug("extracted fields: %s", fields)
    return ExtractionResult(**fields)
