# -*- coding: utf-8 -*-
"""
brain package

Rule-based extraction engine that turns free-text meeting notes into
project intake fields (client, project type, size, industry, timeline,
services, budget).

Callers (app_fastapi.py, main.py) normally only use:

- parse_notes_text(text):
    runs every extractor over the notes and returns an ExtractionResult.

Module layout:

- utils_text     : normalization, substring and first-match helpers
- client_rules   : client name / client size / industry
- project_rules  : project title / timeline / services / budget
- notes_engine   : ExtractionResult and the parse_notes_text orchestrator
"""

from .client_rules import extract_client_name, extract_client_size, extract_industry
from .notes_engine import ExtractionResult, parse_notes_text
from .project_rules import (
    extract_budget,
    extract_project_title,
    extract_services,
    extract_timeline,
)

__all__ = [
    "ExtractionResult",
    "parse_notes_text",
    "extract_client_name",
    "extract_client_size",
    "extract_industry",
    "extract_project_title",
    "extract_timeline",
    "extract_services",
    "extract_budget",
]
