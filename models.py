# models.py
# -*- coding: utf-8 -*-
"""
Request / response bodies of the HTTP layer.

The extraction record itself (ExtractionResult) lives in brain.notes_engine;
these models only describe the envelope around it.
"""

from typing import Optional

from pydantic import BaseModel, Field

from brain import ExtractionResult


class ParseNotesRequest(BaseModel):
    """
    Body of POST /api/parse-notes.
    - notes: raw meeting notes. Missing or empty -> 400.
    """
    notes: Optional[str] = Field(
        default=None,
        description="Free-text meeting notes to extract intake fields from",
        examples=["Client: Acme Corp, 50 employees. Need a new logo, budget $12,500."],
    )


class ParseNotesResponse(BaseModel):
    """
    Successful parse.
    - data: extracted fields, serialised with camelCase keys
    - originalNotes: the notes exactly as received
    """
    success: bool = True
    data: ExtractionResult = Field(
        ...,
        description="clientBudget is '' when no amount was found",
    )
    originalNotes: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class MessageResponse(BaseModel):
    message: str
