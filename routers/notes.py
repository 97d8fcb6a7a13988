# routers/notes.py
import uuid
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from brain import parse_notes_text
from core.logging import logger, log_event
from models import ErrorResponse, ParseNotesRequest, ParseNotesResponse

router = APIRouter()

@router.post(
    "/api/parse-notes",
    response_model=ParseNotesResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Extract intake fields from meeting notes",
    tags=["notes"],
)
def parse_notes(body: Optional[ParseNotesRequest] = None):
    """
    Runs the rule engine over the notes and wraps the result as
    { success, data, originalNotes }.

    - no notes in the body -> 400 { error }
    - anything unexpected  -> 500 { success: false, error } (details only in the log)
    """
    notes = body.notes if body else None
    if not notes:
        return JSONResponse(status_code=400, content={"error": "No notes provided"})

    request_id = str(uuid.uuid4())

    try:
        result = parse_notes_text(notes)

        logger.info(
            "parse-notes ok (request_id=%s, chars=%d, client=%r)",
            request_id,
            len(notes),
            result.client_name,
        )
        log_event(
            request_id,
            {
                "type": "parse_notes",
                "input_chars": len(notes),
                "result": result.to_payload(),
            },
        )
    except Exception:
        logger.exception("parse-notes failed (request_id=%s)", request_id)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to parse notes"},
        )

    return ParseNotesResponse(success=True, data=result, originalNotes=notes)
