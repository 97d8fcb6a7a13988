# routers/health.py
from fastapi import APIRouter

from models import MessageResponse

router = APIRouter()

@router.get("/", summary="Health check", tags=["health"])
def root():
    return {"message": "Meeting notes intake API is running"}


@router.get(
    "/api/test",
    response_model=MessageResponse,
    summary="Frontend connectivity test",
    tags=["health"],
)
def api_test():
    return MessageResponse(message="Server is working!")
