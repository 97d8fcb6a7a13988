# app_fastapi.py
# -*- coding: utf-8 -*-

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# config / logging come from the core package
from core.config import CORS_ORIGINS, HOST, PORT
from core.logging import logger
from routers import health, notes


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server running on http://localhost:%d", PORT)
    logger.info("Ready to parse meeting notes!")
    yield
    logger.info("Server shutting down")


# ============================================================
# FastAPI app
# ============================================================

app = FastAPI(
    title="Meeting Notes Intake API",
    description="""
Turns free-text client meeting notes into **project intake fields**.

- The frontend posts the raw notes to `/api/parse-notes`.
- The backend pulls out, with plain keyword / regex rules (no AI):
  - client name, project title
  - client size (small / medium / large / enterprise) and industry
  - timeline in weeks, requested services, budget
""",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: "*" while developing, restrict with CORS_ORIGINS when deployed
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(notes.router)


# ============================================================
# uvicorn entry point
# ============================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app_fastapi:app",
        host=HOST,
        port=PORT,
        reload=True,
    )
