# core/config.py
# -*- coding: utf-8 -*-

import os
from pathlib import Path

from dotenv import load_dotenv

# .env is loaded first so everything below can be overridden there
load_dotenv()

# --------------------------------
# Paths / log directory
# --------------------------------

# project root
BASE_DIR = Path(__file__).resolve().parent.parent

# JSONL event logs (only written when EVENT_LOG_ENABLED is on)
LOG_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "data" / "logs")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
EVENT_LOG_ENABLED = os.getenv("EVENT_LOG_ENABLED", "false").strip().lower() in (
    "1",
    "true",
    "yes",
    "on",
)

# --------------------------------
# HTTP server
# --------------------------------

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

# comma-separated, "*" allows every origin (dev default)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
