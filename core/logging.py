# core/logging.py
# -*- coding: utf-8 -*-

import sys
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from . import config

# ------------------------------------------------
# terminal logger
# ------------------------------------------------
logger = logging.getLogger("notes_intake")
logger.setLevel(config.LOG_LEVEL)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_event(request_id: str, payload: Dict[str, Any]) -> None:
    """
    JSONL log for later analysis, one line per parse request.
    No-op unless EVENT_LOG_ENABLED is set.
    """
    if not config.EVENT_LOG_ENABLED:
        return

    config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    ts = datetime.now(timezone.utc).isoformat()
    log_path = config.LOG_DIR / f"{request_id}.jsonl"

    record = {
        "timestamp": ts,
        "request_id": request_id,
        **payload,
    }

    with log_path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
