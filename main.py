# -*- coding: utf-8 -*-
"""
main.py

Console entry point for the meeting-notes extraction engine.

Role
--------------------------------------
1. File mode
   - python main.py notes1.txt notes2.txt
   - each file is parsed and printed as one JSON object

2. Interactive mode
   - python main.py
   - type or paste notes, a blank line submits, exit/quit ends

Only brain.parse_notes_text is used; the HTTP server lives in app_fastapi.py.
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

from brain import ExtractionResult, parse_notes_text


def format_result(result: ExtractionResult) -> str:
    """Human-readable field listing for the console."""
    budget = f"${result.client_budget}" if result.client_budget else "(not found)"
    lines = [
        f" - Client   : {result.client_name}",
        f" - Project  : {result.project_title}",
        f" - Size     : {result.client_size}",
        f" - Industry : {result.industry}",
        f" - Timeline : {result.timeline} weeks",
        f" - Services : {', '.join(result.services)}",
        f" - Budget   : {budget}",
    ]
    return "\n".join(lines)


# =====================================================================
#  mode 1: files
# =====================================================================
def run_file_mode(paths: List[str]) -> int:
    exit_code = 0
    for path in paths:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            print(f"[ERROR] {path}: {e}", file=sys.stderr)
            exit_code = 1
            continue

        payload = parse_notes_text(text).to_payload()
        print(json.dumps({"file": path, "data": payload}, ensure_ascii=False))
    return exit_code


# =====================================================================
#  mode 2: interactive
# =====================================================================
def _read_notes() -> Optional[str]:
    """Lines until a blank line. None on exit/quit or EOF."""
    lines: List[str] = []
    while True:
        try:
            line = input("notes > " if not lines else "      > ")
        except (EOFError, KeyboardInterrupt):
            return None

        if not lines and line.strip().lower() in ("exit", "quit"):
            return None
        if not line.strip():
            if lines:
                return "\n".join(lines)
            continue
        lines.append(line)


def run_text_mode() -> int:
    print("\n[notes intake] paste meeting notes, blank line to submit (exit to quit)")

    while True:
        text = _read_notes()
        if text is None:
            print("\nBye.")
            return 0

        result = parse_notes_text(text)
        print(format_result(result))
        print("FE:" + json.dumps(result.to_payload(), ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        return run_file_mode(args)
    return run_text_mode()


if __name__ == "__main__":
    sys.exit(main())
