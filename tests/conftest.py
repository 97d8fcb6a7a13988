"""
Test configuration: puts the repo root on sys.path so tests can import
brain.*, core.*, routers.* and app_fastapi without installing the project.
"""

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


SAMPLE_NOTES = (
    "Meeting with Brightside Health, notes:\n"
    "They are a growing company with 45 employees in healthcare.\n"
    "They need a rebrand: new logo, website and brochures.\n"
    "Timeline: 3 months. Budget is $25,000."
)


@pytest.fixture
def sample_notes():
    return SAMPLE_NOTES
