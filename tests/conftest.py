"""
Pytest configuration: make sure `import prescripta` works regardless of
where pytest is invoked, and provide shared case fixtures.

It prepends the project root (one directory above *tests/*) to
``sys.path`` **before** any tests are collected.
"""

import os
import sys
from datetime import date
from pathlib import Path

import pytest

# /path/to/project/tests -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# headless plotting
os.environ.setdefault("MPLBACKEND", "Agg")

from prescripta.events import EventStore  # noqa: E402
from prescripta.models import CaseConfiguration  # noqa: E402


@pytest.fixture
def config():
    """Offense on 10/01/2020, five‑year maximum penalty."""
    return CaseConfiguration(crime_date=date(2020, 1, 10), max_penalty_years=5)


@pytest.fixture
def events():
    return EventStore.default()
