"""
backend/tests/conftest.py

Purpose:
    Shared pytest bootstrap for backend import paths plus small catalog
    fixtures used across resolver, scorer and router tests.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

_THIS_FILE = Path(__file__).resolve()
_BACKEND_DIR = _THIS_FILE.parents[1]

if str(_BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(_BACKEND_DIR))

from app.services.competition_catalog_service import load_catalog  # noqa: E402


def competition(
    comp_id: str,
    rank: int,
    *,
    tier: int | None = 1,
    periods: list[dict] | None = None,
    **extra,
) -> dict:
    return {
        "id": comp_id,
        "rank": rank,
        "tier": tier,
        "name": comp_id.replace("-", " ").title(),
        "active_periods": periods or [{"start": {"month": 8}, "end": {"month": 5}}],
        **extra,
    }


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def small_catalog():
    return load_catalog(
        [
            competition("premier-league", 3, tier=1, external_id="33973"),
            competition("champions-league", 2, tier=2, external_id="2486", periods=[
                {"start": {"month": 9}, "end": {"month": 12}},
                {"start": {"month": 2}, "end": {"month": 5}},
            ]),
            competition("mls", 17, tier=4, external_id="216087", periods=[
                {"start": {"month": 2}, "end": {"month": 11}},
            ]),
            competition("liga-mx", 20, tier=4, periods=[
                {"start": {"month": 1}, "end": {"month": 12}},
            ]),
            competition("wc-qual-uefa", 15, tier=2, competition_type="qualifier", external_id="9001", periods=[
                {"start": {"month": 3}, "end": {"month": 3}},
            ]),
        ],
        fallback_ids={"mls", "liga-mx"},
    )
