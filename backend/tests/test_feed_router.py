"""
backend/tests/test_feed_router.py

Purpose:
    Contract tests for /api/feed endpoints: competition plan for a reference
    day, ranked weighted matches with full breakdowns, payload normalization,
    and the platform validation error shape.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def client(small_catalog):
    with TestClient(create_app(catalog=small_catalog)) as test_client:
        yield test_client


def test_health_reports_catalog_size(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "competitions": 5, "rejected": 0}


def test_competition_plan_for_autumn_day(client):
    resp = client.get("/api/feed/competitions", params={"on": "2025-10-18"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["reference_date"] == "2025-10-18"
    assert [c["id"] for c in body["active"]] == ["champions-league", "premier-league", "mls", "liga-mx"]
    assert [c["id"] for c in body["fallback"]] == ["wc-qual-uefa", "mls", "liga-mx"]
    assert [c["id"] for c in body["selected"]] == ["champions-league", "premier-league", "mls"]
    assert body["selected_source"] == "active"
    assert body["date_range"]["start"].startswith("2025-10-17T00:00:00")
    assert body["date_range"]["end"].startswith("2025-10-23T00:00:00")
    assert resp.headers["X-Request-ID"]


def test_competition_plan_rejects_bad_date(client):
    resp = client.get("/api/feed/competitions", params={"on": "2025-13-40"})

    assert resp.status_code == 422
    body = resp.json()
    assert body["detail"] == "Validation error."
    assert body["errors"][0]["field"] == "on"


def test_top_matches_ranks_with_breakdown(client):
    payload = {
        "now": "2025-10-18T18:00:00Z",
        "limit": 2,
        "matches": [
            {
                "id": 1,
                "competition_ref": "liga-mx",
                "stage": "Regular Season - 12",
                "home_team_id": 5,
                "away_team_id": 6,
                "kickoff_timestamp": "2025-10-08T18:00:00Z",
            },
            {
                "id": 2,
                "competition_ref": "2486",
                "stage": "Final",
                "home_team_id": 10,
                "away_team_id": 20,
                "kickoff_timestamp": "2025-10-18T16:00:00Z",
            },
            {
                "id": 3,
                "competition_ref": "premier-league",
                "stage": "regular",
                "home_team_id": 30,
                "away_team_id": 40,
                "kickoff_timestamp": "2025-10-17T16:00:00Z",
                "is_derby": True,
            },
        ],
        "standings": {
            "2486": [{"team_id": 10, "position": 1}, {"team_id": 20, "position": 3}],
            "premier-league": [{"team_id": 30, "position": "bad"}],
        },
        "form": {
            "2486": [
                {"team_id": 10, "matches_played": 6, "wins": 5},
                {"team_id": 20, "matches_played": 6, "wins": 4},
            ],
        },
    }

    resp = client.post("/api/feed/top-matches", json=payload)

    assert resp.status_code == 200
    body = resp.json()
    assert body["total_candidates"] == 3
    assert [item["match"]["id"] for item in body["items"]] == [2, 3]
    top = body["items"][0]["weight"]
    assert top == {
        "league_weight": 35.0,
        "stage_weight": 40.0,
        "team_weight": 40.0,
        "form_weight": 20.0,
        "time_weight": 10.0,
        "total": 145.0,
    }
    derby = body["items"][1]["weight"]
    assert derby["stage_weight"] == 35.0
    assert derby["team_weight"] == 12.0
    assert derby["form_weight"] == 0.0


def test_top_matches_rejects_negative_limit(client):
    resp = client.post("/api/feed/top-matches", json={"matches": [], "limit": -1})

    assert resp.status_code == 422
    assert resp.json()["errors"][0]["field"] == "limit"


def test_normalize_counts_unresolved_payloads(client):
    resp = client.post(
        "/api/feed/normalize",
        json={
            "payloads": [
                {
                    "id": 7,
                    "league_id": 2486,
                    "home_team_id": 1,
                    "away_team_id": 2,
                    "utc_date": "2025-10-19T19:00:00Z",
                    "score": {"home": 0, "away": 0},
                },
                {"id": 8, "league_id": 2486},
            ]
        },
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["unresolved"] == 1
    assert len(body["items"]) == 1
    item = body["items"][0]
    assert item["match"]["home_score"] == 0
    assert item["sources"]["competition_ref"] == "league_id"
    assert item["sources"]["kickoff_timestamp"] == "utc_date"


def test_normalize_tolerates_malformed_score_text(client):
    resp = client.post(
        "/api/feed/normalize",
        json={
            "payloads": [
                {
                    "id": 9,
                    "league_id": 33973,
                    "home_team_id": 1,
                    "away_team_id": 2,
                    "utc_date": "2025-10-19T19:00:00Z",
                    "home_score": "--1",
                    "away_score": "²",
                },
            ]
        },
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["unresolved"] == 0
    match = body["items"][0]["match"]
    assert (match["home_score"], match["away_score"]) == (None, None)
