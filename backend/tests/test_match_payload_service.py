"""
backend/tests/test_match_payload_service.py

Purpose:
    Verify ordered field-extraction strategies for provider match payloads:
    precedence, source tagging, zero-valued scores, and graceful handling of
    payloads missing required fields.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.services.match_payload_service import (
    COMPETITION_STRATEGIES,
    HOME_SCORE_STRATEGIES,
    FieldStrategy,
    extract_field,
    normalize_match_payload,
)


def _payload(**overrides) -> dict:
    data = {
        "id": 991,
        "league": {"id": 33973, "name": "Premier League"},
        "homeTeam": {"id": 40, "name": "Liverpool"},
        "awayTeam": {"id": 33, "name": "Manchester United"},
        "utc_date": "2025-10-19T15:30:00Z",
        "round": "Regular Season - 8",
        "status": {"long": "Match Finished", "description": "FT"},
        "score": {"home": 0, "away": 2},
    }
    data.update(overrides)
    return data


def test_first_matching_strategy_wins_and_is_tagged():
    payload = {"league": {"id": 7}, "league_id": 8, "competition_id": 9}

    assert extract_field(payload, COMPETITION_STRATEGIES) == (7, "league.id")
    assert extract_field({"league_id": 8, "competition_id": 9}, COMPETITION_STRATEGIES) == (8, "league_id")


def test_default_is_returned_with_default_source():
    assert extract_field({}, COMPETITION_STRATEGIES, "none") == ("none", "default")


def test_zero_score_is_a_value_not_a_miss():
    assert extract_field({"score": {"home": 0}, "home_score": 3}, HOME_SCORE_STRATEGIES) == (0, "score.home")
    assert extract_field({"home_score": "2"}, HOME_SCORE_STRATEGIES) == (2, "home_score")
    assert extract_field({"home_score": " -1 "}, HOME_SCORE_STRATEGIES) == (-1, "home_score")


@pytest.mark.parametrize("raw", ["--1", "\N{SUPERSCRIPT TWO}", "1.5", "+-3", "\N{ARABIC-INDIC DIGIT THREE}"])
def test_non_integer_score_text_falls_through_to_default(raw):
    assert extract_field({"home_score": raw}, HOME_SCORE_STRATEGIES) == (None, "default")

    result = normalize_match_payload(_payload(score=None, home_score=raw, away_score="1"))

    assert result.match is not None
    assert result.match.home_score is None
    assert result.match.away_score == 1
    assert result.sources["home_score"] == "default"


def test_custom_strategies_run_in_order():
    calls: list[str] = []

    def _record(name, value):
        def _extract(payload):
            calls.append(name)
            return value
        return _extract

    strategies = (
        FieldStrategy("first", _record("first", None)),
        FieldStrategy("second", _record("second", "hit")),
        FieldStrategy("third", _record("third", "late")),
    )

    assert extract_field({}, strategies) == ("hit", "second")
    assert calls == ["first", "second"]


def test_normalize_nested_provider_payload():
    result = normalize_match_payload(_payload())

    match = result.match
    assert match is not None
    assert match.id == 991
    assert match.competition_ref == 33973
    assert match.home_team_id == 40
    assert match.away_team_id == 33
    assert match.kickoff_timestamp == datetime(2025, 10, 19, 15, 30, tzinfo=timezone.utc)
    assert match.stage == "Regular Season - 8"
    assert match.status == "Match Finished"
    assert (match.home_score, match.away_score) == (0, 2)
    assert result.sources["competition_ref"] == "league.id"
    assert result.sources["stage"] == "round"
    assert result.sources["home_score"] == "score.home"


def test_normalize_flat_database_row_with_date_and_time():
    row = {
        "match_id": "abc",
        "league_id": 2486,
        "home_team_id": 1,
        "away_team_id": 2,
        "date": "2025-10-21",
        "time": "20:45",
        "status": "Scheduled",
        "home_score": None,
        "is_derby": True,
        "rivalry_factor": 0.9,
    }

    result = normalize_match_payload(row)

    assert result.match is not None
    assert result.match.id == "abc"
    assert result.match.kickoff_timestamp == datetime(2025, 10, 21, 20, 45, tzinfo=timezone.utc)
    assert result.sources["kickoff_timestamp"] == "date+time"
    assert result.sources["status"] == "status"
    assert result.sources["home_score"] == "default"
    assert result.match.home_score is None
    assert result.match.is_derby is True
    assert result.match.rivalry_factor == 0.9
    assert result.match.stage == "regular"


def test_non_boolean_derby_flag_degrades_to_default():
    result = normalize_match_payload(_payload(is_derby="yes", rivalry_factor="high"))

    assert result.match.is_derby is False
    assert result.match.rivalry_factor is None
    assert result.sources["is_derby"] == "default"
    assert result.sources["rivalry_factor"] == "default"


def test_missing_required_fields_yield_no_match():
    payload = _payload()
    del payload["awayTeam"]

    result = normalize_match_payload(payload)

    assert result.match is None
    assert result.sources["away_team_id"] == "default"


def test_unparseable_kickoff_yields_no_match():
    result = normalize_match_payload(_payload(utc_date="not-a-date"))

    assert result.match is None
    assert result.sources["kickoff_timestamp"] == "default"


def test_non_mapping_payload_is_ignored():
    assert normalize_match_payload(["not", "a", "payload"]) == (None, {})
