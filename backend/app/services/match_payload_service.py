"""
backend/app/services/match_payload_service.py

Purpose:
    Normalize heterogeneous provider/database match payloads into the Match
    model consumed by the scorer. Each field is resolved by an ordered tuple
    of named extraction strategies; the first one yielding a value wins and
    its name is kept as the field's source for debugging.

Dependencies:
    - pydantic.ValidationError
    - app.models.feed
    - app.utils
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, NamedTuple

from pydantic import ValidationError

from app.models.feed import Match
from app.utils import parse_utc

logger = logging.getLogger("matchfeed.match_payload")

DEFAULT_SOURCE = "default"
_INT_TEXT_RE = re.compile(r"-?\d+", re.ASCII)


class FieldStrategy(NamedTuple):
    name: str
    extract: Callable[[Mapping[str, Any]], Any]


class ExtractedField(NamedTuple):
    value: Any
    source: str


class NormalizedMatch(NamedTuple):
    match: Match | None
    sources: dict[str, str]


def _path(*keys: str) -> Callable[[Mapping[str, Any]], Any]:
    """Extractor walking nested mappings; missing links yield None."""

    def _extract(payload: Mapping[str, Any]) -> Any:
        node: Any = payload
        for key in keys:
            if not isinstance(node, Mapping):
                return None
            node = node.get(key)
        if isinstance(node, str) and not node.strip():
            return None
        return node

    return _extract


def _scalar_path(*keys: str) -> Callable[[Mapping[str, Any]], Any]:
    """Like _path, but nested objects do not count as a value."""
    inner = _path(*keys)

    def _extract(payload: Mapping[str, Any]) -> Any:
        value = inner(payload)
        return None if isinstance(value, (Mapping, list)) else value

    return _extract


def _int_path(*keys: str) -> Callable[[Mapping[str, Any]], Any]:
    inner = _path(*keys)

    def _extract(payload: Mapping[str, Any]) -> Any:
        value = inner(payload)
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INT_TEXT_RE.fullmatch(value.strip()):
            return int(value.strip())
        return None

    return _extract


def _datetime_path(*keys: str) -> Callable[[Mapping[str, Any]], Any]:
    inner = _path(*keys)

    def _extract(payload: Mapping[str, Any]) -> Any:
        value = inner(payload)
        if not isinstance(value, (str, datetime)):
            return None
        try:
            return parse_utc(value)
        except ValueError:
            return None

    return _extract


def _date_with_time(payload: Mapping[str, Any]) -> Any:
    """Combine a bare ``date`` with an ``HH:MM`` ``time`` field."""
    raw_date = payload.get("date") or payload.get("match_date")
    raw_time = payload.get("time")
    if not isinstance(raw_date, str) or not isinstance(raw_time, str):
        return None
    parts = raw_time.strip().split(":")
    if len(parts) < 2 or not parts[0].isdigit() or not parts[1].isdigit():
        return None
    try:
        day = parse_utc(raw_date[:10])
        return day.replace(hour=int(parts[0]), minute=int(parts[1]), second=0, microsecond=0)
    except ValueError:
        return None


MATCH_ID_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("id", _scalar_path("id")),
    FieldStrategy("match_id", _scalar_path("match_id")),
    FieldStrategy("fixture.id", _scalar_path("fixture", "id")),
)

COMPETITION_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("league.id", _scalar_path("league", "id")),
    FieldStrategy("league_id", _scalar_path("league_id")),
    FieldStrategy("competition_id", _scalar_path("competition_id")),
    FieldStrategy("competition.id", _scalar_path("competition", "id")),
)

HOME_TEAM_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("homeTeam.id", _scalar_path("homeTeam", "id")),
    FieldStrategy("home_team_id", _scalar_path("home_team_id")),
    FieldStrategy("home_team.id", _scalar_path("home_team", "id")),
    FieldStrategy("teams.home.id", _scalar_path("teams", "home", "id")),
)

AWAY_TEAM_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("awayTeam.id", _scalar_path("awayTeam", "id")),
    FieldStrategy("away_team_id", _scalar_path("away_team_id")),
    FieldStrategy("away_team.id", _scalar_path("away_team", "id")),
    FieldStrategy("teams.away.id", _scalar_path("teams", "away", "id")),
)

HOME_SCORE_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("score.home", _int_path("score", "home")),
    FieldStrategy("score.full_time.home", _int_path("score", "full_time", "home")),
    FieldStrategy("home_score", _int_path("home_score")),
)

AWAY_SCORE_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("score.away", _int_path("score", "away")),
    FieldStrategy("score.full_time.away", _int_path("score", "full_time", "away")),
    FieldStrategy("away_score", _int_path("away_score")),
)

KICKOFF_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("utc_date", _datetime_path("utc_date")),
    FieldStrategy("date+time", _date_with_time),
    FieldStrategy("date", _datetime_path("date")),
    FieldStrategy("match_date", _datetime_path("match_date")),
    FieldStrategy("kickoff", _datetime_path("kickoff")),
)

STAGE_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("stage", _scalar_path("stage")),
    FieldStrategy("round", _scalar_path("round")),
    FieldStrategy("league.round", _scalar_path("league", "round")),
)

STATUS_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("status.long", _scalar_path("status", "long")),
    FieldStrategy("status.description", _scalar_path("status", "description")),
    FieldStrategy("status", _scalar_path("status")),
)

DERBY_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("is_derby", _path("is_derby")),
    FieldStrategy("isDerby", _path("isDerby")),
)

RIVALRY_STRATEGIES: tuple[FieldStrategy, ...] = (
    FieldStrategy("rivalry_factor", _path("rivalry_factor")),
    FieldStrategy("rivalryFactor", _path("rivalryFactor")),
)


def extract_field(
    payload: Mapping[str, Any],
    strategies: tuple[FieldStrategy, ...],
    default: Any = None,
) -> ExtractedField:
    """Return the first non-None strategy result, tagged with the strategy name."""
    for strategy in strategies:
        value = strategy.extract(payload)
        if value is not None:
            return ExtractedField(value, strategy.name)
    return ExtractedField(default, DEFAULT_SOURCE)


_REQUIRED = ("id", "competition_ref", "home_team_id", "away_team_id", "kickoff_timestamp")


def normalize_match_payload(payload: Any) -> NormalizedMatch:
    """Build a Match from a provider payload; ``match`` is None when a required field is missing."""
    if not isinstance(payload, Mapping):
        return NormalizedMatch(None, {})

    fields: dict[str, ExtractedField] = {
        "id": extract_field(payload, MATCH_ID_STRATEGIES),
        "competition_ref": extract_field(payload, COMPETITION_STRATEGIES),
        "home_team_id": extract_field(payload, HOME_TEAM_STRATEGIES),
        "away_team_id": extract_field(payload, AWAY_TEAM_STRATEGIES),
        "kickoff_timestamp": extract_field(payload, KICKOFF_STRATEGIES),
        "stage": extract_field(payload, STAGE_STRATEGIES, "regular"),
        "status": extract_field(payload, STATUS_STRATEGIES, "Scheduled"),
        "home_score": extract_field(payload, HOME_SCORE_STRATEGIES),
        "away_score": extract_field(payload, AWAY_SCORE_STRATEGIES),
        "is_derby": extract_field(payload, DERBY_STRATEGIES, False),
        "rivalry_factor": extract_field(payload, RIVALRY_STRATEGIES),
    }
    sources = {name: extracted.source for name, extracted in fields.items()}

    missing = [name for name in _REQUIRED if fields[name].value is None]
    if missing:
        logger.debug("Unresolvable match payload, missing %s", ", ".join(missing))
        return NormalizedMatch(None, sources)

    data = {name: extracted.value for name, extracted in fields.items()}
    data["stage"] = str(data["stage"])
    data["status"] = str(data["status"])
    if not isinstance(data["is_derby"], bool):
        data["is_derby"] = False
        sources["is_derby"] = DEFAULT_SOURCE
    if isinstance(data["rivalry_factor"], bool) or not isinstance(data["rivalry_factor"], (int, float)):
        data["rivalry_factor"] = None
        sources["rivalry_factor"] = DEFAULT_SOURCE

    try:
        match = Match.model_validate(data)
    except ValidationError as exc:
        logger.debug("Match payload failed validation: %s", exc.errors()[:1])
        return NormalizedMatch(None, sources)
    return NormalizedMatch(match, sources)
