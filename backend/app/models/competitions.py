"""
backend/app/models/competitions.py

Purpose:
    Pydantic models for the static competition catalog: recurring active
    periods, competition definitions, and the immutable catalog value shared
    by the activity window resolver and the match weight scorer.

Dependencies:
    - calendar
    - enum.Enum
    - pydantic
"""

from __future__ import annotations

import calendar
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Leap year so an omitted February end day covers the 29th.
_REFERENCE_LEAP_YEAR = 2000


def last_day_of_month(month: int) -> int:
    return calendar.monthrange(_REFERENCE_LEAP_YEAR, int(month))[1]


class MonthDay(NamedTuple):
    """Calendar position without a year; Feb 29 is a valid value."""

    month: int
    day: int


class CompetitionType(str, Enum):
    LEAGUE = "league"
    CUP = "cup"
    QUALIFIER = "qualifier"
    TOURNAMENT = "tournament"
    CONTINENTAL = "continental"


class PeriodBound(BaseModel):
    month: int = Field(ge=1, le=12)
    day: int | None = Field(default=None, ge=1, le=31)

    model_config = ConfigDict(frozen=True)


class ActivePeriod(BaseModel):
    """Recurring date range; wraps the year boundary when start.month > end.month.

    Omitted days are filled at validation time: start defaults to the 1st,
    end to the last day of its month. Explicit days past the month end are
    clamped (June 31 -> June 30).
    """

    start: PeriodBound
    end: PeriodBound

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _fill_days(cls, data):
        if not isinstance(data, dict):
            return data
        out = dict(data)
        out["start"] = _filled_bound(data.get("start"), is_end=False)
        out["end"] = _filled_bound(data.get("end"), is_end=True)
        return out

    @property
    def wraps_year(self) -> bool:
        return self.start.month > self.end.month

    @property
    def start_key(self) -> MonthDay:
        return MonthDay(self.start.month, int(self.start.day or 1))

    @property
    def end_key(self) -> MonthDay:
        return MonthDay(self.end.month, int(self.end.day or last_day_of_month(self.end.month)))


def _filled_bound(raw, *, is_end: bool):
    """Fill or clamp the day of a raw bound; out-of-range values are left for field validation."""
    if isinstance(raw, PeriodBound):
        raw = raw.model_dump()
    if not isinstance(raw, dict):
        return raw
    month = raw.get("month")
    if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
        return raw
    day = raw.get("day")
    last_day = last_day_of_month(month)
    if day is None:
        return {**raw, "day": last_day if is_end else 1}
    if isinstance(day, int) and not isinstance(day, bool) and last_day < day <= 31:
        return {**raw, "day": last_day}
    return raw


class Competition(BaseModel):
    id: str = Field(min_length=1)
    rank: int = Field(ge=1)
    name: str
    short_name: str | None = None
    tier: int | None = None
    competition_type: CompetitionType = CompetitionType.LEAGUE
    region: str | None = None
    country: str | None = None
    external_id: str | None = None
    always_available: bool = False
    active_periods: tuple[ActivePeriod, ...] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("tier", mode="before")
    @classmethod
    def _known_tier(cls, value):
        # Anything outside 1..4 scores as the default tier.
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value if 1 <= value <= 4 else None

    @field_validator("external_id", mode="before")
    @classmethod
    def _blank_external_id(cls, value):
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @property
    def is_fallback_candidate(self) -> bool:
        return self.always_available or self.competition_type == CompetitionType.QUALIFIER


class LeaguePriority(NamedTuple):
    """Position in the feed priority list and the tier it scores with."""

    order: int
    tier: int


class CatalogRejection(BaseModel):
    competition_id: str
    reason: str

    model_config = ConfigDict(frozen=True)


class CompetitionCatalog(BaseModel):
    """Rank-ordered, validated competitions plus definitions rejected at load."""

    competitions: tuple[Competition, ...] = ()
    rejected: tuple[CatalogRejection, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get(self, competition_id: str) -> Competition | None:
        for competition in self.competitions:
            if competition.id == competition_id:
                return competition
        return None
