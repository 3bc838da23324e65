"""
backend/app/models/feed.py

Purpose:
    Pydantic models for feed ranking inputs and outputs: candidate matches,
    standings/form snapshot rows, the additive weight breakdown, and the
    request/response shapes of the feed router.

Dependencies:
    - pydantic
    - app.models.competitions
    - app.utils
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from app.models.competitions import Competition
from app.utils import ensure_utc

Identifier = int | str


class Match(BaseModel):
    id: Identifier
    competition_ref: Identifier
    stage: str | None = None
    home_team_id: Identifier
    away_team_id: Identifier
    kickoff_timestamp: datetime
    is_derby: bool = False
    rivalry_factor: float | None = None
    status: str | None = None
    home_score: int | None = None
    away_score: int | None = None

    @field_validator("kickoff_timestamp")
    @classmethod
    def _kickoff_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class TeamStanding(BaseModel):
    team_id: Identifier
    position: int = Field(ge=1)


class TeamForm(BaseModel):
    team_id: Identifier
    matches_played: int = Field(ge=0)
    wins: int = Field(ge=0)


class WeightBreakdown(BaseModel):
    """Additive match significance; total is derived, never stored on its own."""

    league_weight: float = Field(default=0.0, ge=0)
    stage_weight: float = Field(default=0.0, ge=0)
    team_weight: float = Field(default=0.0, ge=0)
    form_weight: float = Field(default=0.0, ge=0)
    time_weight: float = Field(default=0.0, ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return (
            self.league_weight
            + self.stage_weight
            + self.team_weight
            + self.form_weight
            + self.time_weight
        )


class WeightedMatch(BaseModel):
    match: Match
    weight: WeightBreakdown

    @property
    def total(self) -> float:
        return self.weight.total


class MatchDateRange(BaseModel):
    start: datetime
    end: datetime


# ---------- Router payloads ----------

class CompetitionSummary(BaseModel):
    id: str
    rank: int
    name: str
    tier: int | None = None
    external_id: str | None = None

    @classmethod
    def from_competition(cls, competition: Competition) -> "CompetitionSummary":
        return cls(
            id=competition.id,
            rank=competition.rank,
            name=competition.name,
            tier=competition.tier,
            external_id=competition.external_id,
        )


class CompetitionPlanResponse(BaseModel):
    reference_date: date
    active: list[CompetitionSummary]
    fallback: list[CompetitionSummary]
    selected: list[CompetitionSummary]
    selected_source: str
    date_range: MatchDateRange


class TopMatchesRequest(BaseModel):
    matches: list[Match]
    standings: dict[str, list[dict]] = Field(default_factory=dict)
    form: dict[str, list[dict]] = Field(default_factory=dict)
    limit: int | None = Field(default=None, ge=0, le=100)
    now: datetime | None = None


class TopMatchesResponse(BaseModel):
    items: list[WeightedMatch]
    total_candidates: int


class NormalizeRequest(BaseModel):
    payloads: list[dict]


class NormalizedItem(BaseModel):
    match: Match
    sources: dict[str, str]


class NormalizeResponse(BaseModel):
    items: list[NormalizedItem]
    unresolved: int
