"""
backend/app/services/match_weight_service.py

Purpose:
    Additive match significance scoring for the feed. Each candidate match gets
    five independently bounded components (league tier, competition stage,
    standings band, recent form, recency) and the feed keeps the heaviest N.

    Scoring is pure for a fixed ``now``: snapshots are read, never mutated,
    and malformed optional inputs fall back to the neutral contribution of
    their component instead of failing the whole match.

Dependencies:
    - pydantic.ValidationError
    - app.models.competitions
    - app.models.feed
    - app.services.competition_catalog_service
    - app.utils
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from app.config import settings
from app.models.competitions import CompetitionCatalog, LeaguePriority
from app.models.feed import Match, TeamForm, TeamStanding, WeightBreakdown, WeightedMatch
from app.services.competition_catalog_service import load_league_priorities
from app.utils import ensure_utc, utcnow

logger = logging.getLogger("matchfeed.match_weight")

LEAGUE_WEIGHTS: dict[int, int] = {
    1: 40,  # top five leagues
    2: 35,  # european club competitions
    3: 25,  # secondary leagues
    4: 20,  # other notable leagues
}
DEFAULT_LEAGUE_WEIGHT = 15

STAGE_WEIGHTS: dict[str, int] = {
    "final": 40,
    "semi-final": 35,
    "quarter-final": 30,
    "round-of-16": 25,
    "group-stage": 15,
    "playoff": 30,
    "regular": 10,
}
DERBY_BONUS = 25
RIVALRY_THRESHOLD = 0.7

TEAM_WEIGHTS: dict[str, int] = {
    "both_top6": 40,
    "one_top6": 30,
    "both_top10": 25,
    "one_top10": 20,
    "mid_table": 15,
    "relegation": 10,
    "mixed": 12,
}
RELEGATION_BAND = 5

FORM_WEIGHTS: dict[str, int] = {
    "both_good": 20,
    "one_good": 15,
    "close": 18,
    "upset": 22,
    "normal": 10,
}
GOOD_FORM_WIN_RATE = 0.6
UPSET_WIN_RATE_GAP = 0.5
CLOSE_WIN_RATE_GAP = 0.2

# Index = whole days since kickoff; anything older gets TIME_WEIGHT_OLDER.
TIME_WEIGHTS: tuple[int, ...] = (10, 8, 6, 4)
TIME_WEIGHT_OLDER = 2

# Order matters: "semi-final" and "quarter-final" contain "final".
_STAGE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("semi-final", re.compile(r"\bsemi[\s-]?finals?\b|\b1/2\b")),
    ("quarter-final", re.compile(r"\bquarter[\s-]?finals?\b|\b1/4\b")),
    ("round-of-16", re.compile(r"\bround[\s-]of[\s-]16\b|\blast[\s-]16\b|\b1/8\b|\beighth[\s-]?finals?\b")),
    ("final", re.compile(r"\bfinals?\b")),
    ("group-stage", re.compile(r"\bgroups?\b|\bleague[\s-]phase\b")),
    ("playoff", re.compile(r"\bplay[\s-]?offs?\b|\bknockout[\s-]round[\s-]play")),
)


def normalize_stage(raw: Any) -> str:
    """Map free-text stage/round labels onto a STAGE_WEIGHTS key."""
    text = str(raw or "").strip().lower().replace("_", " ")
    if not text:
        return "regular"
    if text in STAGE_WEIGHTS:
        return text
    for stage, pattern in _STAGE_PATTERNS:
        if pattern.search(text):
            return stage
    return "regular"


def _same_id(left: Any, right: Any) -> bool:
    return left is not None and right is not None and str(left) == str(right)


def _coerce_rows(rows: Any, model: type[TeamStanding] | type[TeamForm]) -> list:
    """Validate snapshot rows one by one; malformed rows are dropped."""
    if not rows or isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Iterable):
        return []
    out = []
    for row in rows:
        if isinstance(row, model):
            out.append(row)
            continue
        try:
            out.append(model.model_validate(row))
        except ValidationError:
            logger.debug("Skipping malformed %s row: %r", model.__name__, row)
    return out


def _league_weight(tier_info: Any) -> int:
    tier = tier_info.get("tier") if isinstance(tier_info, Mapping) else getattr(tier_info, "tier", tier_info)
    if isinstance(tier, bool) or not isinstance(tier, int):
        return DEFAULT_LEAGUE_WEIGHT
    return LEAGUE_WEIGHTS.get(tier, DEFAULT_LEAGUE_WEIGHT)


def _stage_weight(match: Match) -> int:
    weight = STAGE_WEIGHTS[normalize_stage(match.stage)]
    rivalry = match.rivalry_factor
    rivalry_hit = isinstance(rivalry, (int, float)) and math.isfinite(rivalry) and rivalry > RIVALRY_THRESHOLD
    if match.is_derby or rivalry_hit:
        weight += DERBY_BONUS
    return weight


def team_band(home_pos: int, away_pos: int, table_size: int) -> str:
    """Standings band of a pairing, strict precedence from both_top6 down.

    The relegation band is the bottom RELEGATION_BAND + 1 positions, so in a
    20-team table positions 15 through 20 count.
    """
    relegation_line = table_size - RELEGATION_BAND
    if home_pos <= 6 and away_pos <= 6:
        return "both_top6"
    if home_pos <= 6 or away_pos <= 6:
        return "one_top6"
    if home_pos <= 10 and away_pos <= 10:
        return "both_top10"
    if home_pos <= 10 or away_pos <= 10:
        return "one_top10"
    if home_pos >= relegation_line and away_pos >= relegation_line:
        return "relegation"
    return "mid_table"


def _team_weight(match: Match, standings: Any) -> int:
    rows = _coerce_rows(standings, TeamStanding)
    if not rows:
        return TEAM_WEIGHTS["mixed"]
    home = next((row.position for row in rows if _same_id(row.team_id, match.home_team_id)), None)
    away = next((row.position for row in rows if _same_id(row.team_id, match.away_team_id)), None)
    if home is None or away is None:
        return TEAM_WEIGHTS["mixed"]
    table_size = max(len(rows), max(row.position for row in rows))
    return TEAM_WEIGHTS[team_band(home, away, table_size)]


def win_rate(form: TeamForm) -> float:
    return form.wins / max(form.matches_played, 1)


def form_band(home_rate: float, away_rate: float) -> str:
    gap = abs(home_rate - away_rate)
    home_good = home_rate > GOOD_FORM_WIN_RATE
    away_good = away_rate > GOOD_FORM_WIN_RATE
    if home_good and away_good:
        return "both_good"
    if gap > UPSET_WIN_RATE_GAP:
        return "upset"
    if gap < CLOSE_WIN_RATE_GAP:
        return "close"
    if home_good or away_good:
        return "one_good"
    return "normal"


def _form_weight(match: Match, form: Any) -> int:
    rows = _coerce_rows(form, TeamForm)
    if not rows:
        return 0
    home = next((row for row in rows if _same_id(row.team_id, match.home_team_id)), None)
    away = next((row for row in rows if _same_id(row.team_id, match.away_team_id)), None)
    if home is None or away is None:
        return 0
    return FORM_WEIGHTS[form_band(win_rate(home), win_rate(away))]


def _time_weight(match: Match, now: datetime) -> int:
    elapsed = ensure_utc(now) - match.kickoff_timestamp
    days = max(math.floor(elapsed.total_seconds() / 86400), 0)
    if days < len(TIME_WEIGHTS):
        return TIME_WEIGHTS[days]
    return TIME_WEIGHT_OLDER


def compute_weight(
    match: Match,
    tier_info: Any = None,
    standings: Sequence[TeamStanding | Mapping] | None = None,
    form: Sequence[TeamForm | Mapping] | None = None,
    *,
    now: datetime | None = None,
) -> WeightBreakdown:
    """Score one match.

    ``tier_info`` may be a bare tier int, a mapping or an object with a
    ``tier`` attribute (e.g. a Competition); None scores as the default tier.
    Future kickoffs count as day 0 for recency.
    """
    return WeightBreakdown(
        league_weight=_league_weight(tier_info),
        stage_weight=_stage_weight(match),
        team_weight=_team_weight(match, standings),
        form_weight=_form_weight(match, form),
        time_weight=_time_weight(match, now or utcnow()),
    )


def tier_table_from_catalog(
    catalog: CompetitionCatalog,
    priorities: Mapping[str, LeaguePriority] | None = None,
) -> dict[str, int | None]:
    """Competition ref -> tier, keyed by catalog id and by external id.

    A league in the priority list scores with its priority tier, also when it
    is referenced by catalog id; other competitions keep their catalog tier.
    """
    priorities = load_league_priorities() if priorities is None else priorities
    table: dict[str, int | None] = {ref: entry.tier for ref, entry in priorities.items()}
    for competition in catalog.competitions:
        entry = priorities.get(competition.external_id or "")
        tier = entry.tier if entry is not None else competition.tier
        table.setdefault(competition.id, tier)
        if competition.external_id:
            table.setdefault(competition.external_id, tier)
    return table


def _snapshot_for(snapshot: Mapping | None, competition_ref: Any) -> Any:
    if not isinstance(snapshot, Mapping):
        return None
    if competition_ref in snapshot:
        return snapshot[competition_ref]
    return snapshot.get(str(competition_ref))


def top_weighted_matches(
    matches: Iterable[Match],
    standings_by_competition: Mapping | None,
    form_by_competition: Mapping | None,
    tier_table: Mapping,
    limit: int | None = None,
    *,
    now: datetime | None = None,
) -> list[WeightedMatch]:
    """Heaviest ``limit`` matches, total descending.

    Ties go to the most recent kickoff, then to input order.
    """
    limit = int(settings.FEED_TOP_MATCHES_LIMIT if limit is None else limit)
    if limit <= 0:
        return []
    reference = now or utcnow()

    weighted: list[tuple[int, WeightedMatch]] = []
    for index, match in enumerate(matches):
        tier_info = _snapshot_for(tier_table, match.competition_ref)
        breakdown = compute_weight(
            match,
            tier_info,
            _snapshot_for(standings_by_competition, match.competition_ref),
            _snapshot_for(form_by_competition, match.competition_ref),
            now=reference,
        )
        weighted.append((index, WeightedMatch(match=match, weight=breakdown)))

    weighted.sort(
        key=lambda item: (
            -item[1].weight.total,
            -item[1].match.kickoff_timestamp.timestamp(),
            item[0],
        )
    )
    logger.debug("Ranked %d candidate matches, keeping %d", len(weighted), min(limit, len(weighted)))
    return [item for _, item in weighted[:limit]]
