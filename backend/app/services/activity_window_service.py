"""
backend/app/services/activity_window_service.py

Purpose:
    Decide which catalog competitions are in season on a given calendar day,
    provide the date-independent fallback allow-list, and bound the fixture
    query window for the ingestion layer.

Dependencies:
    - app.config
    - app.models.competitions
    - app.models.feed
    - app.services.competition_catalog_service
    - app.utils
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Literal

from app.config import settings
from app.models.competitions import ActivePeriod, Competition, CompetitionCatalog, LeaguePriority, MonthDay
from app.models.feed import Match, MatchDateRange
from app.services.competition_catalog_service import load_league_priorities
from app.utils import as_utc_datetime, ensure_utc

logger = logging.getLogger("matchfeed.activity_window")

SelectionSource = Literal["active", "fallback"]


def _month_day(when: date | datetime | MonthDay) -> MonthDay:
    if isinstance(when, MonthDay):
        return when
    return MonthDay(when.month, when.day)


def period_contains(period: ActivePeriod, when: date | datetime | MonthDay) -> bool:
    """(month, day) membership; wrapping periods straddle the year boundary."""
    current = _month_day(when)
    if period.wraps_year:
        return current >= period.start_key or current <= period.end_key
    return period.start_key <= current <= period.end_key


def is_active(competition: Competition, when: date | datetime | MonthDay) -> bool:
    return any(period_contains(period, when) for period in competition.active_periods)


class ActivityWindowResolver:
    """Season-membership queries over one immutable catalog."""

    def __init__(
        self,
        catalog: CompetitionCatalog,
        *,
        fallback_limit: int | None = None,
        min_active: int | None = None,
        priorities: Mapping[str, LeaguePriority] | None = None,
    ):
        self.catalog = catalog
        self.priorities = load_league_priorities() if priorities is None else priorities
        self.fallback_limit = int(
            settings.FEED_FALLBACK_MAX_COMPETITIONS if fallback_limit is None else fallback_limit
        )
        self.min_active = int(settings.FEED_MIN_ACTIVE_COMPETITIONS if min_active is None else min_active)

    def active_competitions(self, when: date | datetime | MonthDay) -> list[Competition]:
        return [comp for comp in self._by_rank() if is_active(comp, when)]

    def fallback_competitions(self, when: date | datetime | MonthDay | None = None) -> list[Competition]:
        """Always-usable competitions in rank order, capped at the fallback limit.

        ``when`` is accepted for call-site symmetry; the candidate set never
        depends on it.
        """
        candidates = [comp for comp in self._by_rank() if comp.is_fallback_candidate]
        return candidates[: max(self.fallback_limit, 0)]

    def competitions_with_external_ids(self) -> list[Competition]:
        return [comp for comp in self._by_rank() if comp.external_id]

    def select_ingest_competitions(
        self, when: date | datetime | MonthDay,
    ) -> tuple[list[Competition], SelectionSource]:
        """Active competitions, or the fallback list when too few are active,
        restricted to those the ingestion layer can resolve."""
        active = self.active_competitions(when)
        source: SelectionSource = "active"
        candidates = active
        if len(active) < self.min_active:
            source = "fallback"
            candidates = self.fallback_competitions(when)
            logger.info(
                "Only %d competitions active on %s; using %d fallback competitions",
                len(active), _month_day(when), len(candidates),
            )
        return [comp for comp in candidates if comp.external_id], source

    def top_competitions_with_matches(
        self,
        matches: Iterable[Match],
        date_range: MatchDateRange,
        *,
        limit: int | None = None,
    ) -> list[str]:
        """Competition refs with a kickoff inside ``date_range``, highest priority first.

        Refs are matched against competition ids and external ids. Leagues in
        the priority list come first in list order, then other catalog
        competitions by rank, then unknown refs in first-seen order.
        """
        limit = int(settings.FEED_TOP_COMPETITIONS_LIMIT if limit is None else limit)
        start = ensure_utc(date_range.start)
        end = ensure_utc(date_range.end)

        priority_by_ref: dict[str, int] = {ref: entry.order for ref, entry in self.priorities.items()}
        rank_by_ref: dict[str, int] = {}
        for comp in self._by_rank():
            rank_by_ref.setdefault(comp.id, comp.rank)
            entry = self.priorities.get(comp.external_id or "")
            if entry is not None:
                priority_by_ref.setdefault(comp.id, entry.order)
            if comp.external_id:
                rank_by_ref.setdefault(comp.external_id, comp.rank)

        seen: dict[str, int] = {}
        for match in matches:
            if not start <= match.kickoff_timestamp <= end:
                continue
            ref = str(match.competition_ref)
            seen.setdefault(ref, len(seen))

        unlisted = max((entry.order for entry in self.priorities.values()), default=-1) + 1
        unknown_rank = max(rank_by_ref.values(), default=0) + 1
        ordered = sorted(
            seen,
            key=lambda ref: (
                priority_by_ref.get(ref, unlisted),
                rank_by_ref.get(ref, unknown_rank),
                seen[ref],
            ),
        )
        return ordered[: max(limit, 0)]

    def _by_rank(self) -> list[Competition]:
        return sorted(self.catalog.competitions, key=lambda comp: comp.rank)


def match_date_range(
    reference: date | datetime,
    *,
    days_before: int | None = None,
    days_after: int | None = None,
) -> MatchDateRange:
    """Fixture window from one day before to five days after ``reference``."""
    before = int(settings.FEED_MATCH_WINDOW_DAYS_BEFORE if days_before is None else days_before)
    after = int(settings.FEED_MATCH_WINDOW_DAYS_AFTER if days_after is None else days_after)
    anchor = as_utc_datetime(reference)
    return MatchDateRange(start=anchor - timedelta(days=before), end=anchor + timedelta(days=after))
