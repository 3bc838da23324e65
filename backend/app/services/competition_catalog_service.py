"""
backend/app/services/competition_catalog_service.py

Purpose:
    Validate raw competition definitions into an immutable, rank-ordered
    CompetitionCatalog. Structurally invalid definitions are rejected at load
    time and never reach the resolver.
    Also resolves the provider league priority list into an external id lookup.

Dependencies:
    - pydantic.ValidationError
    - app.config_competitions
    - app.models.competitions
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from app.config_competitions import COMPETITIONS, FALLBACK_COMPETITION_IDS, LEAGUE_PRIORITIES
from app.models.competitions import CatalogRejection, Competition, CompetitionCatalog, LeaguePriority

logger = logging.getLogger("matchfeed.catalog")


def _validation_reason(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid definition"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{loc}: {message}" if loc else message


def load_catalog(
    raw_competitions: Iterable[Mapping] | None = None,
    *,
    fallback_ids: Iterable[str] | None = None,
) -> CompetitionCatalog:
    """Build a catalog from raw definitions (defaults to the static config).

    Competitions listed in ``fallback_ids`` are flagged ``always_available``
    unless the definition sets the flag itself. A definition is rejected when
    it fails validation or repeats an id or rank already accepted.
    """
    raw_competitions = COMPETITIONS if raw_competitions is None else raw_competitions
    fallback = frozenset(FALLBACK_COMPETITION_IDS if fallback_ids is None else fallback_ids)

    accepted: list[Competition] = []
    rejected: list[CatalogRejection] = []
    seen_ids: set[str] = set()
    seen_ranks: set[int] = set()

    for raw in raw_competitions:
        if not isinstance(raw, Mapping):
            rejected.append(CatalogRejection(competition_id="", reason="definition is not a mapping"))
            continue
        competition_id = str(raw.get("id") or "")
        data = dict(raw)
        data.setdefault("always_available", competition_id in fallback)

        try:
            competition = Competition.model_validate(data)
        except ValidationError as exc:
            rejected.append(CatalogRejection(competition_id=competition_id, reason=_validation_reason(exc)))
            continue

        if competition.id in seen_ids:
            rejected.append(CatalogRejection(competition_id=competition.id, reason="duplicate id"))
            continue
        if competition.rank in seen_ranks:
            rejected.append(
                CatalogRejection(competition_id=competition.id, reason=f"duplicate rank {competition.rank}")
            )
            continue
        seen_ids.add(competition.id)
        seen_ranks.add(competition.rank)
        accepted.append(competition)

    for rejection in rejected:
        logger.warning(
            "Rejected competition definition id=%s: %s",
            rejection.competition_id or "<missing>", rejection.reason,
        )

    accepted.sort(key=lambda comp: comp.rank)
    logger.info(
        "Competition catalog loaded: %d competitions, %d rejected",
        len(accepted), len(rejected),
    )
    return CompetitionCatalog(competitions=tuple(accepted), rejected=tuple(rejected))


def load_league_priorities(raw_priorities: Iterable[Mapping] | None = None) -> dict[str, LeaguePriority]:
    """External id -> (order, tier) from the priority list (defaults to the static config).

    Entries without an external id or with a tier outside 1..4 are skipped;
    a repeated external id keeps its first position.
    """
    raw_priorities = LEAGUE_PRIORITIES if raw_priorities is None else raw_priorities
    lookup: dict[str, LeaguePriority] = {}
    for raw in raw_priorities:
        if not isinstance(raw, Mapping):
            logger.warning("Skipped league priority entry: not a mapping")
            continue
        external_id = str(raw.get("external_id") or "").strip()
        tier = raw.get("tier")
        if not external_id or isinstance(tier, bool) or not isinstance(tier, int) or not 1 <= tier <= 4:
            logger.warning("Skipped league priority entry external_id=%s tier=%r", external_id or "<missing>", tier)
            continue
        if external_id in lookup:
            continue
        lookup[external_id] = LeaguePriority(order=len(lookup), tier=tier)
    return lookup
