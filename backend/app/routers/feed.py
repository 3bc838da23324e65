"""
backend/app/routers/feed.py

Purpose:
    Read-only feed decision endpoints: which competitions to query on a given
    day, ranking of caller-supplied candidate matches, and normalization of
    raw provider payloads. No storage access; every input arrives with the
    request and the catalog comes from application state.

Dependencies:
    - app.services.activity_window_service
    - app.services.match_weight_service
    - app.services.match_payload_service
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query, Request

from app.models.competitions import CompetitionCatalog
from app.models.feed import (
    CompetitionPlanResponse,
    CompetitionSummary,
    NormalizedItem,
    NormalizeRequest,
    NormalizeResponse,
    TopMatchesRequest,
    TopMatchesResponse,
)
from app.services.activity_window_service import ActivityWindowResolver, match_date_range
from app.services.match_payload_service import normalize_match_payload
from app.services.match_weight_service import tier_table_from_catalog, top_weighted_matches
from app.utils import utcnow

logger = logging.getLogger("matchfeed.feed")

router = APIRouter(prefix="/api/feed", tags=["feed"])


def get_catalog(request: Request) -> CompetitionCatalog:
    return request.app.state.catalog


@router.get("/competitions", response_model=CompetitionPlanResponse)
def feed_competitions(
    on: date | None = Query(default=None, description="Reference day, defaults to today (UTC)."),
    catalog: CompetitionCatalog = Depends(get_catalog),
):
    reference = on or utcnow().date()
    resolver = ActivityWindowResolver(catalog)
    selected, source = resolver.select_ingest_competitions(reference)
    return CompetitionPlanResponse(
        reference_date=reference,
        active=[CompetitionSummary.from_competition(c) for c in resolver.active_competitions(reference)],
        fallback=[CompetitionSummary.from_competition(c) for c in resolver.fallback_competitions(reference)],
        selected=[CompetitionSummary.from_competition(c) for c in selected],
        selected_source=source,
        date_range=match_date_range(reference),
    )


@router.post("/top-matches", response_model=TopMatchesResponse)
def feed_top_matches(
    body: TopMatchesRequest,
    catalog: CompetitionCatalog = Depends(get_catalog),
):
    items = top_weighted_matches(
        body.matches,
        body.standings,
        body.form,
        tier_table_from_catalog(catalog),
        body.limit,
        now=body.now,
    )
    return TopMatchesResponse(items=items, total_candidates=len(body.matches))


@router.post("/normalize", response_model=NormalizeResponse)
def feed_normalize(body: NormalizeRequest):
    items: list[NormalizedItem] = []
    unresolved = 0
    for payload in body.payloads:
        normalized = normalize_match_payload(payload)
        if normalized.match is None:
            unresolved += 1
            continue
        items.append(NormalizedItem(match=normalized.match, sources=normalized.sources))
    if unresolved:
        logger.info("Normalized %d payloads, %d unresolved", len(items), unresolved)
    return NormalizeResponse(items=items, unresolved=unresolved)
