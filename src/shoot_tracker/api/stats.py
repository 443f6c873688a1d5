"""Earnings statistics endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from shoot_tracker.api.models import EarningsSummaryResponse

if TYPE_CHECKING:
    from shoot_tracker.containers import AppContainer

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("")
async def earnings_summary(
    request: Request,
    include_edited: bool = Query(default=False, alias="includeEdited"),
) -> EarningsSummaryResponse:
    """Return total and monthly earnings."""
    container: AppContainer = request.app.state.container
    summary = container.stats_service.get_summary(include_edited=include_edited)
    return EarningsSummaryResponse.from_domain(summary)
