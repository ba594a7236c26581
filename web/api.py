from __future__ import annotations

import logging

from fastapi import FastAPI, Body, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from typing import Any, Optional

from pydantic import BaseModel

from core.calculator import calculate_quote
from core.catalog import catalog
from core.errors import QuoteError
from core.models import QuoteRequest, QuoteResult
from core.rules import coverage_hours, max_reels
from web.settings import settings

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.API_TITLE, version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class Estimate(BaseModel):
    available: bool
    total: Optional[int] = None


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/quote", response_model=QuoteResult)
def quote(req: QuoteRequest = Body(...)) -> QuoteResult:
    """Full quote: total plus the ordered breakdown."""
    try:
        return calculate_quote(req)
    except QuoteError as e:
        logger.warning(f"Quote rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/quote/estimate", response_model=Estimate)
def estimate(req: QuoteRequest = Body(...)) -> Estimate:
    """
    Live estimate for a form that recalculates on every change.
    A request that can't be priced yet is "unavailable", not an error.
    """
    try:
        result = calculate_quote(req)
    except QuoteError as e:
        logger.debug(f"Estimate unavailable: {e}")
        return Estimate(available=False)
    return Estimate(available=True, total=result.total)


@app.get("/tiers")
def tiers() -> list[dict[str, Any]]:
    return catalog()


@app.get("/reels/max")
def reels_max(
    video_rate_type: str = Query("hourly", alias="videoRateType"),
    video_duration: int = Query(1, alias="videoDuration"),
    video_days: int = Query(1, alias="videoDays"),
) -> dict[str, int]:
    try:
        hours = coverage_hours(video_rate_type, video_duration, video_days)
    except QuoteError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"maxReels": max_reels(hours)}
