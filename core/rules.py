# core/rules.py
# Pricing rules shared by photo and video, plus request checks.

from __future__ import annotations

from .errors import InvalidDeliverySpeed, InvalidQuantity, InvalidRateType, InvalidTier
from .models import QuoteRequest
from .rates import (
    DELIVERY_SURCHARGES,
    HOURS_PER_FULL_DAY,
    HOURS_PER_HALF_DAY,
    RATE_TABLE,
    RATE_TYPES,
    REELS_CAP,
    REELS_FIRST_HOUR,
    REELS_PER_EXTRA_HOUR,
    TRAVEL_SENTINEL_MILES,
    RateSet,
    StepTable,
    TierRates,
)


def tier_rates(tier: str) -> TierRates:
    try:
        return RATE_TABLE[tier]
    except KeyError:
        raise InvalidTier(tier) from None


def rate_charge(rates: RateSet, rate_type: str, hours: int, days: int) -> tuple[int, str]:
    """Price one coverage block.

    Returns (amount, span) where span is the human part of the description,
    e.g. "3 hours" or "2 full days". Hourly uses `hours`, the day modes use
    `days`; the other argument is ignored.
    """
    if rate_type == "hourly":
        return rates.hourly * hours, f"{hours} hours"
    if rate_type == "halfDay":
        return rates.half_day * days, f"{days} half days"
    if rate_type == "fullDay":
        return rates.full_day * days, f"{days} full days"
    raise InvalidRateType("rate type", rate_type)


def step_price(steps: StepTable, seconds: int) -> int:
    """Unit price for a clip length. No interpolation between steps."""
    for max_seconds, price in steps:
        if max_seconds is None or seconds <= max_seconds:
            return price
    raise ValueError(f"No price step covers {seconds}s")


def travel_label(distance: int) -> str:
    return f"{TRAVEL_SENTINEL_MILES}+" if distance == TRAVEL_SENTINEL_MILES else str(distance)


def delivery_surcharge(speed: str) -> tuple[str, int] | None:
    if speed not in DELIVERY_SURCHARGES:
        raise InvalidDeliverySpeed(speed)
    return DELIVERY_SURCHARGES[speed]


# ---------- VALIDATION ----------

def _check_rate_type(field: str, rate_type: str) -> None:
    if rate_type not in RATE_TYPES:
        raise InvalidRateType(field, rate_type)


def _check_at_least(req: QuoteRequest, minimum: int, *fields: str) -> None:
    for field in fields:
        value = getattr(req, field)
        if value < minimum:
            raise InvalidQuantity(field, value, minimum)


def _check_non_negative(req: QuoteRequest, *fields: str) -> None:
    _check_at_least(req, 0, *fields)


def _coverage_fields(prefix: str, rate_type: str) -> tuple[str, ...]:
    return (f"{prefix}_duration",) if rate_type == "hourly" else (f"{prefix}_days",)


def validate_request(req: QuoteRequest) -> None:
    """Reject requests the calculator must not price.

    Only fields the calculation will read are checked, so values left over
    from a mode the user switched away from never cause an error.
    """
    tier_rates(req.service_tier)

    if req.includes_photography:
        _check_rate_type("photo_rate_type", req.photo_rate_type)
        # a booked service always covers at least one hour or day
        _check_at_least(req, 1, *_coverage_fields("photo", req.photo_rate_type))
        _check_non_negative(req, "photo_edits")

    if req.includes_videography:
        _check_rate_type("video_rate_type", req.video_rate_type)
        _check_at_least(req, 1, *_coverage_fields("video", req.video_rate_type))
        _check_non_negative(req, "num_reels", "num_recaps")
        if req.num_reels > 0:
            _check_non_negative(req, "reel_duration")
        if req.num_recaps > 0:
            _check_non_negative(req, "recap_duration")

    if not req.client_covers_travel:
        _check_non_negative(req, "travel_distance")

    delivery_surcharge(req.delivery_speed)


# ---------- FORM CONSTRAINTS ----------
# Limits the form applies to its own inputs. The calculator never calls these.

def coverage_hours(rate_type: str, duration: int, days: int) -> int:
    if rate_type == "hourly":
        return duration
    if rate_type == "halfDay":
        return HOURS_PER_HALF_DAY * days
    if rate_type == "fullDay":
        return HOURS_PER_FULL_DAY * days
    raise InvalidRateType("video_rate_type", rate_type)


def max_reels(video_hours: int) -> int:
    """1 hour = 3 reels, each additional hour adds 2, capped at 20."""
    return max(0, min(REELS_FIRST_HOUR + (video_hours - 1) * REELS_PER_EXTRA_HOUR, REELS_CAP))


def clamp_reels(req: QuoteRequest) -> QuoteRequest:
    cap = max_reels(coverage_hours(req.video_rate_type, req.video_duration, req.video_days))
    if req.num_reels <= cap:
        return req
    return req.model_copy(update={"num_reels": cap})
