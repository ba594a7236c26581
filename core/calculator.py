from __future__ import annotations

import logging

from .models import LineItem, QuoteRequest, QuoteResult
from .rates import PHOTO_EDIT_RATE, RECAP_PRICE_STEPS, REEL_PRICE_STEPS, TRAVEL_RATE_PER_MILE
from .rules import delivery_surcharge, rate_charge, step_price, tier_rates, travel_label, validate_request

logger = logging.getLogger(__name__)


def calculate_quote(req: QuoteRequest) -> QuoteResult:
    """Price a request. Pure: same request, same breakdown, same order.

    Raises a QuoteError subclass for unknown tiers, rate types, delivery
    speeds, or negative quantities the calculation would use.
    """
    validate_request(req)

    rates = tier_rates(req.service_tier)
    tier = req.service_tier
    breakdown: list[LineItem] = []

    # Photography
    if req.includes_photography:
        amount, span = rate_charge(rates.photography, req.photo_rate_type, req.photo_duration, req.photo_days)
        breakdown.append(LineItem(description=f"{tier} Photo ({span})", amount=amount))

        if req.photo_edits > 0:
            breakdown.append(LineItem(
                description=f"Advanced Photo Edits ({req.photo_edits} photos)",
                amount=req.photo_edits * PHOTO_EDIT_RATE,
            ))

    # Videography
    if req.includes_videography:
        amount, span = rate_charge(rates.videography, req.video_rate_type, req.video_duration, req.video_days)
        breakdown.append(LineItem(description=f"{tier} Video Coverage ({span})", amount=amount))

        if req.num_reels > 0:
            breakdown.append(LineItem(
                description=f"Social Media Reels ({req.num_reels} x {req.reel_duration}s)",
                amount=req.num_reels * step_price(REEL_PRICE_STEPS, req.reel_duration),
            ))

        if req.num_recaps > 0:
            breakdown.append(LineItem(
                description=f"Recap Videos ({req.num_recaps} x {req.recap_duration}s)",
                amount=req.num_recaps * step_price(RECAP_PRICE_STEPS, req.recap_duration),
            ))

    # Travel (client may cover it themselves)
    if not req.client_covers_travel and req.travel_distance > 0:
        breakdown.append(LineItem(
            description=f"Travel ({travel_label(req.travel_distance)} miles)",
            amount=req.travel_distance * TRAVEL_RATE_PER_MILE,
        ))

    # Delivery
    surcharge = delivery_surcharge(req.delivery_speed)
    if surcharge is not None:
        label, fee = surcharge
        breakdown.append(LineItem(description=label, amount=fee))

    result = QuoteResult(breakdown=breakdown)
    logger.debug(f"Quote computed: total={result.total} items={len(breakdown)}")
    return result
