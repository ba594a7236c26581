# core/rates.py
# Static price list. Everything here is read-only.

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, get_args

from .models import DeliverySpeed, RateType, Tier


@dataclass(frozen=True)
class RateSet:
    hourly: int
    half_day: int
    full_day: int


@dataclass(frozen=True)
class TierRates:
    photography: RateSet
    videography: RateSet


RATE_TABLE: Mapping[Tier, TierRates] = MappingProxyType({
    "platinum": TierRates(
        photography=RateSet(hourly=150, half_day=650, full_day=1099),
        videography=RateSet(hourly=200, half_day=850, full_day=1400),
    ),
    "gold": TierRates(
        photography=RateSet(hourly=100, half_day=550, full_day=950),
        videography=RateSet(hourly=150, half_day=650, full_day=1100),
    ),
    "bronze": TierRates(
        photography=RateSet(hourly=50, half_day=450, full_day=850),
        videography=RateSet(hourly=100, half_day=450, full_day=800),
    ),
})

RATE_TYPES: tuple[str, ...] = get_args(RateType)
DELIVERY_SPEEDS: tuple[str, ...] = get_args(DeliverySpeed)

PHOTO_EDIT_RATE = 5
TRAVEL_RATE_PER_MILE = 2

# (max seconds inclusive, unit price); None = no upper bound
StepTable = tuple[tuple[Optional[int], int], ...]

REEL_PRICE_STEPS: StepTable = ((30, 100), (None, 150))
RECAP_PRICE_STEPS: StepTable = ((60, 200), (None, 300))

# speed -> (label, surcharge); standard has no line item
DELIVERY_SURCHARGES: Mapping[str, Optional[tuple[str, int]]] = MappingProxyType({
    "standard": None,
    "expedited": ("Expedited Delivery (3-5 days)", 100),
    "superExpedited": ("Super Expedited Delivery (1-2 days)", 200),
})

# form-side limits, not used by the calculator
TRAVEL_SENTINEL_MILES = 3000
REELS_FIRST_HOUR = 3
REELS_PER_EXTRA_HOUR = 2
REELS_CAP = 20
HOURS_PER_HALF_DAY = 6
HOURS_PER_FULL_DAY = 8
