# core/catalog.py
# Tier descriptions shown next to the price: what each tier includes.

from __future__ import annotations

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .errors import InvalidTier
from .models import QuoteRequest
from .rules import tier_rates


@dataclass(frozen=True)
class TierProfile:
    name: str
    description: str
    photos_per_hour: int
    photo_features: tuple[str, ...]
    video_features: tuple[str, ...]
    delivery_time: str
    delivery_description: str
    revisions: str
    support_level: str


TIER_PROFILES: Mapping[str, TierProfile] = MappingProxyType({
    "platinum": TierProfile(
        name="Platinum",
        description="Premium quality with maximum attention to detail",
        photos_per_hour=50,
        photo_features=("Professional retouching", "Same-day preview gallery", "Premium editing style", "Rush delivery available"),
        video_features=("4K recording", "Professional color grading", "Multi-camera setup", "Same-day highlights"),
        delivery_time="3-7 days",
        delivery_description="Fastest turnaround time with luxury standards",
        revisions="5+",
        support_level="Priority support",
    ),
    "gold": TierProfile(
        name="Gold",
        description="High quality with professional standards",
        photos_per_hour=35,
        photo_features=("Professional editing", "24-hour preview gallery", "Standard editing style", "Standard delivery"),
        video_features=("1080p recording", "Standard color grading", "Single-camera setup", "Next-day highlights"),
        delivery_time="7-10 days",
        delivery_description="Standard turnaround time with professional standards",
        revisions="3",
        support_level="Standard support",
    ),
    "bronze": TierProfile(
        name="Bronze",
        description="Quality service with essential features",
        photos_per_hour=15,
        photo_features=("Basic editing", "48-hour preview gallery", "Essential editing style", "Standard delivery"),
        video_features=("1080p recording", "Basic color correction", "Single-camera setup", "3-day highlights"),
        delivery_time="10-14 days",
        delivery_description="Budget package with no expedited turnaround",
        revisions="1",
        support_level="Email support",
    ),
})


def tier_profile(tier: str) -> TierProfile:
    try:
        return TIER_PROFILES[tier]
    except KeyError:
        raise InvalidTier(tier) from None


def catalog() -> list[dict[str, Any]]:
    """Every tier with its rates and profile, in price order."""
    entries = []
    for tier_id, profile in TIER_PROFILES.items():
        rates = tier_rates(tier_id)
        entries.append({
            "tier": tier_id,
            **asdict(profile),
            "photography_rates": asdict(rates.photography),
            "videography_rates": asdict(rates.videography),
        })
    return entries


def what_you_get(req: QuoteRequest) -> list[str]:
    profile = tier_profile(req.service_tier)
    items: list[str] = []

    if req.includes_photography:
        items.append(f"{profile.photos_per_hour}+ photos per hour")
        items.extend(profile.photo_features)
    if req.includes_videography:
        items.extend(profile.video_features)

    if req.delivery_speed == "standard":
        items.append(f"Delivery in {profile.delivery_time}")
    items.append(f"Revisions: {profile.revisions}")
    items.append(profile.support_level)
    return items
