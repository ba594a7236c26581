# cli/app.py
# Terminal front-end. Only collects input and prints; all pricing lives in core.

from __future__ import annotations

import logging
from typing import Sequence

from core.calculator import calculate_quote
from core.catalog import TIER_PROFILES, what_you_get
from core.errors import QuoteError
from core.models import QuoteRequest
from core.rates import DELIVERY_SPEEDS, RATE_TYPES, TRAVEL_SENTINEL_MILES
from core.rules import clamp_reels

logger = logging.getLogger(__name__)


# ---------- INPUT HELPERS ----------

def ask_int(prompt: str, default: int, *, min_value: int = 0, max_value: int | None = None) -> int:
    """Whole-number input with a default: Enter -> default."""
    while True:
        raw = input(f"{prompt} [{default}]: ").strip()
        if raw == "":
            value = default
        else:
            try:
                value = int(raw)
            except ValueError:
                print("❌ Enter a whole number or press Enter")
                continue

        if value < min_value:
            print(f"❌ Value must be >= {min_value}")
            continue
        if max_value is not None and value > max_value:
            print(f"❌ Value must be <= {max_value}")
            continue
        return value


def ask_choice(prompt: str, choices: Sequence[str], default: str) -> str:
    """Pick one of `choices`; Enter -> default."""
    options = "/".join(choices)
    while True:
        raw = input(f"{prompt} ({options}) [{default}]: ").strip()
        if raw == "":
            return default
        if raw in choices:
            return raw
        print(f"❌ Choose one of: {options}")


def ask_yes_no(prompt: str) -> bool:
    while True:
        raw = input(prompt + " (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("❌ Enter y or n")


def money(x: int) -> str:
    return f"${x:,}"


# ---------- FORM ----------

def _ask_coverage(label: str) -> tuple[str, int, int]:
    rate_type = ask_choice(f"{label} rate type", RATE_TYPES, "hourly")
    duration, days = 1, 1
    if rate_type == "hourly":
        duration = ask_int(f"{label} duration (hours)", 1, min_value=1, max_value=8)
    else:
        days = ask_int(f"{label} days", 1, min_value=1, max_value=7)
    return rate_type, duration, days


def collect_request() -> QuoteRequest:
    print("Service tiers:")
    for k, t in TIER_PROFILES.items():
        print(f" - {k}: {t.name} ({t.description})")
    tier = ask_choice("Service tier", tuple(TIER_PROFILES), "platinum")

    fields: dict = {"service_tier": tier}

    if ask_yes_no("Include photography?"):
        rate_type, duration, days = _ask_coverage("Photo")
        fields.update(
            includes_photography=True,
            photo_rate_type=rate_type,
            photo_duration=duration,
            photo_days=days,
            photo_edits=ask_int("Advanced photo edits (photos)", 0, max_value=100),
        )

    if ask_yes_no("Include videography?"):
        rate_type, duration, days = _ask_coverage("Video")
        fields.update(
            includes_videography=True,
            video_rate_type=rate_type,
            video_duration=duration,
            video_days=days,
        )
        num_reels = ask_int("Social media reels", 0)
        fields["num_reels"] = num_reels
        if num_reels > 0:
            fields["reel_duration"] = ask_int("Reel duration (seconds)", 30, min_value=15, max_value=60)
        num_recaps = ask_int("Recap videos", 0, max_value=5)
        fields["num_recaps"] = num_recaps
        if num_recaps > 0:
            fields["recap_duration"] = ask_int("Recap duration (seconds)", 60, min_value=30, max_value=120)

    covers = ask_yes_no("Client covers travel (lodging, transportation & per diem)?")
    fields["client_covers_travel"] = covers
    if not covers:
        fields["travel_distance"] = ask_int(
            f"Travel distance in miles ({TRAVEL_SENTINEL_MILES} = {TRAVEL_SENTINEL_MILES}+)",
            0,
            max_value=TRAVEL_SENTINEL_MILES,
        )

    fields["delivery_speed"] = ask_choice("Delivery speed", DELIVERY_SPEEDS, "standard")

    req = QuoteRequest(**fields)
    if req.includes_videography:
        clamped = clamp_reels(req)
        if clamped.num_reels != req.num_reels:
            print(f"⚠️  Reels limited to {clamped.num_reels} for this much coverage")
        req = clamped
    return req


def print_quote(req: QuoteRequest) -> None:
    result = calculate_quote(req)

    print("\n--- Cost Breakdown ---")
    for item in result.breakdown:
        print(f"{item.description:<45} {money(item.amount):>10}")
    print(f"{'TOTAL':<45} {money(result.total):>10}")

    print("\nWhat you get:")
    for line in what_you_get(req):
        print(f" - {line}")
    print("----------------------\n")


# ---------- MAIN CLI FLOW ----------

def run_cli() -> None:
    print("\n=== Production Quote Builder (CLI) ===\n")

    req = collect_request()
    try:
        print_quote(req)
    except QuoteError as e:
        logger.warning(f"Quote rejected: {e}")
        print(f"❌ {e}")


if __name__ == "__main__":
    run_cli()
