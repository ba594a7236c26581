from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel
from typing import Literal

Tier = Literal["platinum", "gold", "bronze"]
RateType = Literal["hourly", "halfDay", "fullDay"]
DeliverySpeed = Literal["standard", "expedited", "superExpedited"]


class QuoteRequest(BaseModel):
    # JSON comes in camelCase from the form; python code uses snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    includes_photography: bool = False
    includes_videography: bool = False

    # plain str: unknown values must reach the calculator and fail there
    service_tier: str = "platinum"

    photo_rate_type: str = "hourly"
    photo_duration: int = 1
    photo_days: int = 1
    photo_edits: int = 0

    video_rate_type: str = "hourly"
    video_duration: int = 1
    video_days: int = 1
    num_reels: int = 0
    reel_duration: int = 30
    num_recaps: int = 0
    recap_duration: int = 60

    travel_distance: int = 0
    client_covers_travel: bool = False
    delivery_speed: str = "standard"


class LineItem(BaseModel):
    description: str
    amount: int


class QuoteResult(BaseModel):
    breakdown: list[LineItem] = []

    @computed_field
    @property
    def total(self) -> int:
        return sum(item.amount for item in self.breakdown)
