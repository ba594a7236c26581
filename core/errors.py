from __future__ import annotations


class QuoteError(ValueError):
    """Base for every rejected quote request."""


class InvalidTier(QuoteError):
    def __init__(self, tier: str) -> None:
        super().__init__(f"Unknown service tier '{tier}'")
        self.tier = tier


class InvalidRateType(QuoteError):
    def __init__(self, field: str, rate_type: str) -> None:
        super().__init__(f"Unknown rate type '{rate_type}' for {field}")
        self.field = field
        self.rate_type = rate_type


class InvalidDeliverySpeed(QuoteError):
    def __init__(self, speed: str) -> None:
        super().__init__(f"Unknown delivery speed '{speed}'")
        self.speed = speed


class InvalidQuantity(QuoteError):
    def __init__(self, field: str, value: int, minimum: int = 0) -> None:
        super().__init__(f"{field} must be >= {minimum} (got {value})")
        self.field = field
        self.value = value
        self.minimum = minimum
