"""SimulationConfig model."""

from pydantic import BaseModel, Field

from .defaults import (
    DEFAULT_MUTATION_DELAY_SECONDS,
    DEFAULT_PRICE_CHANGE_PROBABILITY,
    DEFAULT_PRICE_MIN,
    DEFAULT_PRICE_SPAN,
    DEFAULT_TRIGGER_COOLDOWN_SECONDS,
)


class SimulationConfig(BaseModel):
    """Timing and distribution of simulated product changes."""

    mutation_delay_seconds: float = Field(
        default=DEFAULT_MUTATION_DELAY_SECONDS,
        ge=0,
        description="Delay before a scheduled product change is applied",
    )
    cooldown_seconds: float = Field(
        default=DEFAULT_TRIGGER_COOLDOWN_SECONDS,
        ge=0,
        description="Window during which repeat triggers for a product are rejected",
    )
    price_min: float = Field(default=DEFAULT_PRICE_MIN, ge=0)
    price_span: float = Field(default=DEFAULT_PRICE_SPAN, ge=0)
    price_change_probability: float = Field(
        default=DEFAULT_PRICE_CHANGE_PROBABILITY,
        ge=0,
        le=1,
        description="Chance a random change is a price change rather than availability",
    )
