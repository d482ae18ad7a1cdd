"""Main Config model."""

from pydantic import BaseModel, Field

from .chat_config import ChatConfig
from .checkout_config import CheckoutConfig
from .simulation_config import SimulationConfig


class Config(BaseModel):
    """Main configuration model."""

    simulation: SimulationConfig = Field(
        default_factory=SimulationConfig,
        description="Product change simulation settings",
    )
    chat: ChatConfig = Field(
        default_factory=ChatConfig,
        description="Assistant chat streaming settings",
    )
    checkout: CheckoutConfig = Field(
        default_factory=CheckoutConfig,
        description="Checkout settings",
    )
    seed_products: bool = Field(
        default=True,
        description="Load the demo catalogue into the store at startup",
    )
