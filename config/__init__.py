"""
Configuration module for the storefront service.

Exports the configuration models and loader functions.
"""

from .chat_config import ChatConfig
from .checkout_config import CheckoutConfig
from .loader import get_config, load_config, load_config_file, merge_configs, strip_jsonc_comments
from .main_config import Config
from .simulation_config import SimulationConfig

__all__ = [
    # Config models
    "Config",
    "SimulationConfig",
    "ChatConfig",
    "CheckoutConfig",
    # Loader functions
    "load_config",
    "get_config",
    "load_config_file",
    "merge_configs",
    "strip_jsonc_comments",
]
