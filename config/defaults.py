"""Default configuration values."""

# Product simulation
DEFAULT_MUTATION_DELAY_SECONDS = 2.0
DEFAULT_TRIGGER_COOLDOWN_SECONDS = 10.0
DEFAULT_PRICE_MIN = 50.0
DEFAULT_PRICE_SPAN = 100.0  # New prices fall in [min, min + span]
DEFAULT_PRICE_CHANGE_PROBABILITY = 0.6

# Chat simulation
DEFAULT_SESSION_ID = "default"
DEFAULT_THINKING_DELAY_SECONDS = 2.5
DEFAULT_TOKEN_INTERVAL_SECONDS = 0.1
MAX_CHAT_MESSAGE_LENGTH = 500

# Checkout
DEFAULT_CHECKOUT_DELAY_SECONDS = 1.5
DEFAULT_CHECKOUT_FAILURE_RATE = 0.2
DEFAULT_SHIPPING_COST = 10.0
DEFAULT_TAX_RATE = 0.08
DEFAULT_DELIVERY_DAYS = 7
MAX_ORDER_ID = 1_000_000
