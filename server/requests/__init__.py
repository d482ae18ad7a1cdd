"""
HTTP request models for the API.

These are Pydantic models for validating and parsing API requests.
"""

from .chat_message_request import ChatMessageRequest
from .summary_request import SummaryRequest
from .trigger_change_request import TriggerChangeRequest

__all__ = [
    # Simulation requests
    "TriggerChangeRequest",
    # Checkout requests
    "SummaryRequest",
    # Chat requests
    "ChatMessageRequest",
]
