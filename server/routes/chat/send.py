"""
Send chat message endpoint.
"""

from fastapi import APIRouter

from core import ChatAck

from ...requests import ChatMessageRequest
from ...state import get_responder


router = APIRouter()


@router.post("/chat/message")
async def send_chat_message_route(request: ChatMessageRequest) -> ChatAck:
    """Accept a message; the reply streams on /chat/updates."""
    return get_responder().respond(request.message, request.sessionId)
