"""
Chat chunk SSE endpoint.
"""

import json
import logging
from functools import partial
from typing import AsyncGenerator, Callable

from fastapi import APIRouter, Query
from sse_starlette.sse import EventSourceResponse

from core import ChatUpdatesChannel, open_chat_updates

from ...event_bus import get_chat_bus
from ...state import get_current_config

logger = logging.getLogger(__name__)

CHAT_CHUNK_EVENT = "chat.chunk"

router = APIRouter()


async def chat_chunk_events(
    open_channel: Callable[[], ChatUpdatesChannel],
) -> AsyncGenerator[dict, None]:
    """Render a chat channel as SSE messages, subscribing on first iteration."""
    channel = open_channel()
    try:
        async for chunk in channel:
            yield {"event": CHAT_CHUNK_EVENT, "data": chunk.model_dump_json()}
    except Exception as e:
        logger.exception("Error in chat stream for session %s", channel.session_id)
        yield {"event": "error", "data": json.dumps({"error": str(e)})}
    finally:
        channel.cancel()


@router.get("/chat/updates")
async def chat_updates_route(sessionId: str | None = Query(None)) -> EventSourceResponse:
    """Subscribe to assistant reply chunks for a session."""
    session_id = sessionId or get_current_config().chat.default_session_id
    open_channel = partial(open_chat_updates, get_chat_bus(), session_id)
    return EventSourceResponse(chat_chunk_events(open_channel))
