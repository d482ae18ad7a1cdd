"""
Simulated assistant replies.

A reply is streamed as a series of cumulative snapshots: every ChatChunkEvent
carries the full text generated so far under one messageId, and the last one
has ``isComplete`` set. Consumers keep only the latest snapshot per messageId.
"""

import asyncio
import logging
from typing import Iterable

from config.chat_config import ChatConfig

from .events import EventBus
from .exceptions import ValidationFailedError
from .models import ChatAck, ChatChunkEvent, gen_id

logger = logging.getLogger(__name__)


CANNED_RESPONSES = {
    "Show me the best deals": (
        "I found some great deals for you! The Nike Air Max is currently 25% off at "
        "$89.99 (was $119.99), and the Apple iPhone has a special discount bringing it "
        "to $699 (was $799). These are some of the best value products right now based "
        "on price-to-quality ratio."
    ),
    "What's trending now?": (
        "Currently trending: Wireless headphones are very popular this month, "
        "especially noise-canceling models. Gaming accessories are also seeing high "
        "demand. The Samsung Galaxy and fitness trackers are among our top-selling "
        "items this week!"
    ),
    "Help me find a gift": (
        "I'd love to help you find the perfect gift! For tech lovers, I recommend the "
        "Apple AirPods or Samsung Galaxy. For fashion enthusiasts, check out our Nike "
        "Air Max collection. What's your budget range and who is the gift for?"
    ),
    "Tell me more about this product": (
        "This product features excellent quality and performance. Based on customer "
        "reviews (4.5/5 stars), users particularly love its reliability and value. "
        "It's designed for both everyday use and demanding tasks, making it a "
        "versatile choice."
    ),
    "Is this a good deal?": (
        "Yes, this is a solid deal! At this price, this product is below the average "
        "market price. Based on its features and customer reviews, it offers excellent "
        "value for money. It's a good time to buy!"
    ),
    "What goes well with this?": (
        "Great accessories that go well with this product include: protective cases, "
        "wireless chargers, and premium headphones. Many customers also buy screen "
        "protectors and portable stands. These combinations enhance your experience!"
    ),
}

ECHO_TEMPLATE = (
    'Thanks for your message: "{message}". I\'m here to help you with your shopping '
    "needs. You can ask me about products, deals, or anything else related to our store!"
)


def select_response(message: str) -> str:
    """Exact-match a known prompt, otherwise echo the message back."""
    return CANNED_RESPONSES.get(message) or ECHO_TEMPLATE.format(message=message)


def tokenize(text: str) -> list[str]:
    return text.split()


def cumulative_chunks(tokens: list[str]) -> list[str]:
    """['a', 'b', 'c'] -> ['a', 'a b', 'a b c']"""
    return [" ".join(tokens[: index + 1]) for index in range(len(tokens))]


def latest_chunks(events: Iterable[ChatChunkEvent]) -> dict[str, ChatChunkEvent]:
    """Reduce a chunk stream to the current state of each message (last write wins)."""
    latest: dict[str, ChatChunkEvent] = {}
    for event in events:
        latest[event.messageId] = event
    return latest


class ChatResponder:
    """
    Accepts user messages and streams canned replies onto the chat bus.

    Args:
        bus: Bus that receives ChatChunkEvents
        settings: Thinking delay, token spacing and message limits
    """

    def __init__(
        self, bus: EventBus[ChatChunkEvent], settings: ChatConfig | None = None
    ) -> None:
        self.bus = bus
        self.settings = settings or ChatConfig()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def validate(self, message: str) -> str:
        text = message.strip()
        if not text:
            raise ValidationFailedError("Message cannot be empty")
        if len(text) > self.settings.max_message_length:
            raise ValidationFailedError(
                f"Message must be at most {self.settings.max_message_length} characters"
            )
        return text

    def respond(self, message: str, session_id: str | None = None) -> ChatAck:
        """
        Accept a message and start streaming the reply in the background.

        Raises:
            ValidationFailedError: If the message is empty or too long
        """
        text = self.validate(message)
        session_id = session_id or self.settings.default_session_id
        reply_id = gen_id("ai_")

        task = asyncio.create_task(
            self._stream_reply(text, session_id, reply_id), name=f"chat-reply-{reply_id}"
        )
        self._pending.add(task)
        task.add_done_callback(self._on_reply_done)

        logger.info("Chat message accepted for session %s (reply %s)", session_id, reply_id)
        return ChatAck(messageId=gen_id("user_"), replyMessageId=reply_id)

    async def _stream_reply(self, message: str, session_id: str, message_id: str) -> None:
        await asyncio.sleep(self.settings.thinking_delay_seconds)

        chunks = cumulative_chunks(tokenize(select_response(message)))
        loop = asyncio.get_running_loop()
        started = loop.time()
        for index, chunk in enumerate(chunks):
            # Token n fires at (n + 1) * interval after the thinking delay
            due = started + (index + 1) * self.settings.token_interval_seconds
            await asyncio.sleep(max(0.0, due - loop.time()))
            self.bus.publish(
                ChatChunkEvent(
                    sessionId=session_id,
                    messageId=message_id,
                    chunk=chunk,
                    isComplete=index == len(chunks) - 1,
                )
            )
        logger.debug("Reply %s streamed in %d chunks", message_id, len(chunks))

    def _on_reply_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Chat reply stream failed: %s", error)

    async def wait_idle(self) -> None:
        """Wait for every in-flight reply to finish streaming."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def cancel_pending(self) -> None:
        for task in list(self._pending):
            task.cancel()
