"""TrackedEvent model."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class TrackedEvent(BaseModel, Generic[T]):
    """An event paired with the token a reconnecting client sends back as Last-Event-ID."""

    id: str
    data: T
