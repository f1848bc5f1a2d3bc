"""Inbound port: platform-agnostic event representation."""

from dataclasses import dataclass
from typing import Union


@dataclass
class IncomingMessage:
    """A chat message that may carry an admin command."""

    content: str
    channel_id: int
    author_id: int
    is_admin: bool
    is_bot: bool = False


@dataclass
class ReactionChange:
    """A reaction added to or removed from a message."""

    kind: str  # "add" | "remove"
    emoji: str
    channel_id: int
    message_id: int
    user_id: int


BoardEvent = Union[IncomingMessage, ReactionChange]
