"""Port interfaces (Hexagonal Architecture)."""

from skullboard.ports.inbound import BoardEvent, IncomingMessage, ReactionChange
from skullboard.ports.outbound import ChatAPIError, ChatPort

__all__ = [
    "BoardEvent",
    "IncomingMessage",
    "ReactionChange",
    "ChatAPIError",
    "ChatPort",
]
