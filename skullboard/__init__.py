"""Skullboard: mirrors well-skulled Discord messages onto a board channel."""

from skullboard.config import __version__, AppConfig, SKULL, ULTRA_SKULL
from skullboard.domain.state import BoardStore, SharedConfig
from skullboard.ports import ChatAPIError, ChatPort, IncomingMessage, ReactionChange
from skullboard.domain.board import SkullBoard

__all__ = [
    "__version__",
    "AppConfig",
    "SKULL",
    "ULTRA_SKULL",
    "BoardStore",
    "SharedConfig",
    "ChatAPIError",
    "ChatPort",
    "IncomingMessage",
    "ReactionChange",
    "SkullBoard",
]
