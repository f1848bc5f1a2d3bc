"""Domain layer: pure Python, no framework dependencies."""

from skullboard.domain.models import (
    Attachment,
    BoardEmbed,
    BoardHandle,
    BoardPost,
    CountResolution,
    ReactionSummary,
    TrackedMessage,
)
from skullboard.domain.commands import parse_command, parse_threshold
from skullboard.domain.counting import probe_self_reaction, resolve_count, scan_self_reaction
from skullboard.domain.render import build_board_post
from skullboard.domain.state import BoardStore, SharedConfig

__all__ = [
    "Attachment",
    "BoardEmbed",
    "BoardHandle",
    "BoardPost",
    "CountResolution",
    "ReactionSummary",
    "TrackedMessage",
    "parse_command",
    "parse_threshold",
    "probe_self_reaction",
    "resolve_count",
    "scan_self_reaction",
    "build_board_post",
    "BoardStore",
    "SharedConfig",
]
