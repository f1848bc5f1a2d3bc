"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class Attachment:
    url: str
    height: Optional[int] = None  # set only for image-shaped attachments

    @property
    def is_image(self) -> bool:
        return self.height is not None


@dataclass
class ReactionSummary:
    emoji: str
    count: int


@dataclass
class TrackedMessage:
    """Snapshot of a source message as fetched from the platform."""

    id: int
    channel_id: int
    author_id: int
    author_name: str
    content: str
    jump_url: str
    guild_id: Optional[int] = None
    author_avatar_url: Optional[str] = None
    attachments: List[Attachment] = field(default_factory=list)
    reactions: List[ReactionSummary] = field(default_factory=list)
    # Adapter-owned native message; the domain never reads it.
    native: Any = field(default=None, repr=False, compare=False)

    def reaction_for(self, emoji: str) -> Optional[ReactionSummary]:
        for summary in self.reactions:
            if summary.emoji == emoji:
                return summary
        return None


@dataclass(frozen=True)
class BoardHandle:
    """Reference to a posted board message."""

    channel_id: int
    message_id: int


@dataclass
class BoardEmbed:
    author_name: str
    author_icon_url: str
    description: str
    color: int
    url: str
    image_urls: List[str] = field(default_factory=list)


@dataclass
class BoardPost:
    """Rendered board message: text prefix plus rich embed."""

    content: str
    embed: BoardEmbed


@dataclass
class CountResolution:
    """A qualifying reaction summary and the self-reaction correction."""

    summary: ReactionSummary
    me: int

    @property
    def count(self) -> int:
        return self.summary.count - self.me
