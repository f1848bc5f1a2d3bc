"""Discord adapter package."""

from skullboard.adapters.discord.adapter import DiscordChatAdapter, SkullboardBot  # noqa: F401
from skullboard.adapters.discord.launcher import launch, main  # noqa: F401

__all__ = ["DiscordChatAdapter", "SkullboardBot", "launch", "main"]
