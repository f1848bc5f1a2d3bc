"""Configuration and startup settings."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

SKULL = "💀"
ULTRA_SKULL = "☠️"

DEFAULT_THRESHOLD = 4
DEFAULT_AVATAR_URL = "https://cdn.discordapp.com/embed/avatars/0.png"
EMBED_COLOR = 0xFF0000

SUPPORTED_PROBES = ("bounded", "full")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default!r}")
        return default
    if value < 0:
        _stderr_print(f"Negative {name}={raw!r}, falling back to {default!r}")
        return default
    return value


DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "")

THRESHOLD = _env_int("SKULLBOARD_THRESHOLD", DEFAULT_THRESHOLD)
BOARD_CHANNEL_ID = _env_int("SKULLBOARD_CHANNEL_ID", None)

SELF_REACTION_PROBE = os.getenv("SKULLBOARD_SELF_REACTION_PROBE", "bounded").strip().lower()
if SELF_REACTION_PROBE not in SUPPORTED_PROBES:
    _stderr_print(
        f"Unsupported SKULLBOARD_SELF_REACTION_PROBE={SELF_REACTION_PROBE!r}, "
        "falling back to 'bounded'"
    )
    SELF_REACTION_PROBE = "bounded"


@dataclass
class AppConfig:
    """Typed process configuration."""

    discord_token: str = ""
    threshold: int = DEFAULT_THRESHOLD
    board_channel_id: Optional[int] = None
    self_reaction_probe: str = "bounded"
    skull_emoji: str = SKULL
    marker_emoji: str = ULTRA_SKULL

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            discord_token=DISCORD_TOKEN,
            threshold=THRESHOLD,
            board_channel_id=BOARD_CHANNEL_ID,
            self_reaction_probe=SELF_REACTION_PROBE,
        )

    def require_token(self) -> str:
        if not self.discord_token:
            raise RuntimeError("Missing DISCORD_TOKEN env var")
        return self.discord_token
