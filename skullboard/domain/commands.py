"""Admin command parsing.

Pure Python, no framework dependencies.
"""

import re
from typing import Optional, Tuple

SET_SKULL = "!setskull"
SET_CHANNEL = "!setchannel"

REPLY_SKULL_SET = "Skull count set!"
REPLY_INVALID_NUMBER = "Invalid number!"
REPLY_CHANNEL_SET = "Channel set!"

_U64_MAX = 2**64 - 1
_NUMBER_RE = re.compile(r"\+?[0-9]+")


def parse_command(content: str) -> Optional[Tuple[str, str]]:
    """Split a message into (command, argument), or None if it isn't one.

    ``!setskull`` needs an argument after the first whitespace;
    ``!setchannel`` must be the whole message.
    """
    if content == SET_CHANNEL:
        return SET_CHANNEL, ""
    head = len(SET_SKULL)
    if content.startswith(SET_SKULL) and len(content) > head and content[head].isspace():
        return SET_SKULL, content[head + 1:]
    return None


def parse_threshold(arg: str) -> Optional[int]:
    """Parse a non-negative 64-bit threshold, None if invalid."""
    if not _NUMBER_RE.fullmatch(arg):
        return None
    value = int(arg)
    if value > _U64_MAX:
        return None
    return value
