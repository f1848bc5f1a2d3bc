"""Count resolution: how many skulls a message really has.

The platform's reaction summary counts every reactor, including the
message author. The author's own skull is excluded from the displayed and
compared count.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from skullboard.domain.models import CountResolution, TrackedMessage

if TYPE_CHECKING:
    from skullboard.ports.outbound import ChatPort


async def probe_self_reaction(chat: ChatPort, message: TrackedMessage, emoji: str) -> int:
    """Cheaply guess whether the author reacted, without listing every reactor.

    Reactors are listed in id order. The first reactor overall is compared
    with the first reactor positioned after the author's id; if they differ,
    or nobody sits after the author, the author is assumed to be among the
    reactors. Approximate by construction.
    """
    first = await chat.list_reactors(message, emoji, limit=1)
    if not first:
        return 0
    after_author = await chat.list_reactors(message, emoji, limit=1, after=message.author_id)
    if not after_author or after_author[0] != first[0]:
        return 1
    return 0


async def scan_self_reaction(chat: ChatPort, message: TrackedMessage, emoji: str) -> int:
    """Exact check: list every reactor and look for the author."""
    reactors = await chat.list_reactors(message, emoji)
    return 1 if message.author_id in reactors else 0


SELF_REACTION_STRATEGIES = {
    "bounded": probe_self_reaction,
    "full": scan_self_reaction,
}


def qualifying_resolution(
    message: TrackedMessage, emoji: str, me: int, threshold: int,
) -> Optional[CountResolution]:
    """Return the resolution if the corrected count reaches the threshold."""
    for summary in message.reactions:
        if summary.emoji == emoji and summary.count - me >= threshold:
            return CountResolution(summary=summary, me=me)
    return None


async def resolve_count(
    chat: ChatPort,
    message: TrackedMessage,
    emoji: str,
    threshold: int,
    strategy: str = "bounded",
) -> Optional[CountResolution]:
    """Compute the qualifying count for a message, or None if it doesn't qualify.

    ChatAPIError from the reactor listing propagates to the caller.
    """
    me = await SELF_REACTION_STRATEGIES[strategy](chat, message, emoji)
    return qualifying_resolution(message, emoji, me, threshold)
