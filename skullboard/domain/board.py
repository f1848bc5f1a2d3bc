"""SkullBoard: reaction tracking and board reconciliation, no framework dependencies.

Receives platform-agnostic events, decides whether a message belongs on the
board, and keeps the mirrored board message in sync through a ChatPort.
"""

import sys
from typing import Optional

from skullboard.config import SKULL, ULTRA_SKULL
from skullboard.domain.commands import (
    REPLY_CHANNEL_SET,
    REPLY_INVALID_NUMBER,
    REPLY_SKULL_SET,
    SET_CHANNEL,
    SET_SKULL,
    parse_command,
    parse_threshold,
)
from skullboard.domain.counting import SELF_REACTION_STRATEGIES, resolve_count
from skullboard.domain.models import CountResolution, TrackedMessage
from skullboard.domain.render import build_board_post
from skullboard.domain.state import BoardStore, SharedConfig
from skullboard.ports.inbound import BoardEvent, IncomingMessage, ReactionChange
from skullboard.ports.outbound import ChatAPIError, ChatPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class SkullBoard:
    """Pure board logic, no discord import, testable with mock ports.

    Handles:
    - Reaction filtering (only the skull emoji counts)
    - Self-reaction correction of the skull count
    - Create / edit / delete of board messages
    - !setskull and !setchannel admin commands
    """

    def __init__(
        self,
        chat: ChatPort,
        config: Optional[SharedConfig] = None,
        store: Optional[BoardStore] = None,
        skull_emoji: str = SKULL,
        marker_emoji: str = ULTRA_SKULL,
        self_reaction_probe: str = "bounded",
    ):
        if self_reaction_probe not in SELF_REACTION_STRATEGIES:
            raise ValueError(f"unknown self-reaction probe: {self_reaction_probe!r}")
        self.chat = chat
        self.config = config or SharedConfig()
        self.store = store or BoardStore()
        self.skull_emoji = skull_emoji
        self.marker_emoji = marker_emoji
        self._probe = self_reaction_probe

    async def handle_event(self, event: BoardEvent) -> None:
        """Single entry point; add and remove share one reconciliation path."""
        if isinstance(event, ReactionChange):
            await self.handle_reaction_change(event)
        elif isinstance(event, IncomingMessage):
            await self.handle_message(event)
        else:
            raise TypeError(f"unsupported event: {type(event).__name__}")

    # -- Reactions --

    async def handle_reaction_change(self, event: ReactionChange) -> None:
        if event.emoji != self.skull_emoji:
            return

        board_channel_id = await self.config.get_board_channel()
        if board_channel_id is None:
            return

        try:
            message = await self.chat.fetch_message(event.channel_id, event.message_id)
        except ChatAPIError as e:
            _log(f"[skullboard] error fetching message {event.message_id}: {e}")
            return

        if event.user_id == message.author_id:
            return

        threshold = await self.config.get_threshold()
        try:
            resolution = await resolve_count(
                self.chat, message, self.skull_emoji, threshold, strategy=self._probe,
            )
        except ChatAPIError as e:
            _log(f"[skullboard] error fetching reactors for {message.id}: {e}")
            return

        await self.reconcile(message, resolution, board_channel_id)

    async def reconcile(
        self,
        message: TrackedMessage,
        resolution: Optional[CountResolution],
        board_channel_id: int,
    ) -> None:
        """Bring the board in line with the message's current qualification."""
        async with self.store.hold(message.id):
            if resolution is None:
                handle = await self.store.pop(message.id)
                if handle is not None:
                    try:
                        await self.chat.delete_post(handle)
                    except ChatAPIError as e:
                        _log(f"[skullboard] error deleting board message {handle.message_id}: {e}")
                return

            post = build_board_post(message, resolution.count, self.skull_emoji)
            existing = await self.store.get(message.id)
            if existing is not None:
                try:
                    await self.chat.edit_post(existing, post)
                except ChatAPIError as e:
                    _log(f"[skullboard] error editing board message {existing.message_id}: {e}")
                return

            try:
                handle = await self.chat.send_post(board_channel_id, post)
            except ChatAPIError as e:
                _log(f"[skullboard] error sending board message for {message.id}: {e}")
                return
            try:
                await self.chat.add_reaction(handle, self.marker_emoji)
            except ChatAPIError:
                pass  # best-effort
            await self.store.put(message.id, handle)

    # -- Admin commands --

    async def handle_message(self, msg: IncomingMessage) -> None:
        if msg.is_bot:
            return
        parsed = parse_command(msg.content)
        if parsed is None or not msg.is_admin:
            return

        cmd, arg = parsed
        if cmd == SET_SKULL:
            threshold = parse_threshold(arg)
            if threshold is None:
                await self._reply(msg.channel_id, REPLY_INVALID_NUMBER)
                return
            await self.config.set_threshold(threshold)
            _log(f"[skullboard] threshold set to {threshold} by {msg.author_id}")
            await self._reply(msg.channel_id, REPLY_SKULL_SET)
        elif cmd == SET_CHANNEL:
            await self.config.set_board_channel(msg.channel_id)
            _log(f"[skullboard] board channel set to {msg.channel_id} by {msg.author_id}")
            await self._reply(msg.channel_id, REPLY_CHANNEL_SET)

    async def _reply(self, channel_id: int, text: str) -> None:
        try:
            await self.chat.send(channel_id, text)
        except ChatAPIError as e:
            _log(f"[skullboard] error replying in {channel_id}: {e}")
