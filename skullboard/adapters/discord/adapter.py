"""Discord adapter: bridges discord.Client to SkullBoard.

DiscordChatAdapter implements ChatPort over discord.py; SkullboardBot is a
thin discord.Client subclass that converts gateway events into inbound
events and delegates them to SkullBoard.
"""

import sys
from typing import List, Optional

import discord

from skullboard.config import AppConfig
from skullboard.domain.board import SkullBoard
from skullboard.domain.models import (
    Attachment,
    BoardHandle,
    BoardPost,
    ReactionSummary,
    TrackedMessage,
)
from skullboard.domain.state import BoardStore, SharedConfig
from skullboard.ports.inbound import IncomingMessage, ReactionChange
from skullboard.ports.outbound import ChatAPIError

_TRANSPORT_ERRORS = (discord.HTTPException, discord.ClientException)
_MAX_EMBEDS = 10  # per message


def _log(msg: str):
    print(msg, file=sys.stderr)


def member_is_admin(author) -> bool:
    """True if any of the member's roles grants administrator.

    Plain users (DMs, webhooks) carry no roles and never qualify.
    """
    for role in getattr(author, "roles", None) or []:
        if role.permissions.administrator:
            return True
    return False


def to_tracked_message(message: discord.Message) -> TrackedMessage:
    """Convert a discord.Message into the platform-agnostic snapshot."""
    author = message.author
    avatar = getattr(author, "avatar", None)
    return TrackedMessage(
        id=message.id,
        channel_id=message.channel.id,
        guild_id=message.guild.id if message.guild else None,
        author_id=author.id,
        author_name=author.display_name,
        author_avatar_url=avatar.url if avatar else None,
        content=message.content,
        jump_url=message.jump_url,
        attachments=[Attachment(url=a.url, height=a.height) for a in message.attachments],
        reactions=[ReactionSummary(emoji=str(r.emoji), count=r.count) for r in message.reactions],
        native=message,
    )


def to_embeds(post: BoardPost) -> List[discord.Embed]:
    """Render a BoardPost into Discord embeds.

    Discord shows one image per embed; extra images go on sibling embeds
    sharing the main embed's url, which the client groups into a gallery.
    """
    spec = post.embed
    main = discord.Embed(description=spec.description, color=spec.color, url=spec.url)
    main.set_author(name=spec.author_name, icon_url=spec.author_icon_url)
    embeds = [main]
    for index, image_url in enumerate(spec.image_urls[:_MAX_EMBEDS]):
        if index == 0:
            main.set_image(url=image_url)
        else:
            embeds.append(discord.Embed(url=spec.url).set_image(url=image_url))
    return embeds


class DiscordChatAdapter:
    """ChatPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def _channel(self, channel_id: int):
        channel = self._client.get_channel(channel_id)
        if channel is None:
            try:
                channel = await self._client.fetch_channel(channel_id)
            except _TRANSPORT_ERRORS as e:
                raise ChatAPIError(f"channel {channel_id}: {e}") from e
        return channel

    async def _partial(self, handle: BoardHandle) -> discord.PartialMessage:
        channel = await self._channel(handle.channel_id)
        return channel.get_partial_message(handle.message_id)

    async def fetch_message(self, channel_id: int, message_id: int) -> TrackedMessage:
        channel = await self._channel(channel_id)
        try:
            message = await channel.fetch_message(message_id)
        except _TRANSPORT_ERRORS as e:
            raise ChatAPIError(f"message {message_id}: {e}") from e
        return to_tracked_message(message)

    async def list_reactors(
        self,
        message: TrackedMessage,
        emoji: str,
        limit: Optional[int] = None,
        after: Optional[int] = None,
    ) -> List[int]:
        native = message.native
        if native is None:
            native = (await self.fetch_message(message.channel_id, message.id)).native
        reaction = discord.utils.find(lambda r: str(r.emoji) == emoji, native.reactions)
        if reaction is None:
            return []
        cursor = discord.Object(id=after) if after is not None else None
        try:
            return [user.id async for user in reaction.users(limit=limit, after=cursor)]
        except _TRANSPORT_ERRORS as e:
            raise ChatAPIError(f"reactors of {message.id}: {e}") from e

    async def send_post(self, channel_id: int, post: BoardPost) -> BoardHandle:
        channel = await self._channel(channel_id)
        try:
            sent = await channel.send(content=post.content, embeds=to_embeds(post))
        except _TRANSPORT_ERRORS as e:
            raise ChatAPIError(f"send to {channel_id}: {e}") from e
        return BoardHandle(channel_id=channel_id, message_id=sent.id)

    async def edit_post(self, handle: BoardHandle, post: BoardPost) -> None:
        partial = await self._partial(handle)
        try:
            await partial.edit(content=post.content, embeds=to_embeds(post))
        except _TRANSPORT_ERRORS as e:
            raise ChatAPIError(f"edit {handle.message_id}: {e}") from e

    async def delete_post(self, handle: BoardHandle) -> None:
        partial = await self._partial(handle)
        try:
            await partial.delete()
        except _TRANSPORT_ERRORS as e:
            raise ChatAPIError(f"delete {handle.message_id}: {e}") from e

    async def add_reaction(self, handle: BoardHandle, emoji: str) -> None:
        partial = await self._partial(handle)
        try:
            await partial.add_reaction(emoji)
        except _TRANSPORT_ERRORS as e:
            raise ChatAPIError(f"react on {handle.message_id}: {e}") from e

    async def send(self, channel_id: int, text: str) -> None:
        channel = await self._channel(channel_id)
        try:
            await channel.send(text)
        except _TRANSPORT_ERRORS as e:
            raise ChatAPIError(f"send to {channel_id}: {e}") from e


class SkullboardBot(discord.Client):
    """Thin Discord client that delegates every event to SkullBoard."""

    def __init__(self, config: Optional[AppConfig] = None, **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.reactions = True
        super().__init__(intents=intents, **discord_kwargs)
        config = config or AppConfig()
        self.board = SkullBoard(
            DiscordChatAdapter(self),
            config=SharedConfig(config.threshold, config.board_channel_id),
            store=BoardStore(),
            skull_emoji=config.skull_emoji,
            marker_emoji=config.marker_emoji,
            self_reaction_probe=config.self_reaction_probe,
        )

    def _to_incoming(self, message: discord.Message) -> IncomingMessage:
        return IncomingMessage(
            content=message.content,
            channel_id=message.channel.id,
            author_id=message.author.id,
            is_admin=member_is_admin(message.author),
            is_bot=message.author.bot,
        )

    @staticmethod
    def _to_reaction_change(kind: str, payload: discord.RawReactionActionEvent) -> ReactionChange:
        return ReactionChange(
            kind=kind,
            emoji=str(payload.emoji),
            channel_id=payload.channel_id,
            message_id=payload.message_id,
            user_id=payload.user_id,
        )

    async def on_ready(self):
        _log(f"[skullboard] {self.user} is connected!")

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user or message.author == self.user:
            return
        await self.board.handle_event(self._to_incoming(message))

    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent):
        await self.board.handle_event(self._to_reaction_change("add", payload))

    async def on_raw_reaction_remove(self, payload: discord.RawReactionActionEvent):
        await self.board.handle_event(self._to_reaction_change("remove", payload))
