"""Board message rendering.

Pure Python, no framework dependencies.
"""

from skullboard.config import DEFAULT_AVATAR_URL, EMBED_COLOR
from skullboard.domain.models import BoardEmbed, BoardPost, TrackedMessage


def channel_mention(channel_id: int) -> str:
    return f"<#{channel_id}>"


def board_content(emoji: str, count: int, channel_id: int) -> str:
    """Text prefix: glyph, bold count, separator, origin channel, line break."""
    return f"{emoji} **{count} |** {channel_mention(channel_id)}\n"


def board_description(message: TrackedMessage) -> str:
    return f"{message.content}\n\n\n[Go to Message]({message.jump_url})"


def build_board_post(message: TrackedMessage, count: int, emoji: str) -> BoardPost:
    embed = BoardEmbed(
        author_name=message.author_name,
        author_icon_url=message.author_avatar_url or DEFAULT_AVATAR_URL,
        description=board_description(message),
        color=EMBED_COLOR,
        url=message.jump_url,
        image_urls=[a.url for a in message.attachments if a.is_image],
    )
    return BoardPost(content=board_content(emoji, count, message.channel_id), embed=embed)
