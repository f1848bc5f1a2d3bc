"""Tests for domain/render.py: board message composition."""

from skullboard.config import DEFAULT_AVATAR_URL, EMBED_COLOR, SKULL
from skullboard.domain.models import Attachment, TrackedMessage
from skullboard.domain.render import board_content, build_board_post


JUMP = "https://discord.com/channels/1/100/7"


def _message(**overrides):
    fields = dict(
        id=7,
        channel_id=100,
        author_id=5,
        author_name="Poster",
        content="look at this",
        jump_url=JUMP,
    )
    fields.update(overrides)
    return TrackedMessage(**fields)


class TestBoardContent:
    def test_format(self):
        assert board_content(SKULL, 6, 100) == f"{SKULL} **6 |** <#100>\n"


class TestBuildBoardPost:
    def test_embed_fields(self):
        post = build_board_post(_message(author_avatar_url="https://cdn/avatar.png"), 4, SKULL)
        assert post.content == f"{SKULL} **4 |** <#100>\n"
        assert post.embed.author_name == "Poster"
        assert post.embed.author_icon_url == "https://cdn/avatar.png"
        assert post.embed.description == f"look at this\n\n\n[Go to Message]({JUMP})"
        assert post.embed.color == EMBED_COLOR
        assert post.embed.url == JUMP
        assert post.embed.image_urls == []

    def test_default_avatar(self):
        post = build_board_post(_message(author_avatar_url=None), 4, SKULL)
        assert post.embed.author_icon_url == DEFAULT_AVATAR_URL

    def test_only_image_attachments_rendered(self):
        attachments = [
            Attachment(url="https://cdn/a.png", height=200),
            Attachment(url="https://cdn/notes.txt"),
            Attachment(url="https://cdn/b.gif", height=64),
        ]
        post = build_board_post(_message(attachments=attachments), 4, SKULL)
        assert post.embed.image_urls == ["https://cdn/a.png", "https://cdn/b.gif"]

    def test_empty_content_still_links(self):
        post = build_board_post(_message(content=""), 4, SKULL)
        assert post.embed.description.endswith(f"[Go to Message]({JUMP})")
