"""Outbound ports: interfaces for external system adapters."""

from typing import List, Optional, Protocol, runtime_checkable

from skullboard.domain.models import BoardHandle, BoardPost, TrackedMessage


class ChatAPIError(Exception):
    """Raised by chat adapters when a platform call fails."""


@runtime_checkable
class ChatPort(Protocol):
    """Interface for the chat platform the board lives on.

    Every method raises ChatAPIError on transport or API failure.
    """

    async def fetch_message(self, channel_id: int, message_id: int) -> TrackedMessage: ...

    async def list_reactors(
        self,
        message: TrackedMessage,
        emoji: str,
        limit: Optional[int] = None,
        after: Optional[int] = None,
    ) -> List[int]: ...

    async def send_post(self, channel_id: int, post: BoardPost) -> BoardHandle: ...
    async def edit_post(self, handle: BoardHandle, post: BoardPost) -> None: ...
    async def delete_post(self, handle: BoardHandle) -> None: ...
    async def add_reaction(self, handle: BoardHandle, emoji: str) -> None: ...
    async def send(self, channel_id: int, text: str) -> None: ...
