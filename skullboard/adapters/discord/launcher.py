"""Launcher for the skullboard Discord bot."""

import asyncio
import sys
from typing import Optional

from skullboard.adapters.discord.adapter import SkullboardBot
from skullboard.config import AppConfig


def _log(msg: str):
    print(msg, file=sys.stderr)


async def launch(config: Optional[AppConfig] = None):
    """Build the bot and run it until the connection closes."""
    config = config or AppConfig.from_env()
    token = config.require_token()

    bot = SkullboardBot(config)
    _log(
        f"[skullboard] launching (threshold={config.threshold}, "
        f"board_channel={config.board_channel_id}, probe={config.self_reaction_probe})"
    )
    async with bot:
        await bot.start(token)


def main():
    asyncio.run(launch())


if __name__ == "__main__":
    main()
