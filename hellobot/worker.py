"""Long-polling worker.

Fetches updates with ``getUpdates`` and hands each one to :class:`HelloBot`
as an independent :func:`asyncio.create_task`, so a slow handler never
blocks the next poll.
"""

import asyncio
from typing import Optional

import requests
from pydantic import ValidationError

from botapi.client import AsyncBotClient
from botapi.exceptions import BotRequestException
from config import ALLOWED_UPDATES, API_SERVER, BOT_TOKEN, POLL_TIMEOUT, REQUEST_TIMEOUT, RETRY_DELAY
from hellobot.bot import HelloBot
from hellobot.logger import HelloBotLogger
from hellobot.registry import registry

logger = HelloBotLogger.get_logger()

# Strong references to in-flight update tasks.
_tasks: set[asyncio.Task] = set()


async def poll_once(
    client: AsyncBotClient,
    bot: HelloBot,
    offset: Optional[int],
    timeout: int = POLL_TIMEOUT,
    allowed_updates: Optional[list[str]] = None,
) -> Optional[int]:
    """Fetch one batch of updates, spawn a task per update, return the next offset.

    *allowed_updates* defaults to the configured ``ALLOWED_UPDATES``.
    """
    if allowed_updates is None:
        allowed_updates = ALLOWED_UPDATES
    updates = await client.get_updates(offset=offset, timeout=timeout, allowed_updates=allowed_updates)
    if updates:
        logger.debug("Received updates", extra={"count": len(updates)})
    for update in updates:
        task = asyncio.create_task(bot.on_update(update))
        _tasks.add(task)
        task.add_done_callback(_tasks.discard)
        offset = update.update_id + 1
    return offset


async def start(client: AsyncBotClient) -> HelloBot:
    """Identify the bot and publish the registry's commands."""
    me = await client.get_me()
    await client.set_my_commands(registry.bot_commands())
    logger.info("Bot identified", extra={"bot_id": me.id, "username": me.username})
    return HelloBot(client, me.username)


async def run() -> None:
    """Start the async long-polling loop.

    Raises:
        EnvironmentError: If ``BOT_TOKEN`` is not set.
    """
    if not BOT_TOKEN:
        raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")

    client = AsyncBotClient(BOT_TOKEN, API_SERVER, REQUEST_TIMEOUT)
    bot = await start(client)
    offset: Optional[int] = None

    logger.info("HelloBot is running. Polling for updates...")
    while True:
        try:
            offset = await poll_once(client, bot, offset)
        except (BotRequestException, requests.RequestException, ValidationError) as exc:
            logger.warning(
                "getUpdates failed, retrying",
                extra={"api_endpoint": "getUpdates", "error": str(exc), "retry_delay": RETRY_DELAY},
            )
            await asyncio.sleep(RETRY_DELAY)
