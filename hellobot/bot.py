"""HelloBot: logs every update and answers slash-commands from the registry."""

from typing import Optional

from botapi.bot_base import AsyncTelegramBotBase
from botapi.client import AsyncBotClient
from botapi.exceptions import BotRequestException
from botapi.models import Message, Update
from hellobot.logger import HelloBotLogger
from hellobot.registry import parse_command, registry

# Import handlers module so @registry.register decorators execute.
import hellobot.handlers as _handlers  # noqa: F401

logger = HelloBotLogger.get_logger()


class HelloBot(AsyncTelegramBotBase):
    """Example bot built on :class:`AsyncTelegramBotBase`.

    *username* is the bot's own username; commands addressed to any other
    bot (``/hello@other_bot``) are ignored.
    """

    def __init__(self, client: AsyncBotClient, username: Optional[str] = None) -> None:
        self.client = client
        self.username = username

    async def on_update(self, update: Update) -> None:
        logger.info("New update", extra={"update_id": update.update_id, "update_type": update.type.value})
        await super().on_update(update)

    async def on_message(self, message: Message) -> None:
        parsed = parse_command(message.text, self.username)
        if parsed is None:
            logger.debug("Message is not a command for this bot", extra={"chat_id": message.chat.id})
            return
        if not await registry.dispatch(parsed.command, self.client, message, parsed.args):
            logger.debug("No command matched", extra={"chat_id": message.chat.id, "command": parsed.command})

    async def on_bot_exception(self, exc: BotRequestException) -> None:
        logger.error(
            "Bot API error while handling update",
            extra={"error_code": exc.error_code, "error": exc.description, "retry_after": exc.retry_after},
        )

    async def on_exception(self, exc: Exception) -> None:
        logger.error("Unhandled error while handling update", exc_info=exc, extra={"error": str(exc)})
