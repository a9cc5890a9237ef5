"""Command handlers for the hello bot.

Each public coroutine handles a single slash-command and is invoked by
:class:`hellobot.bot.HelloBot` through the registry.
"""

from botapi.client import AsyncBotClient
from botapi.models import Message, ReplyParameters
from hellobot.logger import HelloBotLogger
from hellobot.registry import registry

logger = HelloBotLogger.get_logger()


def _first_name(message: Message) -> str:
    if message.from_field is not None:
        return message.from_field.first_name
    if message.sender_chat is not None and message.sender_chat.title:
        return message.sender_chat.title
    return "there"


@registry.register("/start", description="Start the conversation")
async def handle_start(client: AsyncBotClient, message: Message, args: list[str]) -> None:
    """Handle /start: greet the user and point at /help."""
    logger.info("User invoked /start", extra={"chat_id": message.chat.id, "command": "/start"})
    await client.send_message(
        chat_id=message.chat.id,
        text=f"Hi, {_first_name(message)}! Send /hello to get a greeting or /help to see what I can do.",
    )


@registry.register("/hello", description="Say hello")
async def handle_hello(client: AsyncBotClient, message: Message, args: list[str]) -> None:
    """Handle /hello: reply with ``Hello, <first name>!``."""
    logger.info("User invoked /hello", extra={"chat_id": message.chat.id, "command": "/hello"})
    await client.send_message(
        chat_id=message.chat.id,
        text=f"Hello, {_first_name(message)}!",
        reply_parameters=ReplyParameters(message_id=message.message_id, allow_sending_without_reply=True),
    )


@registry.register("/help", description="List available commands")
async def handle_help(client: AsyncBotClient, message: Message, args: list[str]) -> None:
    """Handle /help: list every registered command."""
    lines = ["Available commands:"]
    for command, entry in registry.entries().items():
        lines.append(f"{command} - {entry.description}")
    await client.send_message(chat_id=message.chat.id, text="\n".join(lines))
