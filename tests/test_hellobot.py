"""Tests for the example bot: command parsing, handlers and the polling worker."""

import asyncio
import json
import logging
import sys
import os
from unittest.mock import patch, AsyncMock, MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi.exceptions import BotRequestException
from botapi.models import BotCommand, Update, User
from hellobot import worker
from hellobot.bot import HelloBot
from hellobot.logger import HelloBotLogger, _JsonFormatter
from hellobot.registry import CommandRegistry, parse_command, registry


# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture()
def client() -> MagicMock:
    """A stand-in for AsyncBotClient with awaitable methods."""
    mock = MagicMock()
    mock.send_message = AsyncMock()
    mock.get_updates = AsyncMock(return_value=[])
    mock.get_me = AsyncMock(return_value=User(id=1, is_bot=True, first_name="Hello", username="hello_bot"))
    mock.set_my_commands = AsyncMock(return_value=True)
    return mock


def _text_update(text: str, update_id: int = 1, first_name: str = "Ada") -> Update:
    return Update.model_validate({
        "update_id": update_id,
        "message": {
            "message_id": 10,
            "date": 0,
            "chat": {"id": 42, "type": "private"},
            "from": {"id": 42, "is_bot": False, "first_name": first_name},
            "text": text,
        },
    })


# ── parse_command ────────────────────────────────────────────────────────────


class TestParseCommand:
    """Validate the /<command>[@<botusername>] [args...] grammar."""

    def test_plain_command(self) -> None:
        parsed = parse_command("/hello")
        assert parsed.command == "/hello"
        assert parsed.args == []

    def test_command_with_args(self) -> None:
        parsed = parse_command("/hello  big   world", "hello_bot")
        assert parsed.command == "/hello"
        assert parsed.args == ["big", "world"]

    def test_addressed_to_this_bot(self) -> None:
        assert parse_command("/Hello@Hello_Bot", "hello_bot").command == "/hello"

    def test_addressed_to_another_bot(self) -> None:
        assert parse_command("/hello@other_bot", "hello_bot") is None

    @pytest.mark.parametrize("text", [None, "", "hello", "/", " /hello"])
    def test_not_a_command(self, text) -> None:
        assert parse_command(text, "hello_bot") is None


# ── Registry ─────────────────────────────────────────────────────────────────


class TestRegistry:

    def test_singleton(self) -> None:
        assert CommandRegistry() is registry

    def test_builtin_commands_registered(self) -> None:
        assert {"/start", "/hello", "/help"} <= set(registry.entries())

    def test_bot_commands(self) -> None:
        commands = registry.bot_commands()
        assert BotCommand(command="hello", description="Say hello") in commands
        assert all(not c.command.startswith("/") for c in commands)

    @pytest.mark.asyncio
    async def test_dispatch_unknown(self, client) -> None:
        assert await registry.dispatch("/nope", client, MagicMock(), []) is False


# ── HelloBot ─────────────────────────────────────────────────────────────────


class TestHelloBot:
    """Commands reach their handlers through on_update."""

    @pytest.mark.asyncio
    async def test_hello_greets_by_first_name(self, client) -> None:
        await HelloBot(client, "hello_bot").on_update(_text_update("/hello", first_name="Grace"))
        client.send_message.assert_awaited_once()
        kwargs = client.send_message.await_args.kwargs
        assert kwargs["chat_id"] == 42
        assert kwargs["text"] == "Hello, Grace!"
        assert kwargs["reply_parameters"].message_id == 10

    @pytest.mark.asyncio
    async def test_start(self, client) -> None:
        await HelloBot(client, "hello_bot").on_update(_text_update("/start"))
        assert "Ada" in client.send_message.await_args.kwargs["text"]

    @pytest.mark.asyncio
    async def test_help_lists_commands(self, client) -> None:
        await HelloBot(client, "hello_bot").on_update(_text_update("/help@hello_bot"))
        text = client.send_message.await_args.kwargs["text"]
        for command in ("/start", "/hello", "/help"):
            assert command in text

    @pytest.mark.asyncio
    async def test_other_bot_ignored(self, client) -> None:
        await HelloBot(client, "hello_bot").on_update(_text_update("/hello@other_bot"))
        client.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_plain_text_ignored(self, client) -> None:
        await HelloBot(client, "hello_bot").on_update(_text_update("good morning"))
        client.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_api_error_does_not_escape(self, client) -> None:
        client.send_message.side_effect = BotRequestException(403, "Forbidden: bot was blocked by the user")
        bot = HelloBot(client, "hello_bot")
        with patch.object(HelloBot, "on_bot_exception", new_callable=AsyncMock) as mock_handler:
            await bot.on_update(_text_update("/hello"))
        mock_handler.assert_awaited_once()


# ── Worker ───────────────────────────────────────────────────────────────────


class TestWorker:

    @pytest.mark.asyncio
    @patch("hellobot.worker.ALLOWED_UPDATES", None)
    async def test_poll_once_advances_offset(self, client) -> None:
        client.get_updates.return_value = [_text_update("/hello", update_id=5), Update(update_id=6)]
        bot = MagicMock()
        bot.on_update = AsyncMock()

        offset = await worker.poll_once(client, bot, None, timeout=0, allowed_updates=None)
        await asyncio.gather(*list(worker._tasks))

        assert offset == 7
        assert bot.on_update.await_count == 2
        client.get_updates.assert_awaited_once_with(offset=None, timeout=0, allowed_updates=None)

    @pytest.mark.asyncio
    async def test_poll_once_without_updates_keeps_offset(self, client) -> None:
        offset = await worker.poll_once(client, MagicMock(), 12, timeout=0, allowed_updates=["message"])
        assert offset == 12

    @pytest.mark.asyncio
    @patch("hellobot.worker.ALLOWED_UPDATES", ["message", "callback_query"])
    async def test_poll_once_uses_configured_allowed_updates(self, client) -> None:
        await worker.poll_once(client, MagicMock(), 3, timeout=0)
        client.get_updates.assert_awaited_once_with(offset=3, timeout=0, allowed_updates=["message", "callback_query"])

    @pytest.mark.asyncio
    async def test_start_publishes_commands(self, client) -> None:
        bot = await worker.start(client)
        assert bot.username == "hello_bot"
        published = client.set_my_commands.await_args.args[0]
        assert {c.command for c in published} >= {"start", "hello", "help"}

    @pytest.mark.asyncio
    async def test_run_requires_token(self) -> None:
        with patch("hellobot.worker.BOT_TOKEN", None):
            with pytest.raises(EnvironmentError):
                await worker.run()

    @pytest.mark.asyncio
    @patch("hellobot.worker.asyncio.sleep", new_callable=AsyncMock)
    @patch("hellobot.worker.poll_once", new_callable=AsyncMock)
    @patch("hellobot.worker.start", new_callable=AsyncMock)
    async def test_run_retries_after_failure(self, mock_start, mock_poll, mock_sleep) -> None:
        mock_poll.side_effect = [requests.ConnectionError("offline"), 3, asyncio.CancelledError()]
        with patch("hellobot.worker.BOT_TOKEN", "123:ABC"), patch("hellobot.worker.RETRY_DELAY", 5):
            with pytest.raises(asyncio.CancelledError):
                await worker.run()
        mock_sleep.assert_awaited_once_with(5)
        assert mock_poll.await_args.args[2] == 3


# ── Logging ──────────────────────────────────────────────────────────────────


class TestLogging:

    def test_json_formatter_merges_extra(self) -> None:
        record = logging.LogRecord(
            name="botapi.client", level=logging.ERROR, pathname=__file__, lineno=1,
            msg="Bot API request failed", args=(), exc_info=None,
        )
        record.api_endpoint = "sendMessage"
        record.status_code = 403

        entry = json.loads(_JsonFormatter().format(record))
        assert entry["level"] == "ERROR"
        assert entry["logger"] == "botapi.client"
        assert entry["message"] == "Bot API request failed"
        assert entry["api_endpoint"] == "sendMessage"
        assert entry["status_code"] == 403
        assert "exception" not in entry

    def test_json_formatter_includes_traceback(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                name="hellobot", level=logging.ERROR, pathname=__file__, lineno=1,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )
        entry = json.loads(_JsonFormatter().format(record))
        assert "RuntimeError: boom" in entry["exception"]

    def test_library_logger_shares_handlers(self) -> None:
        app_logger = HelloBotLogger.get_logger()
        assert app_logger is HelloBotLogger.get_logger()
        library_handlers = logging.getLogger("botapi").handlers
        for handler in app_logger.handlers:
            assert handler in library_handlers
