"""Tests for the update-type switch in TelegramBotBase / AsyncTelegramBotBase."""

import sys
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi.bot_base import AsyncTelegramBotBase, TelegramBotBase
from botapi.exceptions import BotRequestException
from botapi.models import CallbackQuery, Message, Update

MESSAGE = {
    "message_id": 1,
    "date": 0,
    "chat": {"id": 42, "type": "private"},
    "from": {"id": 42, "is_bot": False, "first_name": "Ada"},
    "text": "hi",
}


def _update(**payload) -> Update:
    return Update.model_validate({"update_id": 1, **payload})


class RecordingBot(TelegramBotBase):
    def __init__(self) -> None:
        self.seen: list = []
        self.bot_errors: list = []
        self.errors: list = []

    def on_message(self, message: Message) -> None:
        self.seen.append(("message", message))

    def on_edited_message(self, message: Message) -> None:
        self.seen.append(("edited_message", message))

    def on_callback_query(self, callback_query: CallbackQuery) -> None:
        raise BotRequestException(400, "Bad Request: query is too old")

    def on_channel_post(self, message: Message) -> None:
        raise RuntimeError("boom")

    def on_bot_exception(self, exc: BotRequestException) -> None:
        self.bot_errors.append(exc)

    def on_exception(self, exc: Exception) -> None:
        self.errors.append(exc)


# ── TelegramBotBase ──────────────────────────────────────────────────────────


class TestTelegramBotBase:
    """Each update type reaches its own hook."""

    def test_message_routed(self) -> None:
        bot = RecordingBot()
        bot.on_update(_update(message=MESSAGE))
        kind, message = bot.seen[0]
        assert kind == "message"
        assert message.text == "hi"

    def test_edited_message_routed(self) -> None:
        bot = RecordingBot()
        bot.on_update(_update(edited_message=MESSAGE))
        assert bot.seen[0][0] == "edited_message"

    def test_bot_exception_routed(self) -> None:
        bot = RecordingBot()
        bot.on_update(_update(callback_query={
            "id": "cb",
            "from": {"id": 1, "is_bot": False, "first_name": "X"},
            "chat_instance": "ci",
        }))
        assert len(bot.bot_errors) == 1
        assert bot.bot_errors[0].error_code == 400
        assert bot.errors == []

    def test_other_exception_routed(self) -> None:
        bot = RecordingBot()
        bot.on_update(_update(channel_post=MESSAGE))
        assert isinstance(bot.errors[0], RuntimeError)
        assert bot.bot_errors == []

    def test_unknown_update_ignored(self) -> None:
        bot = RecordingBot()
        bot.on_update(Update(update_id=9))
        assert bot.seen == []
        assert bot.errors == []

    def test_default_hooks_do_nothing(self) -> None:
        TelegramBotBase().on_update(_update(poll={
            "id": "p",
            "question": "?",
            "options": [],
            "total_voter_count": 0,
            "is_closed": False,
            "is_anonymous": True,
            "type": "regular",
            "allows_multiple_answers": False,
        }))

    def test_default_exception_hooks_log(self, caplog) -> None:
        class Failing(TelegramBotBase):
            def on_message(self, message: Message) -> None:
                raise BotRequestException(403, "Forbidden")

        with caplog.at_level("ERROR", logger="botapi.bot_base"):
            Failing().on_update(_update(message=MESSAGE))
        assert "Bot API error" in caplog.text


# ── AsyncTelegramBotBase ─────────────────────────────────────────────────────


class TestAsyncTelegramBotBase:

    @pytest.mark.asyncio
    async def test_message_awaited(self) -> None:
        bot = AsyncTelegramBotBase()
        bot.on_message = AsyncMock()
        await bot.on_update(_update(message=MESSAGE))
        bot.on_message.assert_awaited_once()
        assert bot.on_message.await_args.args[0].chat.id == 42

    @pytest.mark.asyncio
    async def test_exceptions_routed(self) -> None:
        bot = AsyncTelegramBotBase()
        bot.on_message = AsyncMock(side_effect=BotRequestException(429, "Too Many Requests"))
        bot.on_chat_join_request = AsyncMock(side_effect=KeyError("x"))
        bot.on_bot_exception = AsyncMock()
        bot.on_exception = AsyncMock()

        await bot.on_update(_update(message=MESSAGE))
        await bot.on_update(_update(chat_join_request={
            "chat": {"id": -100, "type": "supergroup"},
            "from": {"id": 5, "is_bot": False, "first_name": "Z"},
            "user_chat_id": 5,
            "date": 0,
        }))

        bot.on_bot_exception.assert_awaited_once()
        bot.on_exception.assert_awaited_once()
        assert isinstance(bot.on_exception.await_args.args[0], KeyError)

    @pytest.mark.asyncio
    async def test_unknown_update_skipped(self) -> None:
        bot = AsyncTelegramBotBase()
        bot.on_exception = MagicMock()
        await bot.on_update(Update(update_id=1))
        bot.on_exception.assert_not_called()
