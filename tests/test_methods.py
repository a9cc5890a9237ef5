"""Tests for the method wrappers: required parameters, remote names and payloads."""

import sys
import os
from typing import List, Union
from unittest.mock import patch, MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi.client import BotClient
from botapi.input_file import InputFile
from botapi.methods import BotMethods
from botapi.models import (
    BotCommand,
    ChatPermissions,
    GameHighScore,
    InlineQueryResultArticle,
    InlineQueryResultsButton,
    InputSticker,
    InputTextMessageContent,
    LabeledPrice,
    Message,
    MessageId,
    PassportElementErrorDataField,
    User,
)


class RecordingMethods(BotMethods):
    """Captures ``call_method`` arguments instead of performing HTTP."""

    def __init__(self) -> None:
        self.calls: list = []

    def call_method(self, method, params=None, result_type=None):
        self.calls.append((method, params, result_type))
        return None

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture()
def api() -> RecordingMethods:
    return RecordingMethods()


# ── Required parameters ──────────────────────────────────────────────────────


class TestRequiredParameters:
    """Missing required parameters raise ValueError before any request."""

    @pytest.mark.parametrize("chat_id", [None, ""])
    def test_send_message_chat_id(self, api, chat_id) -> None:
        with pytest.raises(ValueError, match="chat_id"):
            api.send_message(chat_id=chat_id, text="hi")
        assert api.calls == []

    def test_send_message_text(self, api) -> None:
        with pytest.raises(ValueError, match="text"):
            api.send_message(chat_id=1, text="")

    def test_set_webhook_url(self, api) -> None:
        with pytest.raises(ValueError, match="url"):
            api.set_webhook(url=None)

    def test_edit_requires_a_target(self, api) -> None:
        with pytest.raises(ValueError, match="inline_message_id"):
            api.edit_message_text(text="x")
        with pytest.raises(ValueError):
            api.edit_message_reply_markup(chat_id=1)

    def test_answer_shipping_query_needs_options_when_ok(self, api) -> None:
        with pytest.raises(ValueError, match="shipping_options"):
            api.answer_shipping_query(shipping_query_id="q", ok=True)

    def test_answer_pre_checkout_query_needs_error_when_rejected(self, api) -> None:
        with pytest.raises(ValueError, match="error_message"):
            api.answer_pre_checkout_query(pre_checkout_query_id="q", ok=False)

    def test_zero_is_a_valid_value(self, api) -> None:
        api.set_sticker_position_in_set(sticker="CAAC", position=0)
        assert api.last[1] == {"sticker": "CAAC", "position": 0}

    @patch("botapi.client.requests.post")
    def test_no_http_call_on_validation_error(self, mock_post: MagicMock) -> None:
        with pytest.raises(ValueError):
            BotClient("123:ABC").forward_message(chat_id=1, from_chat_id=None, message_id=3)
        mock_post.assert_not_called()


# ── Remote names and result types ────────────────────────────────────────────


class TestRemoteNames:
    """Spot-check the remote method name and result type of each group."""

    def test_get_me(self, api) -> None:
        api.get_me()
        assert api.last == ("getMe", None, User)

    def test_send_message(self, api) -> None:
        api.send_message(chat_id="@news", text="hi", disable_notification=True)
        method, params, result_type = api.last
        assert method == "sendMessage"
        assert params["chat_id"] == "@news"
        assert params["disable_notification"] is True
        assert result_type is Message

    def test_forward_messages(self, api) -> None:
        api.forward_messages(chat_id=1, from_chat_id=2, message_ids=[3, 4])
        assert api.last[0] == "forwardMessages"
        assert api.last[2] == List[MessageId]

    def test_edit_message_caption(self, api) -> None:
        api.edit_message_caption(inline_message_id="abc", caption="new")
        assert api.last[0] == "editMessageCaption"
        assert api.last[2] == Union[Message, bool]

    def test_delete_messages(self, api) -> None:
        api.delete_messages(chat_id=1, message_ids=[1, 2, 3])
        assert api.last == ("deleteMessages", {"chat_id": 1, "message_ids": [1, 2, 3]}, bool)

    def test_restrict_chat_member(self, api) -> None:
        permissions = ChatPermissions(can_send_messages=False)
        api.restrict_chat_member(chat_id=-100, user_id=5, permissions=permissions, until_date=0)
        method, params, _ = api.last
        assert method == "restrictChatMember"
        assert params["permissions"] is permissions
        assert params["until_date"] == 0

    def test_set_my_commands(self, api) -> None:
        commands = [BotCommand(command="hello", description="Say hello")]
        api.set_my_commands(commands)
        assert api.last[0] == "setMyCommands"
        assert api.last[1]["commands"] == commands

    def test_get_my_short_description(self, api) -> None:
        api.get_my_short_description(language_code="en")
        assert api.last[0] == "getMyShortDescription"
        assert api.last[1] == {"language_code": "en"}

    def test_create_new_sticker_set(self, api) -> None:
        sticker = InputSticker(sticker=InputFile(b"webp", filename="s.webp"), emoji_list=["😀"])
        api.create_new_sticker_set(user_id=1, name="pack_by_hello_bot", title="Pack", stickers=[sticker], sticker_format="static")
        assert api.last[0] == "createNewStickerSet"
        assert api.last[1]["stickers"] == [sticker]

    def test_answer_inline_query(self, api) -> None:
        result = InlineQueryResultArticle(
            id="1",
            title="Hello",
            input_message_content=InputTextMessageContent(message_text="Hello!"),
        )
        api.answer_inline_query(inline_query_id="q", results=[result], cache_time=0)
        assert api.last[0] == "answerInlineQuery"
        assert api.last[1]["results"] == [result]

    def test_answer_inline_query_with_button(self, api) -> None:
        button = InlineQueryResultsButton(text="Set up", start_parameter="setup")
        api.answer_inline_query(inline_query_id="q", results=[], button=button)
        assert api.last[1]["button"] is button
        assert button.to_payload() == {"text": "Set up", "start_parameter": "setup"}

    def test_send_invoice(self, api) -> None:
        api.send_invoice(
            chat_id=1,
            title="Coffee",
            description="A cup",
            payload="order-1",
            provider_token="tok",
            currency="USD",
            prices=[LabeledPrice(label="Coffee", amount=300)],
        )
        method, params, _ = api.last
        assert method == "sendInvoice"
        assert params["payload"] == "order-1"

    def test_set_passport_data_errors(self, api) -> None:
        error = PassportElementErrorDataField(type="passport", field_name="name", data_hash="h", message="typo")
        api.set_passport_data_errors(user_id=1, errors=[error])
        assert api.last[0] == "setPassportDataErrors"

    def test_get_game_high_scores(self, api) -> None:
        api.get_game_high_scores(user_id=1, chat_id=2, message_id=3)
        assert api.last[0] == "getGameHighScores"
        assert api.last[2] == List[GameHighScore]
