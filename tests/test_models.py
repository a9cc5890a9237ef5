"""Tests for the Pydantic data models."""

import sys
import os

import pytest
from pydantic import TypeAdapter, ValidationError

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi.input_file import InputFile
from botapi.models import (
    BotCommandScope,
    BotCommandScopeAllPrivateChats,
    BotCommandScopeChatMember,
    Chat,
    ChatMember,
    ChatMemberAdministrator,
    ChatMemberBanned,
    ChatType,
    ForceReply,
    InlineKeyboardMarkup,
    InputMedia,
    InputMediaDocument,
    InputMediaVideo,
    ExternalReplyInfo,
    Message,
    MessageEntity,
    MessageOriginChannel,
    MessageOriginHiddenUser,
    MessageOriginUser,
    MessageEntityType,
    PassportElementError,
    PassportElementErrorFiles,
    PhotoSize,
    ReplyKeyboardRemove,
    Update,
    UpdateType,
    User,
    WebhookInfo,
)


# ── User ─────────────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.id == 42
        assert u.is_bot is False
        assert u.last_name is None
        assert u.username is None

    def test_64_bit_id(self) -> None:
        """Telegram IDs can be 64-bit integers."""
        big_id = 5_000_000_000
        u = User(id=big_id, is_bot=False, first_name="Big")
        assert u.id == big_id

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False)

    def test_unknown_keys_ignored(self) -> None:
        u = User.model_validate({"id": 1, "is_bot": False, "first_name": "X", "brand_new_field": 1})
        assert not hasattr(u, "brand_new_field")

    def test_value_equality(self) -> None:
        assert User(id=1, is_bot=False, first_name="A") == User(id=1, is_bot=False, first_name="A")
        assert User(id=1, is_bot=False, first_name="A") != User(id=1, is_bot=False, first_name="B")


# ── Update ───────────────────────────────────────────────────────────────────


def _message_dict(text: str = "hello") -> dict:
    return {
        "message_id": 100,
        "date": 1609459200,
        "chat": {"id": -1001234, "type": "supergroup"},
        "from": {"id": 42, "is_bot": False, "first_name": "Ada"},
        "text": text,
    }


class TestUpdateModel:
    """Validate the Update schema and its type switch."""

    def test_minimal_update_is_unknown(self) -> None:
        up = Update(update_id=1)
        assert up.message is None
        assert up.type is UpdateType.UNKNOWN
        assert up.payload is None

    def test_update_with_nested_message(self) -> None:
        up = Update.model_validate({"update_id": 10, "message": _message_dict()})
        assert up.type is UpdateType.MESSAGE
        assert up.payload is up.message
        assert up.message.from_field.first_name == "Ada"

    @pytest.mark.parametrize("field, expected", [
        ("edited_message", UpdateType.EDITED_MESSAGE),
        ("channel_post", UpdateType.CHANNEL_POST),
        ("edited_channel_post", UpdateType.EDITED_CHANNEL_POST),
    ])
    def test_message_like_types(self, field, expected) -> None:
        up = Update.model_validate({"update_id": 2, field: _message_dict()})
        assert up.type is expected

    def test_callback_query_type(self) -> None:
        up = Update.model_validate({
            "update_id": 3,
            "callback_query": {
                "id": "cb",
                "from": {"id": 1, "is_bot": False, "first_name": "X"},
                "chat_instance": "ci",
                "data": "go",
            },
        })
        assert up.type is UpdateType.CALLBACK_QUERY
        assert up.callback_query.from_field.id == 1

    def test_unknown_payload_key(self) -> None:
        up = Update.model_validate({"update_id": 4, "message_reaction": {"chat": {}}})
        assert up.type is UpdateType.UNKNOWN


# ── Chat and Message ─────────────────────────────────────────────────────────


class TestChatModel:

    def test_negative_group_id(self) -> None:
        """Groups/channels use negative IDs."""
        c = Chat(id=-1001234567890, type="supergroup")
        assert c.id < 0
        assert c.type == ChatType.SUPERGROUP


class TestMessageModel:

    def test_from_alias_both_ways(self) -> None:
        msg = Message.model_validate(_message_dict())
        assert msg.to_payload()["from"]["id"] == 42
        assert "from_field" not in msg.to_payload()

    def test_populate_by_name(self) -> None:
        msg = Message(
            message_id=1,
            date=0,
            chat=Chat(id=1, type="private"),
            from_field=User(id=2, is_bot=False, first_name="Y"),
        )
        assert msg.from_field.id == 2

    def test_entity_text_counts_utf16(self) -> None:
        msg = Message.model_validate(_message_dict("😀 /hello world"))
        entity = MessageEntity(type=MessageEntityType.BOT_COMMAND, offset=3, length=6)
        assert msg.entity_text(entity) == "/hello"

    def test_forwarded_from_user(self) -> None:
        data = _message_dict("fwd")
        data["forward_origin"] = {"type": "user", "date": 10, "sender_user": {"id": 5, "is_bot": False, "first_name": "Ann"}}
        msg = Message.model_validate(data)
        assert isinstance(msg.forward_origin, MessageOriginUser)
        assert msg.forward_origin.sender_user.first_name == "Ann"
        assert msg.to_payload()["forward_origin"]["type"] == "user"

    def test_forwarded_from_hidden_user(self) -> None:
        data = _message_dict("fwd")
        data["forward_origin"] = {"type": "hidden_user", "date": 10, "sender_user_name": "Anonymous"}
        msg = Message.model_validate(data)
        assert isinstance(msg.forward_origin, MessageOriginHiddenUser)

    def test_quote_and_external_reply(self) -> None:
        data = _message_dict("reply")
        data["quote"] = {"text": "hello", "position": 0, "is_manual": True}
        data["external_reply"] = {
            "origin": {"type": "channel", "date": 1, "chat": {"id": -100, "type": "channel"}, "message_id": 9},
            "chat": {"id": -100, "type": "channel"},
            "message_id": 9,
        }
        msg = Message.model_validate(data)
        assert msg.quote.text == "hello"
        assert isinstance(msg.external_reply, ExternalReplyInfo)
        assert isinstance(msg.external_reply.origin, MessageOriginChannel)
        assert msg.external_reply.origin.message_id == 9
        payload = msg.to_payload()
        assert payload["quote"] == {"text": "hello", "position": 0, "is_manual": True}
        assert payload["external_reply"]["origin"]["type"] == "channel"

    def test_service_payloads(self) -> None:
        data = _message_dict()
        data["users_shared"] = {"request_id": 1, "user_ids": [7, 8]}
        data["chat_shared"] = {"request_id": 2, "chat_id": -100}
        data["web_app_data"] = {"data": "{}", "button_text": "Open"}
        data["proximity_alert_triggered"] = {
            "traveler": {"id": 1, "is_bot": False, "first_name": "A"},
            "watcher": {"id": 2, "is_bot": False, "first_name": "B"},
            "distance": 50,
        }
        msg = Message.model_validate(data)
        assert msg.users_shared.user_ids == [7, 8]
        assert msg.chat_shared.chat_id == -100
        assert msg.web_app_data.button_text == "Open"
        assert msg.proximity_alert_triggered.distance == 50

    def test_unknown_origin_type_rejected(self) -> None:
        data = _message_dict()
        data["forward_origin"] = {"type": "ghost", "date": 0}
        with pytest.raises(ValidationError):
            Message.model_validate(data)


# ── to_payload ───────────────────────────────────────────────────────────────


class TestToPayload:

    def test_none_fields_dropped(self) -> None:
        wh = WebhookInfo(url="https://example.com", has_custom_certificate=False, pending_update_count=0)
        assert wh.to_payload() == {"url": "https://example.com", "has_custom_certificate": False, "pending_update_count": 0}

    def test_literal_defaults_kept(self) -> None:
        assert ReplyKeyboardRemove().to_payload() == {"remove_keyboard": True}
        assert ForceReply(selective=True).to_payload() == {"force_reply": True, "selective": True}

    def test_nested_keyboard(self) -> None:
        kb = InlineKeyboardMarkup.model_validate({"inline_keyboard": [[{"text": "Click", "callback_data": "action"}]]})
        assert kb.inline_keyboard[0][0].text == "Click"
        assert kb.to_payload() == {"inline_keyboard": [[{"text": "Click", "callback_data": "action"}]]}


# ── Tagged unions ────────────────────────────────────────────────────────────


class TestTaggedUnions:
    """Polymorphic families resolve on their wire discriminator."""

    def test_chat_member_administrator(self) -> None:
        member = TypeAdapter(ChatMember).validate_python({
            "status": "administrator",
            "user": {"id": 1, "is_bot": False, "first_name": "A"},
            "can_be_edited": False,
            "is_anonymous": False,
            "can_manage_chat": True,
            "can_delete_messages": True,
            "can_manage_video_chats": False,
            "can_restrict_members": True,
            "can_promote_members": False,
            "can_change_info": True,
            "can_invite_users": True,
        })
        assert isinstance(member, ChatMemberAdministrator)
        assert member.can_restrict_members is True

    def test_chat_member_kicked(self) -> None:
        member = TypeAdapter(ChatMember).validate_python({
            "status": "kicked",
            "user": {"id": 1, "is_bot": False, "first_name": "A"},
            "until_date": 0,
        })
        assert isinstance(member, ChatMemberBanned)

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(ChatMember).validate_python({"status": "ghost", "user": {"id": 1, "is_bot": False, "first_name": "A"}})

    def test_command_scope(self) -> None:
        scope = TypeAdapter(BotCommandScope).validate_python({"type": "chat_member", "chat_id": "@group", "user_id": 5})
        assert isinstance(scope, BotCommandScopeChatMember)
        assert scope.chat_id == "@group"

    def test_discriminator_is_fixed(self) -> None:
        assert BotCommandScopeAllPrivateChats().to_payload() == {"type": "all_private_chats"}
        assert PassportElementErrorFiles(type="utility_bill", file_hashes=["a"], message="m").source == "files"

    def test_input_media(self) -> None:
        media = TypeAdapter(InputMedia).validate_python({"type": "document", "media": "file-id"})
        assert isinstance(media, InputMediaDocument)

    def test_input_media_accepts_upload(self) -> None:
        upload = InputFile(b"data", filename="clip.mp4")
        video = InputMediaVideo(media=upload, supports_streaming=True)
        assert video.media is upload
        assert video.type == "video"

    def test_passport_error_source(self) -> None:
        error = TypeAdapter(PassportElementError).validate_python({
            "source": "files",
            "type": "utility_bill",
            "file_hashes": ["h1", "h2"],
            "message": "blurry",
        })
        assert isinstance(error, PassportElementErrorFiles)


# ── Enumerations ─────────────────────────────────────────────────────────────


class TestEnums:

    def test_str_values(self) -> None:
        assert UpdateType.CHAT_JOIN_REQUEST == "chat_join_request"
        assert MessageEntityType.TEXT_LINK.value == "text_link"

    def test_photo_size(self) -> None:
        p = PhotoSize(file_id="abc", file_unique_id="xyz", width=100, height=200)
        assert p.file_size is None
