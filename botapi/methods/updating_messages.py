"""Methods that edit or delete messages already sent.

Edits address either a chat message (``chat_id`` + ``message_id``) or an
inline message (``inline_message_id``).  Editing a chat message returns the
edited :class:`Message`; editing an inline message returns ``True``.
"""

from typing import Any, Dict, List, Optional, Union

from botapi.methods.base import MethodsMixin, require, require_message_target
from botapi.models import (
    InlineKeyboardMarkup,
    InputMedia,
    LinkPreviewOptions,
    Message,
    MessageEntity,
    Poll,
)

ChatId = Union[int, str]
EditResult = Union[Message, bool]


class UpdatingMessagesMethods(MethodsMixin):

    def edit_message_text(
        self,
        text: str,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        parse_mode: Optional[str] = None,
        entities: Optional[List[MessageEntity]] = None,
        link_preview_options: Optional[LinkPreviewOptions] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> EditResult:
        """Edit text and game messages."""
        require("text", text)
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "text": text,
            "parse_mode": parse_mode,
            "entities": entities,
            "link_preview_options": link_preview_options,
            "reply_markup": reply_markup,
        }
        return self.call_method("editMessageText", payload, EditResult)

    def edit_message_caption(
        self,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> EditResult:
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "reply_markup": reply_markup,
        }
        return self.call_method("editMessageCaption", payload, EditResult)

    def edit_message_media(
        self,
        media: InputMedia,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> EditResult:
        """Replace the animation, audio, document, photo, or video of a message.

        A new file can't be uploaded when editing an inline message.
        """
        require("media", media)
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "media": media,
            "reply_markup": reply_markup,
        }
        return self.call_method("editMessageMedia", payload, EditResult)

    def edit_message_live_location(
        self,
        latitude: float,
        longitude: float,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        horizontal_accuracy: Optional[float] = None,
        heading: Optional[int] = None,
        proximity_alert_radius: Optional[int] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> EditResult:
        require("latitude", latitude)
        require("longitude", longitude)
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "latitude": latitude,
            "longitude": longitude,
            "horizontal_accuracy": horizontal_accuracy,
            "heading": heading,
            "proximity_alert_radius": proximity_alert_radius,
            "reply_markup": reply_markup,
        }
        return self.call_method("editMessageLiveLocation", payload, EditResult)

    def stop_message_live_location(
        self,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> EditResult:
        """Stop updating a live location message before ``live_period`` expires."""
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "reply_markup": reply_markup,
        }
        return self.call_method("stopMessageLiveLocation", payload, EditResult)

    def edit_message_reply_markup(
        self,
        chat_id: Optional[ChatId] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> EditResult:
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
            "reply_markup": reply_markup,
        }
        return self.call_method("editMessageReplyMarkup", payload, EditResult)

    def stop_poll(
        self,
        chat_id: ChatId,
        message_id: int,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Poll:
        """Stop a poll which was sent by the bot and return the final results."""
        require("chat_id", chat_id)
        require("message_id", message_id)
        payload: Dict[str, Any] = {"chat_id": chat_id, "message_id": message_id, "reply_markup": reply_markup}
        return self.call_method("stopPoll", payload, Poll)

    def delete_message(self, chat_id: ChatId, message_id: int) -> bool:
        """Delete a message, including service messages.

        A message can only be deleted if it was sent less than 48 hours ago.
        """
        require("chat_id", chat_id)
        require("message_id", message_id)
        return self.call_method("deleteMessage", {"chat_id": chat_id, "message_id": message_id}, bool)

    def delete_messages(self, chat_id: ChatId, message_ids: List[int]) -> bool:
        require("chat_id", chat_id)
        require("message_ids", message_ids)
        return self.call_method("deleteMessages", {"chat_id": chat_id, "message_ids": message_ids}, bool)
