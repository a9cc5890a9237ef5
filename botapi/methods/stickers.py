"""Sticker methods: sending stickers and managing sticker sets owned by the bot."""

from typing import Any, Dict, List, Optional, Union

from botapi.input_file import InputFile
from botapi.methods.base import MethodsMixin, require
from botapi.models import (
    File,
    InputSticker,
    MaskPosition,
    Message,
    ReplyMarkup,
    ReplyParameters,
    Sticker,
    StickerSet,
)

ChatId = Union[int, str]


class StickerMethods(MethodsMixin):

    def send_sticker(
        self,
        chat_id: ChatId,
        sticker: Union[InputFile, str],
        message_thread_id: Optional[int] = None,
        emoji: Optional[str] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a static .WEBP, animated .TGS, or video .WEBM sticker."""
        require("chat_id", chat_id)
        require("sticker", sticker)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "sticker": sticker,
            "emoji": emoji,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendSticker", payload, Message)

    def get_sticker_set(self, name: str) -> StickerSet:
        require("name", name)
        return self.call_method("getStickerSet", {"name": name}, StickerSet)

    def get_custom_emoji_stickers(self, custom_emoji_ids: List[str]) -> List[Sticker]:
        """Get information about custom emoji stickers by their identifiers."""
        require("custom_emoji_ids", custom_emoji_ids)
        return self.call_method("getCustomEmojiStickers", {"custom_emoji_ids": custom_emoji_ids}, List[Sticker])

    def upload_sticker_file(self, user_id: int, sticker: InputFile, sticker_format: str) -> File:
        """Upload a file for later use in :meth:`create_new_sticker_set` and :meth:`add_sticker_to_set`."""
        require("user_id", user_id)
        require("sticker", sticker)
        require("sticker_format", sticker_format)
        payload: Dict[str, Any] = {"user_id": user_id, "sticker": sticker, "sticker_format": sticker_format}
        return self.call_method("uploadStickerFile", payload, File)

    def create_new_sticker_set(
        self,
        user_id: int,
        name: str,
        title: str,
        stickers: List[InputSticker],
        sticker_format: str,
        sticker_type: Optional[str] = None,
        needs_repainting: Optional[bool] = None,
    ) -> bool:
        """Create a new sticker set owned by a user.

        *name* must end in ``_by_<bot_username>``.
        """
        require("user_id", user_id)
        require("name", name)
        require("title", title)
        require("stickers", stickers)
        require("sticker_format", sticker_format)
        payload: Dict[str, Any] = {
            "user_id": user_id,
            "name": name,
            "title": title,
            "stickers": stickers,
            "sticker_format": sticker_format,
            "sticker_type": sticker_type,
            "needs_repainting": needs_repainting,
        }
        return self.call_method("createNewStickerSet", payload, bool)

    def add_sticker_to_set(self, user_id: int, name: str, sticker: InputSticker) -> bool:
        require("user_id", user_id)
        require("name", name)
        require("sticker", sticker)
        payload: Dict[str, Any] = {"user_id": user_id, "name": name, "sticker": sticker}
        return self.call_method("addStickerToSet", payload, bool)

    def set_sticker_position_in_set(self, sticker: str, position: int) -> bool:
        require("sticker", sticker)
        require("position", position)
        return self.call_method("setStickerPositionInSet", {"sticker": sticker, "position": position}, bool)

    def delete_sticker_from_set(self, sticker: str) -> bool:
        require("sticker", sticker)
        return self.call_method("deleteStickerFromSet", {"sticker": sticker}, bool)

    def set_sticker_emoji_list(self, sticker: str, emoji_list: List[str]) -> bool:
        require("sticker", sticker)
        require("emoji_list", emoji_list)
        return self.call_method("setStickerEmojiList", {"sticker": sticker, "emoji_list": emoji_list}, bool)

    def set_sticker_keywords(self, sticker: str, keywords: Optional[List[str]] = None) -> bool:
        require("sticker", sticker)
        return self.call_method("setStickerKeywords", {"sticker": sticker, "keywords": keywords}, bool)

    def set_sticker_mask_position(self, sticker: str, mask_position: Optional[MaskPosition] = None) -> bool:
        require("sticker", sticker)
        payload: Dict[str, Any] = {"sticker": sticker, "mask_position": mask_position}
        return self.call_method("setStickerMaskPosition", payload, bool)

    def set_sticker_set_title(self, name: str, title: str) -> bool:
        require("name", name)
        require("title", title)
        return self.call_method("setStickerSetTitle", {"name": name, "title": title}, bool)

    def delete_sticker_set(self, name: str) -> bool:
        require("name", name)
        return self.call_method("deleteStickerSet", {"name": name}, bool)
