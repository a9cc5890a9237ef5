"""Available methods: sending messages, managing chats, and the bot profile.

Every method takes the remote parameters under their wire names.  ``chat_id``
accepts either the numeric chat id or the ``@username`` of a channel or
supergroup.  Parameters left as ``None`` are omitted from the request.
"""

from typing import Any, Dict, List, Optional, Union

from botapi.input_file import InputFile
from botapi.methods.base import MethodsMixin, require
from botapi.models import (
    BotCommand,
    BotCommandScope,
    BotDescription,
    BotName,
    BotShortDescription,
    Chat,
    ChatAdministratorRights,
    ChatInviteLink,
    ChatMember,
    ChatPermissions,
    File,
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    LinkPreviewOptions,
    Message,
    MessageEntity,
    MessageId,
    ReplyMarkup,
    ReplyParameters,
    User,
    UserProfilePhotos,
)

ChatId = Union[int, str]
FileInput = Union[InputFile, str]


class AvailableMethods(MethodsMixin):

    # ── Bot identity ─────────────────────────────────────────────────────

    def get_me(self) -> User:
        """A simple method for testing your bot's auth token."""
        return self.call_method("getMe", None, User)

    def log_out(self) -> bool:
        """Log out from the cloud Bot API server before launching the bot locally."""
        return self.call_method("logOut", None, bool)

    def close(self) -> bool:
        """Close the bot instance before moving it from one local server to another."""
        return self.call_method("close", None, bool)

    # ── Sending messages ─────────────────────────────────────────────────

    def send_message(
        self,
        chat_id: ChatId,
        text: str,
        message_thread_id: Optional[int] = None,
        parse_mode: Optional[str] = None,
        entities: Optional[List[MessageEntity]] = None,
        link_preview_options: Optional[LinkPreviewOptions] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a text message. On success, the sent :class:`Message` is returned."""
        require("chat_id", chat_id)
        require("text", text)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "text": text,
            "parse_mode": parse_mode,
            "entities": entities,
            "link_preview_options": link_preview_options,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendMessage", payload, Message)

    def forward_message(
        self,
        chat_id: ChatId,
        from_chat_id: ChatId,
        message_id: int,
        message_thread_id: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
    ) -> Message:
        """Forward a message of any kind. Service messages can't be forwarded."""
        require("chat_id", chat_id)
        require("from_chat_id", from_chat_id)
        require("message_id", message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "from_chat_id": from_chat_id,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "message_id": message_id,
        }
        return self.call_method("forwardMessage", payload, Message)

    def forward_messages(
        self,
        chat_id: ChatId,
        from_chat_id: ChatId,
        message_ids: List[int],
        message_thread_id: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
    ) -> List[MessageId]:
        """Forward multiple messages; album grouping is kept for forwarded messages."""
        require("chat_id", chat_id)
        require("from_chat_id", from_chat_id)
        require("message_ids", message_ids)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "from_chat_id": from_chat_id,
            "message_ids": message_ids,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
        }
        return self.call_method("forwardMessages", payload, List[MessageId])

    def copy_message(
        self,
        chat_id: ChatId,
        from_chat_id: ChatId,
        message_id: int,
        message_thread_id: Optional[int] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> MessageId:
        """Copy a message without a link to the original message."""
        require("chat_id", chat_id)
        require("from_chat_id", from_chat_id)
        require("message_id", message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "from_chat_id": from_chat_id,
            "message_id": message_id,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("copyMessage", payload, MessageId)

    def copy_messages(
        self,
        chat_id: ChatId,
        from_chat_id: ChatId,
        message_ids: List[int],
        message_thread_id: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        remove_caption: Optional[bool] = None,
    ) -> List[MessageId]:
        require("chat_id", chat_id)
        require("from_chat_id", from_chat_id)
        require("message_ids", message_ids)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "from_chat_id": from_chat_id,
            "message_ids": message_ids,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "remove_caption": remove_caption,
        }
        return self.call_method("copyMessages", payload, List[MessageId])

    def send_photo(
        self,
        chat_id: ChatId,
        photo: FileInput,
        message_thread_id: Optional[int] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        has_spoiler: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a photo by ``file_id``, HTTP URL, or :class:`InputFile` upload."""
        require("chat_id", chat_id)
        require("photo", photo)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "photo": photo,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "has_spoiler": has_spoiler,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendPhoto", payload, Message)

    def send_audio(
        self,
        chat_id: ChatId,
        audio: FileInput,
        message_thread_id: Optional[int] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        duration: Optional[int] = None,
        performer: Optional[str] = None,
        title: Optional[str] = None,
        thumbnail: Optional[FileInput] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send an audio file to be displayed in the music player (.MP3 or .M4A)."""
        require("chat_id", chat_id)
        require("audio", audio)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "audio": audio,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "duration": duration,
            "performer": performer,
            "title": title,
            "thumbnail": thumbnail,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendAudio", payload, Message)

    def send_document(
        self,
        chat_id: ChatId,
        document: FileInput,
        message_thread_id: Optional[int] = None,
        thumbnail: Optional[FileInput] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        disable_content_type_detection: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        require("chat_id", chat_id)
        require("document", document)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "document": document,
            "thumbnail": thumbnail,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "disable_content_type_detection": disable_content_type_detection,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendDocument", payload, Message)

    def send_video(
        self,
        chat_id: ChatId,
        video: FileInput,
        message_thread_id: Optional[int] = None,
        duration: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        thumbnail: Optional[FileInput] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        has_spoiler: Optional[bool] = None,
        supports_streaming: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send an MPEG4 video file (other formats may be sent as a document)."""
        require("chat_id", chat_id)
        require("video", video)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "video": video,
            "duration": duration,
            "width": width,
            "height": height,
            "thumbnail": thumbnail,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "has_spoiler": has_spoiler,
            "supports_streaming": supports_streaming,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendVideo", payload, Message)

    def send_animation(
        self,
        chat_id: ChatId,
        animation: FileInput,
        message_thread_id: Optional[int] = None,
        duration: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        thumbnail: Optional[FileInput] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        has_spoiler: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send an animation (GIF or H.264/MPEG-4 AVC video without sound)."""
        require("chat_id", chat_id)
        require("animation", animation)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "animation": animation,
            "duration": duration,
            "width": width,
            "height": height,
            "thumbnail": thumbnail,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "has_spoiler": has_spoiler,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendAnimation", payload, Message)

    def send_voice(
        self,
        chat_id: ChatId,
        voice: FileInput,
        message_thread_id: Optional[int] = None,
        caption: Optional[str] = None,
        parse_mode: Optional[str] = None,
        caption_entities: Optional[List[MessageEntity]] = None,
        duration: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        require("chat_id", chat_id)
        require("voice", voice)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "voice": voice,
            "caption": caption,
            "parse_mode": parse_mode,
            "caption_entities": caption_entities,
            "duration": duration,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendVoice", payload, Message)

    def send_video_note(
        self,
        chat_id: ChatId,
        video_note: FileInput,
        message_thread_id: Optional[int] = None,
        duration: Optional[int] = None,
        length: Optional[int] = None,
        thumbnail: Optional[FileInput] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a rounded square MPEG4 video of up to 1 minute."""
        require("chat_id", chat_id)
        require("video_note", video_note)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "video_note": video_note,
            "duration": duration,
            "length": length,
            "thumbnail": thumbnail,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendVideoNote", payload, Message)

    def send_media_group(
        self,
        chat_id: ChatId,
        media: List[Union[InputMediaAudio, InputMediaDocument, InputMediaPhoto, InputMediaVideo]],
        message_thread_id: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
    ) -> List[Message]:
        """Send a group of 2-10 photos, videos, documents or audios as an album.

        Media wrapping an :class:`InputFile` is uploaded and referenced with
        ``attach://<name>``.
        """
        require("chat_id", chat_id)
        require("media", media)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "media": media,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
        }
        return self.call_method("sendMediaGroup", payload, List[Message])

    def send_location(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        message_thread_id: Optional[int] = None,
        horizontal_accuracy: Optional[float] = None,
        live_period: Optional[int] = None,
        heading: Optional[int] = None,
        proximity_alert_radius: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        require("chat_id", chat_id)
        require("latitude", latitude)
        require("longitude", longitude)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "latitude": latitude,
            "longitude": longitude,
            "horizontal_accuracy": horizontal_accuracy,
            "live_period": live_period,
            "heading": heading,
            "proximity_alert_radius": proximity_alert_radius,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendLocation", payload, Message)

    def send_venue(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        title: str,
        address: str,
        message_thread_id: Optional[int] = None,
        foursquare_id: Optional[str] = None,
        foursquare_type: Optional[str] = None,
        google_place_id: Optional[str] = None,
        google_place_type: Optional[str] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        require("chat_id", chat_id)
        require("latitude", latitude)
        require("longitude", longitude)
        require("title", title)
        require("address", address)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "latitude": latitude,
            "longitude": longitude,
            "title": title,
            "address": address,
            "foursquare_id": foursquare_id,
            "foursquare_type": foursquare_type,
            "google_place_id": google_place_id,
            "google_place_type": google_place_type,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendVenue", payload, Message)

    def send_contact(
        self,
        chat_id: ChatId,
        phone_number: str,
        first_name: str,
        message_thread_id: Optional[int] = None,
        last_name: Optional[str] = None,
        vcard: Optional[str] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        require("chat_id", chat_id)
        require("phone_number", phone_number)
        require("first_name", first_name)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "phone_number": phone_number,
            "first_name": first_name,
            "last_name": last_name,
            "vcard": vcard,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendContact", payload, Message)

    def send_poll(
        self,
        chat_id: ChatId,
        question: str,
        options: List[str],
        message_thread_id: Optional[int] = None,
        is_anonymous: Optional[bool] = None,
        type: Optional[str] = None,
        allows_multiple_answers: Optional[bool] = None,
        correct_option_id: Optional[int] = None,
        explanation: Optional[str] = None,
        explanation_parse_mode: Optional[str] = None,
        explanation_entities: Optional[List[MessageEntity]] = None,
        open_period: Optional[int] = None,
        close_date: Optional[int] = None,
        is_closed: Optional[bool] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send a native poll with 2-10 answer options."""
        require("chat_id", chat_id)
        require("question", question)
        require("options", options)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "question": question,
            "options": options,
            "is_anonymous": is_anonymous,
            "type": type,
            "allows_multiple_answers": allows_multiple_answers,
            "correct_option_id": correct_option_id,
            "explanation": explanation,
            "explanation_parse_mode": explanation_parse_mode,
            "explanation_entities": explanation_entities,
            "open_period": open_period,
            "close_date": close_date,
            "is_closed": is_closed,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendPoll", payload, Message)

    def send_dice(
        self,
        chat_id: ChatId,
        message_thread_id: Optional[int] = None,
        emoji: Optional[str] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[ReplyMarkup] = None,
    ) -> Message:
        """Send an animated emoji that displays a random value."""
        require("chat_id", chat_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "emoji": emoji,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendDice", payload, Message)

    def send_chat_action(self, chat_id: ChatId, action: str, message_thread_id: Optional[int] = None) -> bool:
        """Tell the user that something is happening on the bot's side (5 seconds or less)."""
        require("chat_id", chat_id)
        require("action", action)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "action": action,
        }
        return self.call_method("sendChatAction", payload, bool)

    # ── Users and files ──────────────────────────────────────────────────

    def get_user_profile_photos(self, user_id: int, offset: Optional[int] = None, limit: Optional[int] = None) -> UserProfilePhotos:
        require("user_id", user_id)
        payload: Dict[str, Any] = {"user_id": user_id, "offset": offset, "limit": limit}
        return self.call_method("getUserProfilePhotos", payload, UserProfilePhotos)

    def get_file(self, file_id: str) -> File:
        """Get basic info about a file and prepare it for downloading (up to 20MB)."""
        require("file_id", file_id)
        return self.call_method("getFile", {"file_id": file_id}, File)

    # ── Chat members ─────────────────────────────────────────────────────

    def ban_chat_member(
        self,
        chat_id: ChatId,
        user_id: int,
        until_date: Optional[int] = None,
        revoke_messages: Optional[bool] = None,
    ) -> bool:
        """Ban a user in a group, a supergroup or a channel."""
        require("chat_id", chat_id)
        require("user_id", user_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "user_id": user_id,
            "until_date": until_date,
            "revoke_messages": revoke_messages,
        }
        return self.call_method("banChatMember", payload, bool)

    def unban_chat_member(self, chat_id: ChatId, user_id: int, only_if_banned: Optional[bool] = None) -> bool:
        require("chat_id", chat_id)
        require("user_id", user_id)
        payload: Dict[str, Any] = {"chat_id": chat_id, "user_id": user_id, "only_if_banned": only_if_banned}
        return self.call_method("unbanChatMember", payload, bool)

    def restrict_chat_member(
        self,
        chat_id: ChatId,
        user_id: int,
        permissions: ChatPermissions,
        use_independent_chat_permissions: Optional[bool] = None,
        until_date: Optional[int] = None,
    ) -> bool:
        """Restrict a user in a supergroup. Pass all permissions true to lift restrictions."""
        require("chat_id", chat_id)
        require("user_id", user_id)
        require("permissions", permissions)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "user_id": user_id,
            "permissions": permissions,
            "use_independent_chat_permissions": use_independent_chat_permissions,
            "until_date": until_date,
        }
        return self.call_method("restrictChatMember", payload, bool)

    def promote_chat_member(
        self,
        chat_id: ChatId,
        user_id: int,
        is_anonymous: Optional[bool] = None,
        can_manage_chat: Optional[bool] = None,
        can_delete_messages: Optional[bool] = None,
        can_manage_video_chats: Optional[bool] = None,
        can_restrict_members: Optional[bool] = None,
        can_promote_members: Optional[bool] = None,
        can_change_info: Optional[bool] = None,
        can_invite_users: Optional[bool] = None,
        can_post_messages: Optional[bool] = None,
        can_edit_messages: Optional[bool] = None,
        can_pin_messages: Optional[bool] = None,
        can_post_stories: Optional[bool] = None,
        can_edit_stories: Optional[bool] = None,
        can_delete_stories: Optional[bool] = None,
        can_manage_topics: Optional[bool] = None,
    ) -> bool:
        """Promote or demote a user. Pass ``False`` for all rights to demote."""
        require("chat_id", chat_id)
        require("user_id", user_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "user_id": user_id,
            "is_anonymous": is_anonymous,
            "can_manage_chat": can_manage_chat,
            "can_delete_messages": can_delete_messages,
            "can_manage_video_chats": can_manage_video_chats,
            "can_restrict_members": can_restrict_members,
            "can_promote_members": can_promote_members,
            "can_change_info": can_change_info,
            "can_invite_users": can_invite_users,
            "can_post_messages": can_post_messages,
            "can_edit_messages": can_edit_messages,
            "can_pin_messages": can_pin_messages,
            "can_post_stories": can_post_stories,
            "can_edit_stories": can_edit_stories,
            "can_delete_stories": can_delete_stories,
            "can_manage_topics": can_manage_topics,
        }
        return self.call_method("promoteChatMember", payload, bool)

    def set_chat_administrator_custom_title(self, chat_id: ChatId, user_id: int, custom_title: str) -> bool:
        require("chat_id", chat_id)
        require("user_id", user_id)
        require("custom_title", custom_title)
        payload: Dict[str, Any] = {"chat_id": chat_id, "user_id": user_id, "custom_title": custom_title}
        return self.call_method("setChatAdministratorCustomTitle", payload, bool)

    def ban_chat_sender_chat(self, chat_id: ChatId, sender_chat_id: int) -> bool:
        require("chat_id", chat_id)
        require("sender_chat_id", sender_chat_id)
        payload: Dict[str, Any] = {"chat_id": chat_id, "sender_chat_id": sender_chat_id}
        return self.call_method("banChatSenderChat", payload, bool)

    def unban_chat_sender_chat(self, chat_id: ChatId, sender_chat_id: int) -> bool:
        require("chat_id", chat_id)
        require("sender_chat_id", sender_chat_id)
        payload: Dict[str, Any] = {"chat_id": chat_id, "sender_chat_id": sender_chat_id}
        return self.call_method("unbanChatSenderChat", payload, bool)

    def set_chat_permissions(
        self,
        chat_id: ChatId,
        permissions: ChatPermissions,
        use_independent_chat_permissions: Optional[bool] = None,
    ) -> bool:
        """Set default chat permissions for all members."""
        require("chat_id", chat_id)
        require("permissions", permissions)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "permissions": permissions,
            "use_independent_chat_permissions": use_independent_chat_permissions,
        }
        return self.call_method("setChatPermissions", payload, bool)

    # ── Invite links and join requests ───────────────────────────────────

    def export_chat_invite_link(self, chat_id: ChatId) -> str:
        """Generate a new primary invite link, revoking the previous one."""
        require("chat_id", chat_id)
        return self.call_method("exportChatInviteLink", {"chat_id": chat_id}, str)

    def create_chat_invite_link(
        self,
        chat_id: ChatId,
        name: Optional[str] = None,
        expire_date: Optional[int] = None,
        member_limit: Optional[int] = None,
        creates_join_request: Optional[bool] = None,
    ) -> ChatInviteLink:
        require("chat_id", chat_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "name": name,
            "expire_date": expire_date,
            "member_limit": member_limit,
            "creates_join_request": creates_join_request,
        }
        return self.call_method("createChatInviteLink", payload, ChatInviteLink)

    def edit_chat_invite_link(
        self,
        chat_id: ChatId,
        invite_link: str,
        name: Optional[str] = None,
        expire_date: Optional[int] = None,
        member_limit: Optional[int] = None,
        creates_join_request: Optional[bool] = None,
    ) -> ChatInviteLink:
        """Edit a non-primary invite link created by the bot."""
        require("chat_id", chat_id)
        require("invite_link", invite_link)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "invite_link": invite_link,
            "name": name,
            "expire_date": expire_date,
            "member_limit": member_limit,
            "creates_join_request": creates_join_request,
        }
        return self.call_method("editChatInviteLink", payload, ChatInviteLink)

    def revoke_chat_invite_link(self, chat_id: ChatId, invite_link: str) -> ChatInviteLink:
        require("chat_id", chat_id)
        require("invite_link", invite_link)
        payload: Dict[str, Any] = {"chat_id": chat_id, "invite_link": invite_link}
        return self.call_method("revokeChatInviteLink", payload, ChatInviteLink)

    def approve_chat_join_request(self, chat_id: ChatId, user_id: int) -> bool:
        """Approve a chat join request. The bot needs the ``can_invite_users`` right."""
        require("chat_id", chat_id)
        require("user_id", user_id)
        payload: Dict[str, Any] = {"chat_id": chat_id, "user_id": user_id}
        return self.call_method("approveChatJoinRequest", payload, bool)

    def decline_chat_join_request(self, chat_id: ChatId, user_id: int) -> bool:
        require("chat_id", chat_id)
        require("user_id", user_id)
        payload: Dict[str, Any] = {"chat_id": chat_id, "user_id": user_id}
        return self.call_method("declineChatJoinRequest", payload, bool)

    # ── Chat settings ────────────────────────────────────────────────────

    def set_chat_photo(self, chat_id: ChatId, photo: InputFile) -> bool:
        """Set a new profile photo for the chat. Photos can't be changed for private chats."""
        require("chat_id", chat_id)
        require("photo", photo)
        return self.call_method("setChatPhoto", {"chat_id": chat_id, "photo": photo}, bool)

    def delete_chat_photo(self, chat_id: ChatId) -> bool:
        """Delete a chat photo. Photos can't be changed for private chats."""
        require("chat_id", chat_id)
        return self.call_method("deleteChatPhoto", {"chat_id": chat_id}, bool)

    def set_chat_title(self, chat_id: ChatId, title: str) -> bool:
        """Change the title of a chat (1-255 characters). Not available for private chats."""
        require("chat_id", chat_id)
        require("title", title)
        return self.call_method("setChatTitle", {"chat_id": chat_id, "title": title}, bool)

    def set_chat_description(self, chat_id: ChatId, description: Optional[str] = None) -> bool:
        require("chat_id", chat_id)
        return self.call_method("setChatDescription", {"chat_id": chat_id, "description": description}, bool)

    def pin_chat_message(self, chat_id: ChatId, message_id: int, disable_notification: Optional[bool] = None) -> bool:
        require("chat_id", chat_id)
        require("message_id", message_id)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "disable_notification": disable_notification,
        }
        return self.call_method("pinChatMessage", payload, bool)

    def unpin_chat_message(self, chat_id: ChatId, message_id: Optional[int] = None) -> bool:
        """Unpin *message_id*, or the most recent pinned message when omitted."""
        require("chat_id", chat_id)
        return self.call_method("unpinChatMessage", {"chat_id": chat_id, "message_id": message_id}, bool)

    def unpin_all_chat_messages(self, chat_id: ChatId) -> bool:
        require("chat_id", chat_id)
        return self.call_method("unpinAllChatMessages", {"chat_id": chat_id}, bool)

    def leave_chat(self, chat_id: ChatId) -> bool:
        require("chat_id", chat_id)
        return self.call_method("leaveChat", {"chat_id": chat_id}, bool)

    def get_chat(self, chat_id: ChatId) -> Chat:
        """Get up to date information about the chat."""
        require("chat_id", chat_id)
        return self.call_method("getChat", {"chat_id": chat_id}, Chat)

    def get_chat_administrators(self, chat_id: ChatId) -> List[ChatMember]:
        """Get the administrators in a chat, excluding other bots."""
        require("chat_id", chat_id)
        return self.call_method("getChatAdministrators", {"chat_id": chat_id}, List[ChatMember])

    def get_chat_member_count(self, chat_id: ChatId) -> int:
        require("chat_id", chat_id)
        return self.call_method("getChatMemberCount", {"chat_id": chat_id}, int)

    def get_chat_member(self, chat_id: ChatId, user_id: int) -> ChatMember:
        require("chat_id", chat_id)
        require("user_id", user_id)
        return self.call_method("getChatMember", {"chat_id": chat_id, "user_id": user_id}, ChatMember)

    def set_chat_sticker_set(self, chat_id: ChatId, sticker_set_name: str) -> bool:
        require("chat_id", chat_id)
        require("sticker_set_name", sticker_set_name)
        payload: Dict[str, Any] = {"chat_id": chat_id, "sticker_set_name": sticker_set_name}
        return self.call_method("setChatStickerSet", payload, bool)

    def delete_chat_sticker_set(self, chat_id: ChatId) -> bool:
        require("chat_id", chat_id)
        return self.call_method("deleteChatStickerSet", {"chat_id": chat_id}, bool)

    # ── Callback queries ─────────────────────────────────────────────────

    def answer_callback_query(
        self,
        callback_query_id: str,
        text: Optional[str] = None,
        show_alert: Optional[bool] = None,
        url: Optional[str] = None,
        cache_time: Optional[int] = None,
    ) -> bool:
        """Answer a callback query sent from an inline keyboard."""
        require("callback_query_id", callback_query_id)
        payload: Dict[str, Any] = {
            "callback_query_id": callback_query_id,
            "text": text,
            "show_alert": show_alert,
            "url": url,
            "cache_time": cache_time,
        }
        return self.call_method("answerCallbackQuery", payload, bool)

    # ── Bot commands and profile ─────────────────────────────────────────

    def set_my_commands(
        self,
        commands: List[BotCommand],
        scope: Optional[BotCommandScope] = None,
        language_code: Optional[str] = None,
    ) -> bool:
        """Change the list of the bot's commands for the given scope and language."""
        require("commands", commands)
        payload: Dict[str, Any] = {"commands": commands, "scope": scope, "language_code": language_code}
        return self.call_method("setMyCommands", payload, bool)

    def delete_my_commands(self, scope: Optional[BotCommandScope] = None, language_code: Optional[str] = None) -> bool:
        payload: Dict[str, Any] = {"scope": scope, "language_code": language_code}
        return self.call_method("deleteMyCommands", payload, bool)

    def get_my_commands(self, scope: Optional[BotCommandScope] = None, language_code: Optional[str] = None) -> List[BotCommand]:
        payload: Dict[str, Any] = {"scope": scope, "language_code": language_code}
        return self.call_method("getMyCommands", payload, List[BotCommand])

    def set_my_name(self, name: Optional[str] = None, language_code: Optional[str] = None) -> bool:
        return self.call_method("setMyName", {"name": name, "language_code": language_code}, bool)

    def get_my_name(self, language_code: Optional[str] = None) -> BotName:
        return self.call_method("getMyName", {"language_code": language_code}, BotName)

    def set_my_description(self, description: Optional[str] = None, language_code: Optional[str] = None) -> bool:
        """Change the description shown in the chat with the bot if the chat is empty."""
        payload: Dict[str, Any] = {"description": description, "language_code": language_code}
        return self.call_method("setMyDescription", payload, bool)

    def get_my_description(self, language_code: Optional[str] = None) -> BotDescription:
        return self.call_method("getMyDescription", {"language_code": language_code}, BotDescription)

    def set_my_short_description(self, short_description: Optional[str] = None, language_code: Optional[str] = None) -> bool:
        payload: Dict[str, Any] = {"short_description": short_description, "language_code": language_code}
        return self.call_method("setMyShortDescription", payload, bool)

    def get_my_short_description(self, language_code: Optional[str] = None) -> BotShortDescription:
        """Get the current bot short description for the given user language."""
        return self.call_method("getMyShortDescription", {"language_code": language_code}, BotShortDescription)

    def set_my_default_administrator_rights(
        self,
        rights: Optional[ChatAdministratorRights] = None,
        for_channels: Optional[bool] = None,
    ) -> bool:
        payload: Dict[str, Any] = {"rights": rights, "for_channels": for_channels}
        return self.call_method("setMyDefaultAdministratorRights", payload, bool)

    def get_my_default_administrator_rights(self, for_channels: Optional[bool] = None) -> ChatAdministratorRights:
        return self.call_method("getMyDefaultAdministratorRights", {"for_channels": for_channels}, ChatAdministratorRights)
