"""Pydantic data models mirroring the Telegram Bot API wire schema.

Every class corresponds to an object documented at
https://core.telegram.org/bots/api.  Field names are the wire keys; the only
exception is ``from``, exposed as ``from_field`` with the wire alias ``from``.
Polymorphic families (chat members, command scopes, input media, passport
errors) are tagged unions keyed on their wire discriminator.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from botapi.input_file import InputFile


# ── Enumerations ─────────────────────────────────────────────────────────────


class UpdateType(str, Enum):
    """Kind of payload carried by an :class:`Update`."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"
    UNKNOWN = "unknown"


class ChatType(str, Enum):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"
    SENDER = "sender"


class ChatAction(str, Enum):
    """Actions accepted by ``sendChatAction``."""

    TYPING = "typing"
    UPLOAD_PHOTO = "upload_photo"
    RECORD_VIDEO = "record_video"
    UPLOAD_VIDEO = "upload_video"
    RECORD_VOICE = "record_voice"
    UPLOAD_VOICE = "upload_voice"
    UPLOAD_DOCUMENT = "upload_document"
    CHOOSE_STICKER = "choose_sticker"
    FIND_LOCATION = "find_location"
    RECORD_VIDEO_NOTE = "record_video_note"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


class ParseMode(str, Enum):
    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class MessageEntityType(str, Enum):
    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    BLOCKQUOTE = "blockquote"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"
    CUSTOM_EMOJI = "custom_emoji"


# ── Base ─────────────────────────────────────────────────────────────────────


class BotObject(BaseModel):
    """Common base for every API object.

    Unknown wire keys are ignored so payloads from newer API versions still
    validate.  Equality is field-by-field value equality.
    """

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True, "extra": "ignore"}

    def to_payload(self) -> Dict[str, Any]:
        """Return the wire representation: aliases applied, ``None`` fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ── Getting updates ──────────────────────────────────────────────────────────


class Update(BotObject):
    """An incoming update. At most **one** of the optional payload fields is present."""

    update_id: int
    message: Optional["Message"] = None
    edited_message: Optional["Message"] = None
    channel_post: Optional["Message"] = None
    edited_channel_post: Optional["Message"] = None
    inline_query: Optional["InlineQuery"] = None
    chosen_inline_result: Optional["ChosenInlineResult"] = None
    callback_query: Optional["CallbackQuery"] = None
    shipping_query: Optional["ShippingQuery"] = None
    pre_checkout_query: Optional["PreCheckoutQuery"] = None
    poll: Optional["Poll"] = None
    poll_answer: Optional["PollAnswer"] = None
    my_chat_member: Optional["ChatMemberUpdated"] = None
    chat_member: Optional["ChatMemberUpdated"] = None
    chat_join_request: Optional["ChatJoinRequest"] = None

    @property
    def type(self) -> UpdateType:
        """Name of the populated payload field, or ``UNKNOWN``."""
        for update_type in UpdateType:
            if update_type is UpdateType.UNKNOWN:
                continue
            if getattr(self, update_type.value) is not None:
                return update_type
        return UpdateType.UNKNOWN

    @property
    def payload(self) -> Optional[BotObject]:
        """The populated payload object, if any."""
        update_type = self.type
        if update_type is UpdateType.UNKNOWN:
            return None
        return getattr(self, update_type.value)


class WebhookInfo(BotObject):
    """Contains information about the current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    last_synchronization_error_date: Optional[int] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Users and chats ──────────────────────────────────────────────────────────


class User(BotObject):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    added_to_attachment_menu: Optional[bool] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class Chat(BotObject):
    """A chat. Fields after ``is_forum`` are only returned by ``getChat``."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: Optional[bool] = None
    photo: Optional["ChatPhoto"] = None
    active_usernames: Optional[List[str]] = None
    accent_color_id: Optional[int] = None
    emoji_status_custom_emoji_id: Optional[str] = None
    bio: Optional[str] = None
    has_private_forwards: Optional[bool] = None
    has_restricted_voice_and_video_messages: Optional[bool] = None
    join_to_send_messages: Optional[bool] = None
    join_by_request: Optional[bool] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional["Message"] = None
    permissions: Optional["ChatPermissions"] = None
    slow_mode_delay: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    has_aggressive_anti_spam_enabled: Optional[bool] = None
    has_hidden_members: Optional[bool] = None
    has_protected_content: Optional[bool] = None
    has_visible_history: Optional[bool] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional["ChatLocation"] = None


class ChatPhoto(BotObject):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatLocation(BotObject):
    location: "Location"
    address: str


class ChatPermissions(BotObject):
    """Actions a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_audios: Optional[bool] = None
    can_send_documents: Optional[bool] = None
    can_send_photos: Optional[bool] = None
    can_send_videos: Optional[bool] = None
    can_send_video_notes: Optional[bool] = None
    can_send_voice_notes: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None


class ChatInviteLink(BotObject):
    invite_link: str
    creator: "User"
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None


class ChatAdministratorRights(BotObject):
    """Rights of an administrator in a chat."""

    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_post_stories: Optional[bool] = None
    can_edit_stories: Optional[bool] = None
    can_delete_stories: Optional[bool] = None
    can_manage_topics: Optional[bool] = None


class ChatMemberOwner(BotObject):
    status: Literal["creator"] = "creator"
    user: "User"
    is_anonymous: bool
    custom_title: Optional[str] = None


class ChatMemberAdministrator(ChatAdministratorRights):
    status: Literal["administrator"] = "administrator"
    user: "User"
    can_be_edited: bool
    custom_title: Optional[str] = None


class ChatMemberMember(BotObject):
    status: Literal["member"] = "member"
    user: "User"


class ChatMemberRestricted(BotObject):
    """A chat member that is under certain restrictions. Supergroups only."""

    status: Literal["restricted"] = "restricted"
    user: "User"
    is_member: bool
    can_send_messages: bool
    can_send_audios: bool
    can_send_documents: bool
    can_send_photos: bool
    can_send_videos: bool
    can_send_video_notes: bool
    can_send_voice_notes: bool
    can_send_polls: bool
    can_send_other_messages: bool
    can_add_web_page_previews: bool
    can_change_info: bool
    can_invite_users: bool
    can_pin_messages: bool
    can_manage_topics: bool
    until_date: int


class ChatMemberLeft(BotObject):
    status: Literal["left"] = "left"
    user: "User"


class ChatMemberBanned(BotObject):
    status: Literal["kicked"] = "kicked"
    user: "User"
    until_date: int


ChatMember = Annotated[
    Union[
        ChatMemberOwner,
        ChatMemberAdministrator,
        ChatMemberMember,
        ChatMemberRestricted,
        ChatMemberLeft,
        ChatMemberBanned,
    ],
    Field(discriminator="status"),
]


class ChatMemberUpdated(BotObject):
    """Changes in the status of a chat member."""

    chat: "Chat"
    from_field: "User" = Field(alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional["ChatInviteLink"] = None
    via_chat_folder_invite_link: Optional[bool] = None


class ChatJoinRequest(BotObject):
    chat: "Chat"
    from_field: "User" = Field(alias="from")
    user_chat_id: int
    date: int
    bio: Optional[str] = None
    invite_link: Optional["ChatInviteLink"] = None


# ── Messages ─────────────────────────────────────────────────────────────────


class Message(BotObject):
    """A message."""

    message_id: int
    message_thread_id: Optional[int] = None
    from_field: Optional["User"] = Field(None, alias="from")
    sender_chat: Optional["Chat"] = None
    date: int
    chat: "Chat"
    is_topic_message: Optional[bool] = None
    forward_origin: Optional[MessageOrigin] = None
    is_automatic_forward: Optional[bool] = None
    reply_to_message: Optional["Message"] = None
    external_reply: Optional["ExternalReplyInfo"] = None
    quote: Optional["TextQuote"] = None
    via_bot: Optional["User"] = None
    edit_date: Optional[int] = None
    has_protected_content: Optional[bool] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    link_preview_options: Optional["LinkPreviewOptions"] = None
    animation: Optional["Animation"] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    photo: Optional[List["PhotoSize"]] = None
    sticker: Optional["Sticker"] = None
    video: Optional["Video"] = None
    video_note: Optional["VideoNote"] = None
    voice: Optional["Voice"] = None
    caption: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    has_media_spoiler: Optional[bool] = None
    contact: Optional["Contact"] = None
    dice: Optional["Dice"] = None
    game: Optional["Game"] = None
    poll: Optional["Poll"] = None
    venue: Optional["Venue"] = None
    location: Optional["Location"] = None
    new_chat_members: Optional[List["User"]] = None
    left_chat_member: Optional["User"] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List["PhotoSize"]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional["Message"] = None
    invoice: Optional["Invoice"] = None
    successful_payment: Optional["SuccessfulPayment"] = None
    connected_website: Optional[str] = None
    users_shared: Optional["UsersShared"] = None
    chat_shared: Optional["ChatShared"] = None
    passport_data: Optional["PassportData"] = None
    proximity_alert_triggered: Optional["ProximityAlertTriggered"] = None
    web_app_data: Optional["WebAppData"] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None

    def entity_text(self, entity: "MessageEntity") -> str:
        """Return the slice of :attr:`text` (or caption) covered by *entity*.

        Offsets are counted in UTF-16 code units, as the API defines them.
        """
        source = self.text if self.text is not None else (self.caption or "")
        encoded = source.encode("utf-16-le")
        start = entity.offset * 2
        end = start + entity.length * 2
        return encoded[start:end].decode("utf-16-le")


class MessageId(BotObject):
    message_id: int


class MessageEntity(BotObject):
    """One special entity in a text message: hashtags, usernames, URLs, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None
    custom_emoji_id: Optional[str] = None


class ReplyParameters(BotObject):
    """Description of the message to reply to."""

    message_id: int
    chat_id: Optional[Union[int, str]] = None
    allow_sending_without_reply: Optional[bool] = None
    quote: Optional[str] = None
    quote_parse_mode: Optional[str] = None
    quote_entities: Optional[List["MessageEntity"]] = None
    quote_position: Optional[int] = None


class LinkPreviewOptions(BotObject):
    is_disabled: Optional[bool] = None
    url: Optional[str] = None
    prefer_small_media: Optional[bool] = None
    prefer_large_media: Optional[bool] = None
    show_above_text: Optional[bool] = None


# ── Message origins, replies and service payloads ────────────────────────────


class MessageOriginUser(BotObject):
    """The message was originally sent by a known user."""

    type: Literal["user"] = "user"
    date: int
    sender_user: "User"


class MessageOriginHiddenUser(BotObject):
    type: Literal["hidden_user"] = "hidden_user"
    date: int
    sender_user_name: str


class MessageOriginChat(BotObject):
    """The message was originally sent on behalf of a chat to a group chat."""

    type: Literal["chat"] = "chat"
    date: int
    sender_chat: "Chat"
    author_signature: Optional[str] = None


class MessageOriginChannel(BotObject):
    type: Literal["channel"] = "channel"
    date: int
    chat: "Chat"
    message_id: int
    author_signature: Optional[str] = None


MessageOrigin = Annotated[
    Union[MessageOriginUser, MessageOriginHiddenUser, MessageOriginChat, MessageOriginChannel],
    Field(discriminator="type"),
]


class TextQuote(BotObject):
    """The part of a replied-to message quoted by the reply."""

    text: str
    entities: Optional[List["MessageEntity"]] = None
    position: int
    is_manual: Optional[bool] = None


class ExternalReplyInfo(BotObject):
    """A replied-to message that may come from another chat or forum topic."""

    origin: MessageOrigin
    chat: Optional["Chat"] = None
    message_id: Optional[int] = None
    link_preview_options: Optional["LinkPreviewOptions"] = None
    animation: Optional["Animation"] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    photo: Optional[List["PhotoSize"]] = None
    sticker: Optional["Sticker"] = None
    video: Optional["Video"] = None
    video_note: Optional["VideoNote"] = None
    voice: Optional["Voice"] = None
    has_media_spoiler: Optional[bool] = None
    contact: Optional["Contact"] = None
    dice: Optional["Dice"] = None
    game: Optional["Game"] = None
    invoice: Optional["Invoice"] = None
    location: Optional["Location"] = None
    poll: Optional["Poll"] = None
    venue: Optional["Venue"] = None


class WebAppInfo(BotObject):
    url: str


class WebAppData(BotObject):
    """Data sent from a Web App to the bot."""

    data: str
    button_text: str


class UsersShared(BotObject):
    request_id: int
    user_ids: List[int]


class ChatShared(BotObject):
    request_id: int
    chat_id: int


class ProximityAlertTriggered(BotObject):
    """Service message: a user in the chat came within *distance* metres of another."""

    traveler: "User"
    watcher: "User"
    distance: int


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(BotObject):
    """One size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(BotObject):
    """An animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(BotObject):
    """An audio file to be treated as music by the Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumbnail: Optional["PhotoSize"] = None


class Document(BotObject):
    """A general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: str
    thumbnail: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(BotObject):
    """A video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(BotObject):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumbnail: Optional["PhotoSize"] = None
    file_size: Optional[int] = None


class Voice(BotObject):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(BotObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(BotObject):
    emoji: str
    value: int


class PollOption(BotObject):
    text: str
    voter_count: int


class PollAnswer(BotObject):
    """An answer of a user in a non-anonymous poll."""

    poll_id: str
    voter_chat: Optional["Chat"] = None
    user: Optional["User"] = None
    option_ids: List[int]


class Poll(BotObject):
    id: str
    question: str
    options: List["PollOption"]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List["MessageEntity"]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Location(BotObject):
    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(BotObject):
    location: "Location"
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class UserProfilePhotos(BotObject):
    total_count: int
    photos: List[List["PhotoSize"]]


class File(BotObject):
    """A file ready to be downloaded with :meth:`BotClient.download_file`."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


# ── Keyboards ────────────────────────────────────────────────────────────────


class KeyboardButtonPollType(BotObject):
    type: Optional[str] = None


class KeyboardButton(BotObject):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional["KeyboardButtonPollType"] = None
    web_app: Optional["WebAppInfo"] = None


class ReplyKeyboardMarkup(BotObject):
    """A custom keyboard with reply options."""

    keyboard: List[List["KeyboardButton"]]
    is_persistent: Optional[bool] = None
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(BotObject):
    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None


class LoginUrl(BotObject):
    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class InlineKeyboardButton(BotObject):
    """One button of an inline keyboard. Exactly one of the optional fields must be used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    web_app: Optional["WebAppInfo"] = None
    login_url: Optional["LoginUrl"] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional["CallbackGame"] = None
    pay: Optional[bool] = None


class InlineKeyboardMarkup(BotObject):
    inline_keyboard: List[List["InlineKeyboardButton"]]


class ForceReply(BotObject):
    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


class CallbackQuery(BotObject):
    """An incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_field: "User" = Field(alias="from")
    message: Optional["Message"] = None
    inline_message_id: Optional[str] = None
    chat_instance: str
    data: Optional[str] = None
    game_short_name: Optional[str] = None


# ── Bot commands and bot profile ─────────────────────────────────────────────


class BotCommand(BotObject):
    """A bot command: 1-32 lowercase characters and a 1-256 character description."""

    command: str
    description: str


class BotCommandScopeDefault(BotObject):
    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(BotObject):
    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(BotObject):
    """Covers all group and supergroup chats."""

    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(BotObject):
    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(BotObject):
    type: Literal["chat"] = "chat"
    chat_id: Union[int, str]


class BotCommandScopeChatAdministrators(BotObject):
    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: Union[int, str]


class BotCommandScopeChatMember(BotObject):
    type: Literal["chat_member"] = "chat_member"
    chat_id: Union[int, str]
    user_id: int


BotCommandScope = Annotated[
    Union[
        BotCommandScopeDefault,
        BotCommandScopeAllPrivateChats,
        BotCommandScopeAllGroupChats,
        BotCommandScopeAllChatAdministrators,
        BotCommandScopeChat,
        BotCommandScopeChatAdministrators,
        BotCommandScopeChatMember,
    ],
    Field(discriminator="type"),
]


class BotName(BotObject):
    name: str


class BotDescription(BotObject):
    description: str


class BotShortDescription(BotObject):
    short_description: str


class ResponseParameters(BotObject):
    """Why a request was unsuccessful and how to recover from it."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


# ── Input media ──────────────────────────────────────────────────────────────


class InputMediaPhoto(BotObject):
    type: Literal["photo"] = "photo"
    media: Union[InputFile, str]
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    has_spoiler: Optional[bool] = None


class InputMediaVideo(BotObject):
    """A video to be sent."""

    type: Literal["video"] = "video"
    media: Union[InputFile, str]
    thumbnail: Optional[Union[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None
    has_spoiler: Optional[bool] = None


class InputMediaAnimation(BotObject):
    type: Literal["animation"] = "animation"
    media: Union[InputFile, str]
    thumbnail: Optional[Union[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    has_spoiler: Optional[bool] = None


class InputMediaAudio(BotObject):
    type: Literal["audio"] = "audio"
    media: Union[InputFile, str]
    thumbnail: Optional[Union[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(BotObject):
    type: Literal["document"] = "document"
    media: Union[InputFile, str]
    thumbnail: Optional[Union[InputFile, str]] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = Annotated[
    Union[InputMediaPhoto, InputMediaVideo, InputMediaAnimation, InputMediaAudio, InputMediaDocument],
    Field(discriminator="type"),
]


# ── Stickers ─────────────────────────────────────────────────────────────────


class MaskPosition(BotObject):
    point: str
    x_shift: float
    y_shift: float
    scale: float


class Sticker(BotObject):
    file_id: str
    file_unique_id: str
    type: str
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumbnail: Optional["PhotoSize"] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional["MaskPosition"] = None
    custom_emoji_id: Optional[str] = None
    needs_repainting: Optional[bool] = None
    file_size: Optional[int] = None


class StickerSet(BotObject):
    name: str
    title: str
    sticker_type: str
    stickers: List["Sticker"]
    is_animated: Optional[bool] = None
    is_video: Optional[bool] = None
    thumbnail: Optional["PhotoSize"] = None


class InputSticker(BotObject):
    """A sticker to be added to a sticker set."""

    sticker: Union[InputFile, str]
    emoji_list: List[str]
    mask_position: Optional["MaskPosition"] = None
    keywords: Optional[List[str]] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQueryResultsButton(BotObject):
    """A button shown above inline query results.

    Exactly one of *web_app* and *start_parameter* must be set.
    """

    text: str
    web_app: Optional["WebAppInfo"] = None
    start_parameter: Optional[str] = None


class InlineQuery(BotObject):
    id: str
    from_field: "User" = Field(alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional["Location"] = None


class ChosenInlineResult(BotObject):
    result_id: str
    from_field: "User" = Field(alias="from")
    location: Optional["Location"] = None
    inline_message_id: Optional[str] = None
    query: str


class InputTextMessageContent(BotObject):
    message_text: str
    parse_mode: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    link_preview_options: Optional["LinkPreviewOptions"] = None


class InputLocationMessageContent(BotObject):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(BotObject):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(BotObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


InputMessageContent = Union[
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
]


class InlineQueryResultArticle(BotObject):
    type: Literal["article"] = "article"
    id: str
    title: str
    input_message_content: InputMessageContent
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultPhoto(BotObject):
    type: Literal["photo"] = "photo"
    id: str
    photo_url: str
    thumbnail_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultGif(BotObject):
    type: Literal["gif"] = "gif"
    id: str
    gif_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumbnail_url: str
    thumbnail_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVideo(BotObject):
    type: Literal["video"] = "video"
    id: str
    video_url: str
    mime_type: str
    thumbnail_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultAudio(BotObject):
    type: Literal["audio"] = "audio"
    id: str
    audio_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultDocument(BotObject):
    type: Literal["document"] = "document"
    id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    document_url: str
    mime_type: str
    description: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultLocation(BotObject):
    type: Literal["location"] = "location"
    id: str
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultVenue(BotObject):
    type: Literal["venue"] = "venue"
    id: str
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultContact(BotObject):
    type: Literal["contact"] = "contact"
    id: str
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultGame(BotObject):
    type: Literal["game"] = "game"
    id: str
    game_short_name: str
    reply_markup: Optional["InlineKeyboardMarkup"] = None


class InlineQueryResultCachedPhoto(BotObject):
    type: Literal["photo"] = "photo"
    id: str
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedSticker(BotObject):
    type: Literal["sticker"] = "sticker"
    id: str
    sticker_file_id: str
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional[InputMessageContent] = None


# Cached and non-cached variants share ``type`` values, so this union is
# only ever serialized, never validated from the wire.
InlineQueryResult = Union[
    InlineQueryResultArticle,
    InlineQueryResultPhoto,
    InlineQueryResultGif,
    InlineQueryResultVideo,
    InlineQueryResultAudio,
    InlineQueryResultDocument,
    InlineQueryResultLocation,
    InlineQueryResultVenue,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedSticker,
]


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(BotObject):
    """A portion of the price, in the smallest units of the currency."""

    label: str
    amount: int


class Invoice(BotObject):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(BotObject):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(BotObject):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional["ShippingAddress"] = None


class ShippingOption(BotObject):
    id: str
    title: str
    prices: List["LabeledPrice"]


class SuccessfulPayment(BotObject):
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional["OrderInfo"] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class ShippingQuery(BotObject):
    id: str
    from_field: "User" = Field(alias="from")
    invoice_payload: str
    shipping_address: "ShippingAddress"


class PreCheckoutQuery(BotObject):
    id: str
    from_field: "User" = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional["OrderInfo"] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportFile(BotObject):
    """A file uploaded to Telegram Passport. Files are JPG, at most 10MB."""

    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(BotObject):
    type: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List["PassportFile"]] = None
    front_side: Optional["PassportFile"] = None
    reverse_side: Optional["PassportFile"] = None
    selfie: Optional["PassportFile"] = None
    translation: Optional[List["PassportFile"]] = None
    hash: str


class EncryptedCredentials(BotObject):
    data: str
    hash: str
    secret: str


class PassportData(BotObject):
    data: List["EncryptedPassportElement"]
    credentials: "EncryptedCredentials"


class PassportElementErrorDataField(BotObject):
    """An issue in one of the data fields provided by the user."""

    source: Literal["data"] = "data"
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(BotObject):
    source: Literal["front_side"] = "front_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(BotObject):
    source: Literal["reverse_side"] = "reverse_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(BotObject):
    source: Literal["selfie"] = "selfie"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(BotObject):
    source: Literal["file"] = "file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(BotObject):
    source: Literal["files"] = "files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorTranslationFile(BotObject):
    """An issue with one of the files that constitute the translation of a document.

    The error is considered resolved when the file changes.
    """

    source: Literal["translation_file"] = "translation_file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(BotObject):
    source: Literal["translation_files"] = "translation_files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorUnspecified(BotObject):
    source: Literal["unspecified"] = "unspecified"
    type: str
    element_hash: str
    message: str


PassportElementError = Annotated[
    Union[
        PassportElementErrorDataField,
        PassportElementErrorFrontSide,
        PassportElementErrorReverseSide,
        PassportElementErrorSelfie,
        PassportElementErrorFile,
        PassportElementErrorFiles,
        PassportElementErrorTranslationFile,
        PassportElementErrorTranslationFiles,
        PassportElementErrorUnspecified,
    ],
    Field(discriminator="source"),
]


# ── Games ────────────────────────────────────────────────────────────────────


class Game(BotObject):
    """A game. Use BotFather to create and edit games."""

    title: str
    description: str
    photo: List["PhotoSize"]
    text: Optional[str] = None
    text_entities: Optional[List["MessageEntity"]] = None
    animation: Optional["Animation"] = None


class CallbackGame(BotObject):
    """A placeholder, currently holds no information."""


class GameHighScore(BotObject):
    position: int
    user: "User"
    score: int


for _model in list(globals().values()):
    if isinstance(_model, type) and issubclass(_model, BotObject):
        _model.model_rebuild()
del _model
