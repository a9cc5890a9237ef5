"""Base classes that route each incoming :class:`Update` to a typed hook.

Subclass :class:`TelegramBotBase` (or :class:`AsyncTelegramBotBase`) and
override the ``on_<update type>`` hooks you need.  Exceptions raised by a
hook are passed to :meth:`on_bot_exception` when they come from the API and
to :meth:`on_exception` otherwise; both log by default.
"""

import logging

from botapi.exceptions import BotRequestException
from botapi.models import (
    CallbackQuery,
    ChatJoinRequest,
    ChatMemberUpdated,
    ChosenInlineResult,
    InlineQuery,
    Message,
    Poll,
    PollAnswer,
    PreCheckoutQuery,
    ShippingQuery,
    Update,
    UpdateType,
)

logger = logging.getLogger(__name__)


class TelegramBotBase:
    """Synchronous update switch."""

    def on_update(self, update: Update) -> None:
        """Dispatch *update* to the hook matching :attr:`Update.type`."""
        if update.type is UpdateType.UNKNOWN:
            logger.debug("Skipping update of unknown type", extra={"update_id": update.update_id})
            return
        try:
            hook = getattr(self, f"on_{update.type.value}", None)
            if hook is not None:
                hook(update.payload)
        except BotRequestException as exc:
            self.on_bot_exception(exc)
        except Exception as exc:
            self.on_exception(exc)

    def on_message(self, message: Message) -> None: ...
    def on_edited_message(self, message: Message) -> None: ...
    def on_channel_post(self, message: Message) -> None: ...
    def on_edited_channel_post(self, message: Message) -> None: ...
    def on_inline_query(self, inline_query: InlineQuery) -> None: ...
    def on_chosen_inline_result(self, chosen_inline_result: ChosenInlineResult) -> None: ...
    def on_callback_query(self, callback_query: CallbackQuery) -> None: ...
    def on_shipping_query(self, shipping_query: ShippingQuery) -> None: ...
    def on_pre_checkout_query(self, pre_checkout_query: PreCheckoutQuery) -> None: ...
    def on_poll(self, poll: Poll) -> None: ...
    def on_poll_answer(self, poll_answer: PollAnswer) -> None: ...
    def on_my_chat_member(self, my_chat_member: ChatMemberUpdated) -> None: ...
    def on_chat_member(self, chat_member: ChatMemberUpdated) -> None: ...
    def on_chat_join_request(self, chat_join_request: ChatJoinRequest) -> None: ...

    def on_bot_exception(self, exc: BotRequestException) -> None:
        logger.error("Bot API error", extra={"error_code": exc.error_code, "error": exc.description})

    def on_exception(self, exc: Exception) -> None:
        logger.exception("Unhandled error in update handler", exc_info=exc)


class AsyncTelegramBotBase:
    """Asynchronous update switch; every hook is a coroutine."""

    async def on_update(self, update: Update) -> None:
        """Dispatch *update* to the hook matching :attr:`Update.type`."""
        if update.type is UpdateType.UNKNOWN:
            logger.debug("Skipping update of unknown type", extra={"update_id": update.update_id})
            return
        try:
            hook = getattr(self, f"on_{update.type.value}", None)
            if hook is not None:
                await hook(update.payload)
        except BotRequestException as exc:
            await self.on_bot_exception(exc)
        except Exception as exc:
            await self.on_exception(exc)

    async def on_message(self, message: Message) -> None: ...
    async def on_edited_message(self, message: Message) -> None: ...
    async def on_channel_post(self, message: Message) -> None: ...
    async def on_edited_channel_post(self, message: Message) -> None: ...
    async def on_inline_query(self, inline_query: InlineQuery) -> None: ...
    async def on_chosen_inline_result(self, chosen_inline_result: ChosenInlineResult) -> None: ...
    async def on_callback_query(self, callback_query: CallbackQuery) -> None: ...
    async def on_shipping_query(self, shipping_query: ShippingQuery) -> None: ...
    async def on_pre_checkout_query(self, pre_checkout_query: PreCheckoutQuery) -> None: ...
    async def on_poll(self, poll: Poll) -> None: ...
    async def on_poll_answer(self, poll_answer: PollAnswer) -> None: ...
    async def on_my_chat_member(self, my_chat_member: ChatMemberUpdated) -> None: ...
    async def on_chat_member(self, chat_member: ChatMemberUpdated) -> None: ...
    async def on_chat_join_request(self, chat_join_request: ChatJoinRequest) -> None: ...

    async def on_bot_exception(self, exc: BotRequestException) -> None:
        logger.error("Bot API error", extra={"error_code": exc.error_code, "error": exc.description})

    async def on_exception(self, exc: Exception) -> None:
        logger.exception("Unhandled error in update handler", exc_info=exc)
