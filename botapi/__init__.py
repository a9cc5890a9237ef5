"""botapi -- a typed client for the Telegram Bot API.

Usage::

    from botapi import BotClient

    client = BotClient("123:ABC")
    me = client.get_me()
    client.send_message(chat_id=42, text=f"I am {me.first_name}")
"""

from botapi.bot_base import AsyncTelegramBotBase, TelegramBotBase
from botapi.client import AsyncBotClient, BaseBotClient, BotClient
from botapi.exceptions import BotRequestException
from botapi.input_file import InputFile

__all__ = [
    "AsyncBotClient",
    "AsyncTelegramBotBase",
    "BaseBotClient",
    "BotClient",
    "BotRequestException",
    "InputFile",
    "TelegramBotBase",
]
