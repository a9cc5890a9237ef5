"""Typed wrappers for every remote method, grouped as in the API reference."""

from botapi.methods.available_methods import AvailableMethods
from botapi.methods.base import MethodsMixin
from botapi.methods.games import GameMethods
from botapi.methods.getting_updates import GettingUpdatesMethods
from botapi.methods.inline_mode import InlineModeMethods
from botapi.methods.passport import PassportMethods
from botapi.methods.payments import PaymentMethods
from botapi.methods.stickers import StickerMethods
from botapi.methods.updating_messages import UpdatingMessagesMethods


class BotMethods(
    GettingUpdatesMethods,
    AvailableMethods,
    UpdatingMessagesMethods,
    StickerMethods,
    InlineModeMethods,
    PaymentMethods,
    PassportMethods,
    GameMethods,
):
    """Every method group in one mixin."""


__all__ = [
    "AvailableMethods",
    "BotMethods",
    "GameMethods",
    "GettingUpdatesMethods",
    "InlineModeMethods",
    "MethodsMixin",
    "PassportMethods",
    "PaymentMethods",
    "StickerMethods",
    "UpdatingMessagesMethods",
]
