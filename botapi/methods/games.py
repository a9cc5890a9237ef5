"""Games: sending games and keeping score."""

from typing import Any, Dict, List, Optional, Union

from botapi.methods.base import MethodsMixin, require, require_message_target
from botapi.models import GameHighScore, InlineKeyboardMarkup, Message, ReplyParameters


class GameMethods(MethodsMixin):

    def send_game(
        self,
        chat_id: int,
        game_short_name: str,
        message_thread_id: Optional[int] = None,
        disable_notification: Optional[bool] = None,
        protect_content: Optional[bool] = None,
        reply_parameters: Optional[ReplyParameters] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        """Send a game. *game_short_name* is set up via @BotFather."""
        require("chat_id", chat_id)
        require("game_short_name", game_short_name)
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_thread_id": message_thread_id,
            "game_short_name": game_short_name,
            "disable_notification": disable_notification,
            "protect_content": protect_content,
            "reply_parameters": reply_parameters,
            "reply_markup": reply_markup,
        }
        return self.call_method("sendGame", payload, Message)

    def set_game_score(
        self,
        user_id: int,
        score: int,
        force: Optional[bool] = None,
        disable_edit_message: Optional[bool] = None,
        chat_id: Optional[int] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> Union[Message, bool]:
        """Set the score of the specified user in a game message.

        Returns an error if the new score is not greater than the current one
        and *force* is not set.
        """
        require("user_id", user_id)
        require("score", score)
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "user_id": user_id,
            "score": score,
            "force": force,
            "disable_edit_message": disable_edit_message,
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }
        return self.call_method("setGameScore", payload, Union[Message, bool])

    def get_game_high_scores(
        self,
        user_id: int,
        chat_id: Optional[int] = None,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> List[GameHighScore]:
        require("user_id", user_id)
        require_message_target(chat_id, message_id, inline_message_id)
        payload: Dict[str, Any] = {
            "user_id": user_id,
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }
        return self.call_method("getGameHighScores", payload, List[GameHighScore])
