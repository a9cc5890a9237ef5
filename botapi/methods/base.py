"""Shared plumbing for the method groups."""

from typing import Any, Dict, Optional, Union


class MethodsMixin:
    """Base for every method group.

    Concrete clients supply :meth:`call_method`; a synchronous client returns
    the typed result, an asynchronous one returns an awaitable of it.
    """

    def call_method(self, method: str, params: Optional[Dict[str, Any]] = None, result_type: Any = Any) -> Any:
        raise NotImplementedError


def require(name: str, value: Any) -> None:
    """Raise :class:`ValueError` when a required parameter is missing."""
    if value is None or (isinstance(value, str) and not value):
        raise ValueError(f"Parameter '{name}' is required")


def require_message_target(
    chat_id: Optional[Union[int, str]],
    message_id: Optional[int],
    inline_message_id: Optional[str],
) -> None:
    """Edit methods target either ``chat_id`` + ``message_id`` or ``inline_message_id``."""
    if inline_message_id:
        return
    if chat_id is None or chat_id == "" or message_id is None:
        raise ValueError("Either 'chat_id' and 'message_id' or 'inline_message_id' is required")
