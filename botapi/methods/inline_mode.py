"""Inline mode: answering inline queries."""

from typing import Any, Dict, List, Optional

from botapi.methods.base import MethodsMixin, require
from botapi.models import InlineQueryResult, InlineQueryResultsButton


class InlineModeMethods(MethodsMixin):

    def answer_inline_query(
        self,
        inline_query_id: str,
        results: List[InlineQueryResult],
        cache_time: Optional[int] = None,
        is_personal: Optional[bool] = None,
        next_offset: Optional[str] = None,
        button: Optional[InlineQueryResultsButton] = None,
    ) -> bool:
        """Send answers to an inline query. No more than 50 results are allowed.

        *button* is shown above the results and opens a Web App or starts
        the bot with a parameter.
        """
        require("inline_query_id", inline_query_id)
        if results is None:
            raise ValueError("Parameter 'results' is required")
        payload: Dict[str, Any] = {
            "inline_query_id": inline_query_id,
            "results": results,
            "cache_time": cache_time,
            "is_personal": is_personal,
            "next_offset": next_offset,
            "button": button,
        }
        return self.call_method("answerInlineQuery", payload, bool)
