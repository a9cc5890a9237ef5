"""Telegram Passport."""

from typing import Any, Dict, List

from botapi.methods.base import MethodsMixin, require
from botapi.models import PassportElementError


class PassportMethods(MethodsMixin):

    def set_passport_data_errors(self, user_id: int, errors: List[PassportElementError]) -> bool:
        """Report errors in Passport elements so the user can resubmit them."""
        require("user_id", user_id)
        if errors is None:
            raise ValueError("Parameter 'errors' is required")
        payload: Dict[str, Any] = {"user_id": user_id, "errors": errors}
        return self.call_method("setPassportDataErrors", payload, bool)
