"""Methods for receiving updates: long polling and webhooks."""

from typing import Any, Dict, List, Optional

from botapi.input_file import InputFile
from botapi.methods.base import MethodsMixin, require
from botapi.models import Update, WebhookInfo


class GettingUpdatesMethods(MethodsMixin):

    def get_updates(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        timeout: Optional[int] = None,
        allowed_updates: Optional[List[str]] = None,
    ) -> List[Update]:
        """Receive incoming updates using long polling.

        *timeout* is the long-polling timeout in seconds; the HTTP timeout is
        extended by the same amount.
        """
        payload: Dict[str, Any] = {
            "offset": offset,
            "limit": limit,
            "timeout": timeout,
            "allowed_updates": allowed_updates,
        }
        return self.call_method("getUpdates", payload, List[Update])

    def set_webhook(
        self,
        url: str,
        certificate: Optional[InputFile] = None,
        ip_address: Optional[str] = None,
        max_connections: Optional[int] = None,
        allowed_updates: Optional[List[str]] = None,
        drop_pending_updates: Optional[bool] = None,
        secret_token: Optional[str] = None,
    ) -> bool:
        """Specify a URL and receive incoming updates via an outgoing webhook."""
        require("url", url)
        payload: Dict[str, Any] = {
            "url": url,
            "certificate": certificate,
            "ip_address": ip_address,
            "max_connections": max_connections,
            "allowed_updates": allowed_updates,
            "drop_pending_updates": drop_pending_updates,
            "secret_token": secret_token,
        }
        return self.call_method("setWebhook", payload, bool)

    def delete_webhook(self, drop_pending_updates: Optional[bool] = None) -> bool:
        """Remove webhook integration to switch back to :meth:`get_updates`."""
        return self.call_method("deleteWebhook", {"drop_pending_updates": drop_pending_updates}, bool)

    def get_webhook_info(self) -> WebhookInfo:
        return self.call_method("getWebhookInfo", None, WebhookInfo)
