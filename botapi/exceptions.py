"""Exception hierarchy for the Bot API client."""

from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import ValidationError

if TYPE_CHECKING:
    from botapi.models import ResponseParameters


class BotRequestException(Exception):
    """Raised when a request to the Telegram Bot API got an error response.

    Attributes:
        error_code: Error code reported by the API (falls back to the HTTP status).
        description: Human-readable description of the error.
        parameters: Optional :class:`~botapi.models.ResponseParameters` telling
            the caller how to recover (``retry_after``, ``migrate_to_chat_id``).
        status_code: HTTP status code of the response.
        response_body: Raw response body as a dict, when available.
    """

    def __init__(
        self,
        error_code: int,
        description: str = "Unknown error",
        parameters: Optional["ResponseParameters"] = None,
        status_code: Optional[int] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.error_code = error_code
        self.description = description
        self.parameters = parameters
        self.status_code = status_code if status_code is not None else error_code
        self.response_body = response_body or {}
        super().__init__(f"API error {error_code}: {description}")

    @classmethod
    def from_response(cls, status_code: int, body: Optional[Dict[str, Any]]) -> "BotRequestException":
        """Build the exception from a failed response envelope."""
        from botapi.models import ResponseParameters  # deferred to avoid circular imports

        body = body or {}
        raw_parameters = body.get("parameters")
        parameters = None
        if isinstance(raw_parameters, dict):
            try:
                parameters = ResponseParameters.model_validate(raw_parameters)
            except ValidationError:
                parameters = None
        return cls(
            error_code=body.get("error_code", status_code),
            description=body.get("description", "Unknown error"),
            parameters=parameters,
            status_code=status_code,
            response_body=body,
        )

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating the request, when flood control kicked in."""
        if self.parameters is None:
            return None
        return self.parameters.retry_after
