"""BotClient / AsyncBotClient -- dispatch named Telegram Bot API methods.

Both clients inherit every method wrapper from :class:`~botapi.methods.BotMethods`
and differ only in :meth:`call_method`.  HTTP calls use the ``requests``
library; the async client offloads blocking I/O via :func:`asyncio.to_thread`.

Request rule: ``None`` parameters are omitted, models become their wire
dicts, enums their values.  When any value (top-level or nested) is an
:class:`~botapi.input_file.InputFile` the request is sent as
``multipart/form-data``; otherwise as a JSON body.

Response rule: the ``{"ok": ..., "result": ...}`` envelope is unwrapped and
``result`` validated into the requested type, or a
:class:`~botapi.exceptions.BotRequestException` is raised.
"""

from __future__ import annotations

import asyncio
import json
import logging
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

import requests
from pydantic import TypeAdapter

from botapi.exceptions import BotRequestException
from botapi.input_file import InputFile
from botapi.methods import BotMethods
from botapi.models import BotObject, File

logger = logging.getLogger(__name__)

_adapters: Dict[str, TypeAdapter] = {}


def _adapter_for(result_type: Any) -> TypeAdapter:
    """Return a cached :class:`TypeAdapter` for *result_type*."""
    key = repr(result_type)
    adapter = _adapters.get(key)
    if adapter is None:
        adapter = TypeAdapter(result_type)
        _adapters[key] = adapter
    return adapter


# ── Request building ─────────────────────────────────────────────────────────


def _serialize(value: Any) -> Any:
    """Convert *value* to wire form, dropping ``None`` entries from mappings."""
    if isinstance(value, BotObject):
        return _serialize(value.to_payload())
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


def _extract_files(params: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Tuple[str, bytes]]]:
    """Split :class:`InputFile` values out of *params*.

    Top-level files are sent under their parameter name.  Nested files are
    replaced by ``attach://attached_file_<n>`` references.
    """
    files: Dict[str, Tuple[str, bytes]] = {}

    def attach(value: Any) -> Any:
        if isinstance(value, InputFile):
            name = f"attached_file_{len(files)}"
            files[name] = value.to_field()
            return f"attach://{name}"
        if isinstance(value, dict):
            return {key: attach(item) for key, item in value.items()}
        if isinstance(value, list):
            return [attach(item) for item in value]
        return value

    data: Dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, InputFile):
            files[key] = value.to_field()
        else:
            data[key] = attach(value)
    return data, files


def _form_value(value: Any) -> str:
    """Encode a multipart form value; non-strings are JSON-encoded."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _raise_for_body(method: str, status_code: int, body: Optional[Dict[str, Any]]) -> None:
    logger.error(
        "Bot API request failed",
        extra={"api_endpoint": method, "status_code": status_code, "api_response": body},
    )
    raise BotRequestException.from_response(status_code, body)


class BaseBotClient(BotMethods):
    """State and request/response handling shared by both clients."""

    DEFAULT_SERVER: str = "https://api.telegram.org"
    _DEFAULT_TIMEOUT: int = 10

    def __init__(self, bot_token: str, server_address: str = DEFAULT_SERVER, timeout: int = _DEFAULT_TIMEOUT) -> None:
        """Create a client for the bot identified by *bot_token*.

        Args:
            bot_token: Token issued by @BotFather.
            server_address: Bot API server, e.g. a local ``telegram-bot-api`` instance.
            timeout: Default request timeout in seconds.
        """
        if not bot_token:
            raise ValueError("Parameter 'bot_token' is required")
        self._bot_token = bot_token
        self._server_address = server_address.rstrip("/")
        self._timeout = timeout
        self._base_url = f"{self._server_address}/bot{bot_token}"

    @property
    def server_address(self) -> str:
        return self._server_address

    @property
    def timeout(self) -> int:
        return self._timeout

    def _build_request(self, method: str, params: Optional[Dict[str, Any]]) -> Tuple[str, Dict[str, Any]]:
        """Return the endpoint URL and the keyword arguments for ``requests.post``."""
        url = f"{self._base_url}/{method}"
        payload = _serialize(params or {})
        timeout = self._timeout
        if method == "getUpdates" and isinstance(payload.get("timeout"), int):
            timeout += payload["timeout"]
        data, files = _extract_files(payload)
        if files:
            form = {key: _form_value(value) for key, value in data.items()}
            return url, {"data": form, "files": files, "timeout": timeout}
        return url, {"json": data, "timeout": timeout}

    def _file_url(self, file_path: Union[str, File]) -> str:
        if isinstance(file_path, File):
            file_path = file_path.file_path
        if not file_path:
            raise ValueError("Parameter 'file_path' is required")
        return f"{self._server_address}/file/bot{self._bot_token}/{file_path}"

    @staticmethod
    def _download_content(response: requests.Response) -> bytes:
        """Return the downloaded bytes, or raise for a non-2xx response."""
        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            _raise_for_body("downloadFile", response.status_code, body if isinstance(body, dict) else None)
        return response.content

    @staticmethod
    def _unwrap(method: str, response: requests.Response, result_type: Any) -> Any:
        """Decode the response envelope and validate ``result`` into *result_type*."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            _raise_for_body(method, response.status_code, None)
        if not response.ok or not body.get("ok"):
            _raise_for_body(method, response.status_code, body)
        return _adapter_for(result_type).validate_python(body.get("result"))


class BotClient(BaseBotClient):
    """Synchronous client; every method returns its typed result."""

    def call_method(self, method: str, params: Optional[Dict[str, Any]] = None, result_type: Any = Any) -> Any:
        """Invoke *method* and return its validated result.

        Raises:
            BotRequestException: If the API reported an error.
            requests.RequestException: On transport-level failures.
        """
        url, kwargs = self._build_request(method, params)
        logger.debug("Calling Bot API", extra={"api_endpoint": method})
        response = requests.post(url, **kwargs)
        return self._unwrap(method, response, result_type)

    def download_file(self, file_path: Union[str, File]) -> bytes:
        """Download a file previously resolved with :meth:`get_file`."""
        response = requests.get(self._file_url(file_path), timeout=self._timeout)
        return self._download_content(response)


class AsyncBotClient(BaseBotClient):
    """Asynchronous client; every method returns an awaitable of its typed result."""

    async def call_method(self, method: str, params: Optional[Dict[str, Any]] = None, result_type: Any = Any) -> Any:
        # Building the request may read upload files from disk.
        url, kwargs = await asyncio.to_thread(self._build_request, method, params)
        logger.debug("Calling Bot API", extra={"api_endpoint": method})
        response = await make_request("post", url, **kwargs)
        return self._unwrap(method, response, result_type)

    async def download_file(self, file_path: Union[str, File]) -> bytes:
        response = await make_request("get", self._file_url(file_path), timeout=self._timeout)
        return self._download_content(response)


async def make_request(method: str, url: str, **kwargs: object) -> requests.Response:
    """Run a :mod:`requests` call inside a thread to keep the event loop free.

    *method* is the HTTP verb (``"get"``, ``"post"``, …).
    """
    func = getattr(requests, method.lower())
    return await asyncio.to_thread(func, url, **kwargs)
