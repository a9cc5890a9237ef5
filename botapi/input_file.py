"""Content to be uploaded with ``multipart/form-data``."""

from __future__ import annotations

import os
from typing import IO, Optional, Tuple, Union


def _seekable(stream: object) -> bool:
    seekable = getattr(stream, "seekable", None)
    return callable(seekable) and bool(seekable())


class InputFile:
    """A file to upload instead of referencing a ``file_id`` or an HTTP URL.

    *content* may be raw bytes, a binary file object, or a path on disk.
    When *filename* is omitted it is taken from the path or the file object's
    ``name`` attribute.
    """

    def __init__(self, content: Union[bytes, IO[bytes], str, os.PathLike], filename: Optional[str] = None) -> None:
        self.content = content
        self.filename = filename or self._guess_filename(content)
        self._start: Optional[int] = None
        self._cached: Optional[bytes] = None
        if not isinstance(content, (bytes, str, os.PathLike)) and _seekable(content):
            self._start = content.tell()

    @staticmethod
    def _guess_filename(content: object) -> str:
        if isinstance(content, (str, os.PathLike)):
            return os.path.basename(os.fspath(content))
        name = getattr(content, "name", None)
        if isinstance(name, str):
            return os.path.basename(name)
        return "file"

    def read(self) -> bytes:
        """Return the file content as bytes."""
        if isinstance(self.content, bytes):
            return self.content
        if isinstance(self.content, (str, os.PathLike)):
            with open(self.content, "rb") as fh:
                return fh.read()
        # Seekable streams rewind to their initial position; others are read once.
        if self._start is not None:
            self.content.seek(self._start)
            return self.content.read()
        if self._cached is None:
            self._cached = self.content.read()
        return self._cached

    def to_field(self) -> Tuple[str, bytes]:
        """Return the ``(filename, data)`` tuple expected by :mod:`requests`."""
        return self.filename, self.read()

    def __repr__(self) -> str:
        return f"InputFile(filename={self.filename!r})"
