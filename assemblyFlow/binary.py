# ABOUTME: Binary payloads attached to input items for file uploads.
# ABOUTME: Supports small inline base64 buffers and streamed file-backed payloads.

from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from assemblyFlow.validators import validate_file_exists

DEFAULT_CHUNK_SIZE = 1024 * 1024


class BinarySource(ABC):
    """Capability interface for binary payloads of an input item."""

    file_name: Optional[str] = None
    mime_type: Optional[str] = None

    @abstractmethod
    def has_data(self) -> bool:
        """Return True if the payload resolves to at least one byte."""

    @abstractmethod
    def upload_body(self) -> Union[bytes, Iterator[bytes]]:
        """Return the request body: bytes, or a lazy chunk iterator."""


class InlineBinary(BinarySource):
    """Payload held in memory, either raw bytes or a base64 string."""

    def __init__(
        self,
        data: Union[bytes, bytearray, str],
        *,
        file_name: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> None:
        self._data = data
        self.file_name = file_name
        self.mime_type = mime_type

    def to_bytes(self) -> bytes:
        if isinstance(self._data, (bytes, bytearray)):
            return bytes(self._data)
        try:
            return base64.b64decode(self._data, validate=True)
        except (binascii.Error, ValueError):
            return b""

    def has_data(self) -> bool:
        return len(self.to_bytes()) > 0

    def upload_body(self) -> bytes:
        return self.to_bytes()


class FileBinary(BinarySource):
    """Payload stored on disk and streamed in chunks when uploaded."""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        mime_type: Optional[str] = None,
    ) -> None:
        self.path = Path(path)
        self.chunk_size = chunk_size
        self.file_name = self.path.name
        self.mime_type = mime_type

    def has_data(self) -> bool:
        if validate_file_exists(str(self.path)) is not None:
            return False
        return self.path.stat().st_size > 0

    def upload_body(self) -> Iterator[bytes]:
        return self._iter_chunks()

    def _iter_chunks(self) -> Iterator[bytes]:
        with self.path.open("rb") as handle:
            while True:
                chunk = handle.read(self.chunk_size)
                if not chunk:
                    break
                yield chunk


def as_binary_source(value: Any) -> Optional[BinarySource]:
    """Wrap raw host values (bytes, base64 strings, dicts with ``data``) in a source."""
    if value is None or isinstance(value, BinarySource):
        return value
    if isinstance(value, (bytes, bytearray, str)):
        return InlineBinary(value)
    if isinstance(value, dict):
        if value.get("path"):
            return FileBinary(value["path"], mime_type=value.get("mime_type"))
        if "data" in value:
            return InlineBinary(
                value["data"],
                file_name=value.get("file_name"),
                mime_type=value.get("mime_type"),
            )
    raise TypeError(f"Unsupported binary payload type: {type(value).__name__}")
