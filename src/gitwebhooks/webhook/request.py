"""
Framework-neutral view of an incoming webhook request.
"""
import base64
import binascii
import io
from typing import BinaryIO, Mapping, Optional, Union

from starlette.datastructures import Headers

from ..logger import logger
from .errors import ParsingPayloadError

_DRAIN_CHUNK = 64 * 1024


class WebhookRequest:
    """Method, headers and body stream of one delivery.

    Header lookups are case-insensitive. The body is any binary file-like
    object; the parser owns it for the duration of ``parse`` and always
    drains and closes it before returning.
    """

    def __init__(
        self,
        method: str,
        headers: Union[Headers, Mapping[str, str], None] = None,
        body: Optional[BinaryIO] = None,
    ):
        self.method = method
        if isinstance(headers, Headers):
            self.headers = headers
        else:
            self.headers = Headers(headers=dict(headers or {}))
        self.body = body
        self.closed = False

    @classmethod
    def from_bytes(
        cls,
        method: str,
        headers: Union[Headers, Mapping[str, str], None] = None,
        body: bytes = b"",
    ) -> "WebhookRequest":
        """Build a request around an in-memory body."""
        return cls(method, headers, io.BytesIO(body))

    def header(self, name: str) -> str:
        return self.headers.get(name, "")

    def basic_auth(self) -> Optional[tuple[str, str]]:
        """Return the (username, password) pair of an HTTP Basic header."""
        scheme, _, credentials = self.header("Authorization").partition(" ")
        if scheme.lower() != "basic" or not credentials:
            return None
        try:
            decoded = base64.b64decode(credentials.strip(), validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None
        username, separator, password = decoded.partition(":")
        if not separator:
            return None
        return username, password

    def read_body(self) -> bytes:
        """Read the whole body; unreadable or empty bodies are rejected."""
        if self.body is None:
            raise ParsingPayloadError()
        try:
            data = self.body.read()
        except (OSError, ValueError) as e:
            raise ParsingPayloadError() from e
        if not data:
            raise ParsingPayloadError()
        return data

    def close(self) -> None:
        """Drain any unread bytes and close the body stream."""
        if self.closed:
            return
        self.closed = True
        if self.body is None:
            return
        try:
            while self.body.read(_DRAIN_CHUNK):
                pass
        except (OSError, ValueError) as e:
            logger.debug(f"Discarding unreadable request body: {e}")
        finally:
            self.body.close()

    def __enter__(self) -> "WebhookRequest":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
