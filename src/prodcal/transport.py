"""HTTP transport used by the acquisition strategies.

The pipeline only needs "fetch text from URL". :class:`Transport` describes
that capability so callers and tests can supply their own implementation;
:class:`UrllibTransport` is the default, built on :mod:`urllib.request`.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from bs4.dammit import EncodingDetector

from .exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "prodcal (+https://pypi.org/project/prodcal/)"


@runtime_checkable
class Transport(Protocol):
    """Protocol for retrieving a document as text."""

    def fetch(self, url: str, *, accept: str | None = None) -> str:
        """Return the body of a successful GET on *url*.

        Raises:
            TransportError: On a non-2xx response or a network failure.
        """
        ...


class UrllibTransport:
    """Blocking GET requests through :func:`urllib.request.urlopen`.

    Args:
        user_agent: Value of the ``User-Agent`` header.
        timeout: Socket timeout in seconds. ``None`` blocks until the server
            answers.
    """

    __slots__ = ("_timeout", "_user_agent")

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: float | None = None) -> None:
        self._user_agent = user_agent
        self._timeout = timeout

    def fetch(self, url: str, *, accept: str | None = None) -> str:
        headers = {"User-Agent": self._user_agent}
        if accept:
            headers["Accept"] = accept
        req = Request(url, headers=headers)  # noqa: S310
        logger.debug("GET %s", url)
        try:
            with urlopen(req, timeout=self._timeout) as resp:  # noqa: S310
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    reason = f"{status} ({getattr(resp, 'reason', '')})"
                    raise TransportError(url, reason)
                charset = resp.headers.get_content_charset()
                body: bytes = resp.read()
        except HTTPError as exc:
            raise TransportError(url, f"{exc.code} ({exc.reason})") from exc
        except (URLError, TimeoutError, OSError) as exc:
            raise TransportError(url, str(exc)) from exc
        return _decode(url, body, charset)


def _decode(url: str, body: bytes, charset: str | None) -> str:
    """Decode *body* strictly.

    The HTTP charset wins. Without one, a byte-order mark and then the
    document's own XML or HTML declaration are honoured before UTF-8.
    """
    encoding = charset
    if encoding is None:
        body, encoding = EncodingDetector.strip_byte_order_mark(body)
    if encoding is None:
        encoding = EncodingDetector.find_declared_encoding(body, is_html=True)
    encoding = encoding or "utf-8"
    try:
        return body.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise TransportError(url, f"cannot decode body as {encoding}: {exc}") from exc
