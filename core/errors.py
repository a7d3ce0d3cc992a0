"""Errors raised by the feed pipeline.

Only ``server/app.py`` turns them into HTTP responses. Date parsing
failures are recovered where they happen and never reach the caller.
"""

from typing import Optional


class RssBridgeError(Exception):
    pass


class FetchError(RssBridgeError):
    """The source page could not be retrieved (transport error or non-200)."""

    def __init__(self, url: str, status: Optional[int] = None,
                 cause: Optional[BaseException] = None):
        self.url = url
        self.status = status
        self.cause = cause
        if status is not None:
            msg = f"GET {url} returned status {status}"
        elif cause is not None:
            detail = str(cause) or "no detail"
            msg = f"GET {url} failed: {cause.__class__.__name__}: {detail}"
        else:
            msg = f"GET {url} failed"
        super().__init__(msg)


class ParseError(RssBridgeError):
    """HTML that cannot be turned into a tree, or an unreadable date."""


class SerializationError(RssBridgeError):
    """The feed could not be converted to RSS XML."""
