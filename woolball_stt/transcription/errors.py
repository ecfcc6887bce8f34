"""Exceptions raised by the transcription clients."""
from typing import Optional


class WoolballError(Exception):
    """Base class for every error this package raises."""


class HttpError(WoolballError):
    """The request failed: non-2xx status, or no response at all.

    ``status_code`` is ``None`` for connection-level failures.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DeserializationError(WoolballError):
    """The response body did not parse into the expected shape."""
