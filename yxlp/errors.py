from __future__ import annotations


class YxlpError(Exception):
    """Base class for errors raised by the test-data layer."""


class NotInitializedError(YxlpError, RuntimeError):
    """A read reached the service while it holds no dataset snapshot."""

    def __init__(self, message: str = "Data not initialized") -> None:
        super().__init__(message)
