"""Domain error types."""

from __future__ import annotations

import enum
from typing import Any


class ErrorKind(enum.Enum):
    INVALID_RESPONSE_STRUCTURE = 'InvalidResponseStructure'
    PARSE_FAILURE = 'ParseFailure'
    REQUEST_FAILURE = 'RequestFailure'


class ChatResponseError(Exception):
    """Raised when a city lookup cannot produce a parsed result.

    ``kind`` tells the three failure classes apart; ``cause`` holds whatever
    triggered it (an exception or the raw reply).
    """

    kind: ErrorKind

    def __init__(self, message: str, cause: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def name(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return f'{self.name}: {self.message}'


class InvalidResponseStructureError(ChatResponseError):
    """The reply had no usable text content. ``cause`` is the raw reply."""

    kind = ErrorKind.INVALID_RESPONSE_STRUCTURE


class ParseFailureError(ChatResponseError):
    """The reply text was not a JSON object of the expected shape."""

    kind = ErrorKind.PARSE_FAILURE

    def __init__(self, message: str, cause: Any = None, *, raw_text: str = '') -> None:
        super().__init__(message, cause)
        self.raw_text = raw_text


class RequestFailureError(ChatResponseError):
    """The transport call failed. ``city`` is the city being looked up."""

    kind = ErrorKind.REQUEST_FAILURE

    def __init__(self, message: str, cause: Any = None, *, city: str = '') -> None:
        super().__init__(message, cause)
        self.city = city
