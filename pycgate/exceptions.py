"""Exceptions raised by the C-Gate protocol decoder."""

from __future__ import annotations


class CGateException(Exception):
    """Base class for all pycgate errors."""


class ParseError(CGateException, ValueError):
    """A line violates the C-Gate event or response grammar.

    Attributes:
        line: The raw line being decoded
        token: The offending token, when one can be singled out
    """

    def __init__(self, message: str, line: str | None = None, token: str | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.token = token


class UnrecognizedFormat(ParseError):
    """Line is neither an event nor a command response."""


class Truncated(ParseError):
    """Line ends before all mandatory tokens were seen."""


class InvalidCode(ParseError):
    """Event code, response code or command id is not a decimal integer."""


class InvalidAddress(ParseError):
    """Network address is malformed."""


class InvalidLevel(ParseError):
    """Level value was rejected by the level codec."""


class InvalidValue(ParseError):
    """A required field is missing or has the wrong shape."""

    def __init__(
        self,
        message: str,
        line: str | None = None,
        token: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message, line, token)
        self.field = field


class EmptyRemainder(ParseError):
    """Application event carries no payload tokens."""


class MissingLevel(ParseError):
    """State change event has no level field."""


class LevelError(CGateException):
    """Level conversion failed."""


class InvalidType(LevelError, TypeError):
    """Level is not an integer."""


class OutOfRange(LevelError, ValueError):
    """Level is outside the allowed range."""
