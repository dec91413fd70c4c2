"""Error kinds raised while reading a RUT from text."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"


class RutError(ValueError):
    """
    Base class for every parse failure.

    Subclasses pin `kind` so callers can either catch a specific class or
    catch `RutError` and branch on `err.kind`.
    """
    kind: ErrorKind = ErrorKind.INVALID_FORMAT
    default_message = "rut: invalid format"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyInputError(RutError):
    kind = ErrorKind.EMPTY_INPUT
    default_message = "rut: empty string"


class TooShortError(RutError):
    kind = ErrorKind.TOO_SHORT
    default_message = "rut: too short (minimum 5 characters)"


class TooLongError(RutError):
    kind = ErrorKind.TOO_LONG
    default_message = "rut: too long (maximum 10 characters)"


class InvalidFormatError(RutError):
    kind = ErrorKind.INVALID_FORMAT
