"""Validate, parse and format Chilean RUTs."""

from .checksum import compute_check
from .errors import (
    EmptyInputError,
    ErrorKind,
    InvalidFormatError,
    RutError,
    TooLongError,
    TooShortError,
)
from .formatter import Style, render
from .rut import Rut
from .scanner import parse
from .validation import format_rut, validate

__version__ = "0.1.0"

__all__ = [
    "Rut",
    "Style",
    "ErrorKind",
    "RutError",
    "EmptyInputError",
    "TooShortError",
    "TooLongError",
    "InvalidFormatError",
    "compute_check",
    "format_rut",
    "parse",
    "render",
    "validate",
]
