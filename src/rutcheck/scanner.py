"""
Turn free-form text into a `Rut`.

Accepted layouts (separators are optional and may appear anywhere):

    12.345.678-5
    12345678-5
    123456785

Scanning rules
--------------
- '.' and '-' are skipped.
- ASCII digits are kept; 'k'/'K' is kept as 'K'. Anything else is rejected.
- At most 12 characters are buffered; input that would grow the buffer past
  that stops early with TooLongError.
- After separators are removed, 5..10 characters must remain.
- The last character is the check character; 'K' anywhere else is rejected.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import (
    EmptyInputError,
    InvalidFormatError,
    TooLongError,
    TooShortError,
)
from .rut import Rut

logger = logging.getLogger(__name__)

SEPARATORS = frozenset(".-")
MIN_LENGTH = 5
MAX_LENGTH = 10
MAX_BUFFER = 12


def _normalize_char(ch: str) -> Optional[str]:
    # str.isdigit() would accept non-ASCII digits, so compare code points.
    if "0" <= ch <= "9":
        return ch
    if ch in ("k", "K"):
        return "K"
    return None


def parse(raw: Optional[str]) -> Rut:
    """
    Parse `raw` into a `Rut` without checking the check character.

    Raises:
        EmptyInputError:    `raw` is empty or None.
        TooLongError:       more than 10 meaningful characters.
        TooShortError:      fewer than 5 meaningful characters.
        InvalidFormatError: a character outside digits/K/separators, or a
                            'K' before the last position.
    """
    if not raw:
        raise EmptyInputError()

    buf: list[str] = []
    for ch in raw:
        if ch in SEPARATORS:
            continue
        if len(buf) >= MAX_BUFFER:
            logger.debug("rut rejected: buffer limit reached for %r", raw[:32])
            raise TooLongError()
        norm = _normalize_char(ch)
        if norm is None:
            logger.debug("rut rejected: invalid character %r in %r", ch, raw[:32])
            raise InvalidFormatError(f"rut: invalid character {ch!r}")
        buf.append(norm)

    if len(buf) < MIN_LENGTH:
        raise TooShortError()
    if len(buf) > MAX_LENGTH:
        raise TooLongError()

    *body_chars, check = buf
    if "K" in body_chars:
        logger.debug("rut rejected: 'K' outside the check position in %r", raw[:32])
        raise InvalidFormatError("rut: 'K' is only allowed as the check character")

    try:
        body = int("".join(body_chars))
    except ValueError as e:
        raise InvalidFormatError(f"rut: unparseable body in {raw[:32]!r}") from e

    return Rut(body=body, check=check)
