"""
Modulo-11 check character for RUT bodies.

Digits are read from the least significant end and multiplied by weights
that cycle through 2..7. The weighted sum is reduced mod 11 and mapped:

    11 -> '0'
    10 -> 'K'
     n -> str(n)
"""

from __future__ import annotations

from typing import Iterator

WEIGHTS = (2, 3, 4, 5, 6, 7)


def _digits_lsb_first(number: int) -> Iterator[int]:
    while number > 0:
        number, digit = divmod(number, 10)
        yield digit


def compute_check(body: int) -> str:
    """
    Compute the check character for a RUT body.

    Args:
        body: Numeric part of the RUT (no check character). Must be >= 0.

    Returns:
        '0'..'9' or 'K'.

    Examples:
        >>> compute_check(12345678)
        '5'
        >>> compute_check(1009)
        'K'
    """
    if body < 0:
        raise ValueError(f"RUT body must be non-negative, got {body}")
    if body == 0:
        return "0"

    total = 0
    for i, digit in enumerate(_digits_lsb_first(body)):
        total += digit * WEIGHTS[i % len(WEIGHTS)]

    result = 11 - (total % 11)
    if result == 11:
        return "0"
    if result == 10:
        return "K"
    return str(result)
