"""
Render a `Rut` in one of the canonical layouts.

    COMPLETE   12.345.678-5
    ESCAPED    123456785
    WITH_DASH  12345678-5

The formatter never validates: whatever (body, check) pair it receives is
written out as-is.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .rut import Rut


class Style(str, Enum):
    COMPLETE = "complete"
    ESCAPED = "escaped"
    WITH_DASH = "with-dash"


StyleLike = Union[Style, str]


def coerce_style(style: StyleLike | None) -> Style:
    """
    Resolve a style given as an enum member, a value ("with-dash") or a
    member name ("WITH_DASH"). Anything unknown falls back to COMPLETE.
    """
    if isinstance(style, Style):
        return style
    if not style:
        return Style.COMPLETE
    key = str(style).strip()
    try:
        return Style(key.lower())
    except ValueError:
        pass
    try:
        return Style[key.upper().replace("-", "_")]
    except KeyError:
        return Style.COMPLETE


def group_thousands(digits: str) -> str:
    """Insert a '.' after every digit whose remaining tail is a positive multiple of three."""
    out = []
    n = len(digits)
    for i, ch in enumerate(digits):
        out.append(ch)
        remaining = n - i - 1
        if remaining > 0 and remaining % 3 == 0:
            out.append(".")
    return "".join(out)


def render(rut: "Rut", style: StyleLike | None = Style.COMPLETE) -> str:
    digits = str(rut.body)
    resolved = coerce_style(style)

    if resolved is Style.ESCAPED:
        return f"{digits}{rut.check}"
    if resolved is Style.WITH_DASH:
        return f"{digits}-{rut.check}"
    return f"{group_thousands(digits)}-{rut.check}"
