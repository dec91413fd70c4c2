"""One-step helpers composing `parse` with validation or rendering."""

from __future__ import annotations

from typing import Optional

from .errors import RutError
from .formatter import Style, StyleLike
from .scanner import parse


def validate(text: Optional[str]) -> bool:
    """
    True if `text` parses and its check character matches.

    Every parse error collapses to False; nothing is raised.
    """
    try:
        rut = parse(text)
    except RutError:
        return False
    return rut.is_valid()


def format_rut(text: Optional[str], style: StyleLike | None = Style.COMPLETE) -> str:
    """
    Parse `text` and render it in `style`.

    The check character is not verified; parse errors propagate.
    """
    return parse(text).render(style)
