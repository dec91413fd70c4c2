"""The `Rut` value type."""

from __future__ import annotations

from dataclasses import dataclass

from .checksum import compute_check
from .errors import InvalidFormatError
from .formatter import Style, StyleLike, render

CHECK_CHARS = frozenset("0123456789K")


@dataclass(frozen=True)
class Rut:
    """
    A parsed Chilean RUT.

    Attributes:
        body:  Number without the check character (e.g. 12345678).
        check: Check character, '0'..'9' or uppercase 'K'.

    Instances are immutable and compare by value. Building one directly does
    not validate it; use `is_valid()` for that.
    """
    body: int
    check: str

    @classmethod
    def from_parts(cls, body: int, check: str) -> "Rut":
        """
        Build from caller-supplied parts, uppercasing a lowercase 'k'.

        Raises InvalidFormatError unless `check` is a single '0'..'9' or 'K'.
        """
        norm = str(check).upper()
        if len(norm) != 1 or norm not in CHECK_CHARS:
            raise InvalidFormatError(f"rut: invalid check character {check!r}")
        return cls(body=int(body), check=norm)

    @classmethod
    def with_check(cls, body: int) -> "Rut":
        """Build the valid RUT for `body` by computing its check character."""
        return cls(body=body, check=compute_check(body))

    def is_valid(self) -> bool:
        # Zero and negative bodies are placeholders, never real RUTs.
        if self.body <= 0:
            return False
        return self.check == compute_check(self.body)

    def render(self, style: StyleLike | None = Style.COMPLETE) -> str:
        return render(self, style)

    def to_text(self) -> str:
        return render(self, Style.COMPLETE)

    def __str__(self) -> str:
        return self.to_text()
