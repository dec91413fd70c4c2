from __future__ import annotations
from pydantic import BaseModel, Field

from .formatter import Style
from .rut import Rut


class ParsedRut(BaseModel):
    """
    Serializable view of a parsed RUT, as printed by `rutcheck parse --json`.
    """
    body: int = Field(description="Number without the check character")
    check: str = Field(description="Check character as written ('0'..'9' or 'K')")
    valid: bool = Field(description="Whether the check character matches the body")
    formatted: str = Field(description="Rendering in the requested style")

    @classmethod
    def from_rut(cls, rut: Rut, style: Style = Style.COMPLETE) -> "ParsedRut":
        return cls(
            body=rut.body,
            check=rut.check,
            valid=rut.is_valid(),
            formatted=rut.render(style),
        )
