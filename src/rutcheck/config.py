from __future__ import annotations

from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field

from .formatter import Style


# ---- Output defaults (used by the CLI when flags are omitted) ----
class OutputConfig(BaseModel):
    style: Style = Style.COMPLETE
    as_json: bool = False  # emit ParsedRut JSON from `parse`


# ---- Root config ----
class RutcheckConfig(BaseModel):
    output: OutputConfig = Field(default_factory=OutputConfig)


# ---- Loader ----
def load_config(path: Optional[Path]) -> RutcheckConfig:
    if not path:
        return RutcheckConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return RutcheckConfig(**data)
