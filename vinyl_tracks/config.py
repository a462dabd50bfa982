from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .meta_keys import POSITION, SIDE, TRACKNAME_POSITION, TRACKNUMBER, TRACKTOTAL


class ResolverSettings(BaseModel):
    standard_fields: List[str] = Field(default_factory=lambda: [TRACKNUMBER])
    vinyl_fields: List[str] = Field(
        default_factory=lambda: [TRACKNAME_POSITION, POSITION, SIDE, TRACKTOTAL, TRACKNUMBER]
    )
    # Vinyl fields where a bare number is also a position; elsewhere only side labels count.
    numeric_vinyl_fields: List[str] = Field(default_factory=lambda: [TRACKNUMBER])
    filename_fallback: bool = True

    @field_validator("standard_fields", "vinyl_fields", "numeric_vinyl_fields", mode="before")
    @classmethod
    def _normalize_fields(cls, values: List[str]) -> List[str]:
        if values is None:
            return []
        if isinstance(values, str):
            values = [values]
        normalized = []
        for value in values:
            name = str(value).strip().upper()
            if not name:
                raise ValueError("field names must not be empty")
            normalized.append(name)
        return normalized


class Settings(BaseModel):
    resolver: ResolverSettings = ResolverSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Path:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "config.yaml", cwd / "config.yml"):
        if candidate.exists():
            return candidate
    raise FileNotFoundError("Could not find config.yaml - pass the path explicitly.")
