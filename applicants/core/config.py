"""Configuration models and YAML loader for the applicant ranking tool."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


class InputConfig(BaseModel):
    """How the submissions file is read."""

    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def encoding_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "encoding must not be empty"
            raise ValueError(msg)
        return v.strip()


class OutputConfig(BaseModel):
    """Where the JSON report is written."""

    path: str = "output.json"
    encoding: str = "utf-8"

    @field_validator("path")
    @classmethod
    def path_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "output path must not be empty"
            raise ValueError(msg)
        return v.strip()


class Settings(BaseModel):
    """Top-level settings, optionally loaded from YAML."""

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
