"""Disassembler configuration."""

import json
from typing import Literal

from pydantic import BaseModel, Field

from octadis.constants import PROGRAM_START


class DisassemblerConfig(BaseModel):
    base_address: int = Field(default=PROGRAM_START, ge=0, le=0xFFFF)
    style: Literal["compat", "uppercase"] = "compat"
    trailing_byte: Literal["truncate", "pad"] = "truncate"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    progress: bool = False

    @classmethod
    def from_file(cls, path: str, **overrides) -> "DisassemblerConfig":
        """Load a JSON config file, then apply non-None overrides on top."""
        with open(path, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must hold a JSON object, got {type(data).__name__}")
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump()
