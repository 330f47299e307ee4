from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CountAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    count: int = Field(ge=0)
    weight: float = 1.0


class NotCountAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    not_count: int = Field(ge=0)
    weight: float = 1.0


Assertion = CountAssertion | NotCountAssertion


class CheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    assertions: list[Assertion]
    verbose: bool = False
    debug_log: str | None = None

    @field_validator("assertions")
    @classmethod
    def assertions_must_not_be_empty(cls, v: list[Assertion]) -> list[Assertion]:
        if not v:
            raise ValueError("assertions must not be empty")
        return v


def load_config(path: Path) -> CheckConfig:
    """Load and validate a size-check config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = CheckConfig(**raw)

    # Resolve a relative debug log path against the config file location
    if config.debug_log is not None:
        log_path = Path(config.debug_log)
        if not log_path.is_absolute():
            config.debug_log = str((config_dir / log_path).resolve())

    return config
