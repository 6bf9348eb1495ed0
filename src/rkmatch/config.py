"""rkmatch configuration.

Everything the matchers need is threaded through a :class:`MatchConfig`
instance; there is no process-wide modulus.

Example::

    cfg = load_config(chunk_size=20, algorithm=3, hash={"modulus": 1000003})
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from rkmatch.exceptions import ConfigError
from rkmatch.types import Algorithm

# a large prime for the RK hash (DEFAULT_MODULUS * 256 does not overflow int64)
DEFAULT_MODULUS = 5003943032159437
DEFAULT_BASE = 256
INT64_LIMIT = 1 << 63


class HashConfig(BaseModel):
    base: int = DEFAULT_BASE
    modulus: int = Field(
        default_factory=lambda: os.environ.get("RKMATCH_MODULUS", DEFAULT_MODULUS),
        validate_default=True,
    )

    @model_validator(mode="after")
    def _check_width(self) -> "HashConfig":
        if self.base < 2:
            raise ValueError(f"hash base must be >= 2, got {self.base}")
        if self.modulus < 2:
            raise ValueError(f"hash modulus must be >= 2, got {self.modulus}")
        if self.modulus * self.base >= INT64_LIMIT:
            raise ValueError(
                f"modulus {self.modulus} * base {self.base} does not fit in 64 bits"
            )
        return self


class BloomConfig(BaseModel):
    hash_fan_out: int = Field(default=10, ge=1)
    bits_per_chunk: int = Field(default=10, ge=1)
    dump_bits: int = Field(default=160, ge=0)

    @field_validator("dump_bits")
    @classmethod
    def _whole_bytes(cls, v: int) -> int:
        if v % 8 != 0:
            raise ValueError(f"dump_bits must be a multiple of 8, got {v}")
        return v


class MatchConfig(BaseModel):
    chunk_size: int = 20
    algorithm: Algorithm = Algorithm.SIMPLE
    print_hashes: int = Field(default=5, ge=0)
    verify: bool = False
    hash: HashConfig = Field(default_factory=HashConfig)
    bloom: BloomConfig = Field(default_factory=BloomConfig)


def load_config(**overrides: Any) -> MatchConfig:
    """Build a MatchConfig, reporting validation problems as ConfigError."""
    try:
        return MatchConfig(**overrides)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
