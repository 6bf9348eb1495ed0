"""Core data types for rkmatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class Algorithm(IntEnum):
    EXACT = 0
    SIMPLE = 1
    RK = 2
    RKBATCH = 3


@dataclass
class MatchResult:
    """Matched chunk count out of the chunks attempted."""
    matched: int
    total: int
    chunk_hits: List[bool] = field(default_factory=list)

    @property
    def ratio(self) -> float:
        if self.total == 0:
            return 0.0
        return self.matched / self.total

    def report_line(self) -> str:
        return (
            f"{self.matched} chunks matched (out of {self.total}), "
            f"percentage: {self.ratio:.2f}"
        )
