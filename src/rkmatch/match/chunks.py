"""Non-overlapping query chunks."""
from __future__ import annotations

from typing import Iterator, Tuple

from rkmatch.exceptions import ConfigError


def chunk_count(data: bytes, k: int) -> int:
    return len(data) // k


def iter_chunks(data: bytes, k: int) -> Iterator[Tuple[int, bytes]]:
    """Yield (offset, chunk) for every whole k-byte chunk, stride k."""
    for offset in range(0, len(data) - k + 1, k):
        yield offset, data[offset:offset + k]


def validate_chunk_size(k: int, query: bytes, target: bytes) -> None:
    if k <= 0:
        raise ConfigError(f"chunk size must be positive, got {k}")
    if k > len(query):
        raise ConfigError(f"chunk size {k} exceeds query length {len(query)}")
    if k > len(target):
        raise ConfigError(f"chunk size {k} exceeds target length {len(target)}")
