"""Naive substring search, one full scan per query chunk."""
from __future__ import annotations

from rkmatch.match.chunks import iter_chunks, validate_chunk_size
from rkmatch.types import MatchResult


def simple_substr_match(pattern: bytes, text: bytes) -> bool:
    k = len(pattern)
    for i in range(len(text) - k + 1):
        for j in range(k):
            if text[i + j] != pattern[j]:
                break
        else:
            return True
    return False


def naive_chunks(query: bytes, target: bytes, k: int) -> MatchResult:
    validate_chunk_size(k, query, target)
    hits = [simple_substr_match(chunk, target) for _, chunk in iter_chunks(query, k)]
    return MatchResult(matched=sum(hits), total=len(hits), chunk_hits=hits)
