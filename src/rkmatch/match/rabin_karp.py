"""Single-chunk Rabin-Karp matching.

The query chunk is hashed once and the target window hash is rolled across
the target. A hash hit is confirmed by comparing the bytes, so hash
collisions never turn into false matches.
"""
from __future__ import annotations

import logging
from itertools import islice
from typing import List, Optional, Tuple

from rkmatch.config import HashConfig
from rkmatch.exceptions import ConfigError
from rkmatch.hashing.rolling import hash_window, rolling_init_from_config, window_hashes
from rkmatch.match.chunks import iter_chunks, validate_chunk_size
from rkmatch.types import MatchResult

logger = logging.getLogger(__name__)


def rabin_karp_match(chunk: bytes, target: bytes, cfg: Optional[HashConfig] = None) -> bool:
    """True if ``chunk`` occurs somewhere in ``target``."""
    cfg = cfg or HashConfig()
    k = len(chunk)
    chunk_hash = hash_window(rolling_init_from_config(k, cfg), chunk)
    state = rolling_init_from_config(k, cfg)
    collisions = 0
    for offset, h in enumerate(window_hashes(state, target)):
        if h != chunk_hash:
            continue
        if target[offset:offset + k] == chunk:
            return True
        collisions += 1
    if collisions:
        logger.debug("%d hash collisions rejected by byte comparison", collisions)
    return False


def rabin_karp_chunks(
    query: bytes,
    target: bytes,
    k: int,
    cfg: Optional[HashConfig] = None,
) -> MatchResult:
    validate_chunk_size(k, query, target)
    hits = [rabin_karp_match(chunk, target, cfg) for _, chunk in iter_chunks(query, k)]
    return MatchResult(matched=sum(hits), total=len(hits), chunk_hits=hits)


def trace_hashes(
    chunk: bytes,
    target: bytes,
    cfg: Optional[HashConfig] = None,
    count: int = 5,
) -> Tuple[int, List[int]]:
    """The chunk's hash and the first ``count`` window hashes of ``target``."""
    if count < 0:
        raise ConfigError(f"hash trace count must be non-negative, got {count}")
    cfg = cfg or HashConfig()
    k = len(chunk)
    chunk_hash = hash_window(rolling_init_from_config(k, cfg), chunk)
    state = rolling_init_from_config(k, cfg)
    return chunk_hash, list(islice(window_hashes(state, target), count))
