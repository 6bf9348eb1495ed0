"""Batch chunk matching with a Bloom filter.

All non-overlapping query chunks are hashed into one filter, then a single
rolling-hash pass over the target tests every window against it. Without
verification the result counts *target windows* that hit the filter: it
over-counts repeated content and includes false positives, so it is an
overlap indicator rather than an exact chunk count. ``verify=True`` confirms
each hit against the query chunk bytes and counts query chunks instead.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Set

import numpy as np

from rkmatch.bloom.filter import BloomFilter, filter_size_for
from rkmatch.config import MatchConfig
from rkmatch.hashing.rolling import hash_window, rolling_init_from_config, window_hashes
from rkmatch.match.chunks import chunk_count, iter_chunks, validate_chunk_size
from rkmatch.types import MatchResult

logger = logging.getLogger(__name__)


@dataclass
class BatchMatchResult(MatchResult):
    bloom: Optional[BloomFilter] = None
    windows: int = 0


def batch_match(
    query: bytes,
    target: bytes,
    k: Optional[int] = None,
    cfg: Optional[MatchConfig] = None,
    verify: Optional[bool] = None,
) -> BatchMatchResult:
    """Without an explicit ``k`` the chunk size comes from ``cfg.chunk_size``."""
    cfg = cfg or MatchConfig()
    if k is None:
        k = cfg.chunk_size
    if verify is None:
        verify = cfg.verify
    validate_chunk_size(k, query, target)

    n_chunks = chunk_count(query, k)
    bloom = BloomFilter.create(
        filter_size_for(n_chunks, cfg.bloom.bits_per_chunk),
        hash_fan_out=cfg.bloom.hash_fan_out,
    )
    query_state = rolling_init_from_config(k, cfg.hash)
    by_hash: Dict[int, Set[bytes]] = {}
    for _, chunk in iter_chunks(query, k):
        h = hash_window(query_state, chunk)
        bloom.add(h)
        if verify:
            by_hash.setdefault(h, set()).add(chunk)
    logger.debug(
        "bloom: %d chunks into %d bits (fill %.3f, expected fp %.2e)",
        n_chunks, bloom.bit_count, bloom.fill_ratio,
        bloom.expected_false_positive_rate(n_chunks),
    )

    n_windows = len(target) - k + 1
    target_state = rolling_init_from_config(k, cfg.hash)
    hashes = np.fromiter(window_hashes(target_state, target), dtype=np.int64, count=n_windows)
    hits = bloom.query_many(hashes)
    logger.debug("%d of %d target windows hit the filter", int(hits.sum()), n_windows)

    if not verify:
        return BatchMatchResult(
            matched=int(np.count_nonzero(hits)),
            total=n_chunks,
            bloom=bloom,
            windows=n_windows,
        )

    found: Set[bytes] = set()
    for offset in np.flatnonzero(hits):
        window = target[offset:offset + k]
        if window in by_hash.get(int(hashes[offset]), ()):
            found.add(window)
    chunk_hits = [chunk in found for _, chunk in iter_chunks(query, k)]
    return BatchMatchResult(
        matched=sum(chunk_hits),
        total=n_chunks,
        chunk_hits=chunk_hits,
        bloom=bloom,
        windows=n_windows,
    )
