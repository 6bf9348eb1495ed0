#!/usr/bin/env python3
"""Time the four matching algorithms on synthetic documents.

The query is built from chunks of the target with a fraction of them
replaced by random bytes, so roughly ``1 - MUTATE`` of the chunks match.
Times are reported in microseconds.
"""
import os
import random
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from rkmatch.config import MatchConfig
from rkmatch.match import batch_match, exact_match, naive_chunks, rabin_karp_chunks

TARGET_KB = 16
K = 20
MUTATE = 0.3
ALPHABET = b"abcdefghijklmnopqrstuvwxyz "


def generate(seed: int = 7):
    rng = random.Random(seed)
    target = bytes(rng.choice(ALPHABET) for _ in range(TARGET_KB * 1024))
    query = bytearray()
    for off in range(0, len(target) // 4 - K + 1, K):
        if rng.random() < MUTATE:
            query += bytes(rng.choice(ALPHABET) for _ in range(K))
        else:
            start = rng.randrange(0, len(target) - K)
            query += target[start:start + K]
    return bytes(query), target


def timed(fn, *args, **kwargs):
    t0 = time.perf_counter()
    out = fn(*args, **kwargs)
    return out, int((time.perf_counter() - t0) * 1_000_000)


def main():
    query, target = generate()
    cfg = MatchConfig(chunk_size=K)
    print("=" * 72)
    print(f" query {len(query)} bytes, target {len(target)} bytes, k={K}")
    print("=" * 72)

    same, us = timed(exact_match, query, target)
    print(f"  {'exact':<14} {us:>10} us   equal={same}")

    for name, fn, extra in [
        ("naive", naive_chunks, ()),
        ("rabin-karp", rabin_karp_chunks, (cfg.hash,)),
        ("batch", batch_match, (cfg,)),
    ]:
        result, us = timed(fn, query, target, K, *extra)
        print(f"  {name:<14} {us:>10} us   {result.report_line()}")

    result, us = timed(batch_match, query, target, K, cfg, verify=True)
    print(f"  {'batch+verify':<14} {us:>10} us   {result.report_line()}")


if __name__ == "__main__":
    main()
