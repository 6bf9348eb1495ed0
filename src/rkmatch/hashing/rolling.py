"""Rabin-Karp rolling hash over a sliding k-byte window.

The hash of a window ``w`` is the polynomial
``sum(w[i] * base**(k-1-i)) mod modulus``. Sliding the window one byte to the
right costs O(1) regardless of ``k``: the outgoing byte's term is removed,
the rest is shifted by one power of ``base`` and the incoming byte added.

Equal hashes are only candidate matches. Callers that need exact answers
must compare the bytes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from rkmatch.config import DEFAULT_BASE, DEFAULT_MODULUS, INT64_LIMIT, HashConfig
from rkmatch.exceptions import ConfigError
from rkmatch.hashing.modular import mod_add, mod_mul, mod_sub


@dataclass
class RollingHashState:
    base: int
    modulus: int
    k: int
    base_pow_k_minus_1: int
    value: int = 0


def rolling_init(
    k: int,
    base: int = DEFAULT_BASE,
    modulus: int = DEFAULT_MODULUS,
) -> RollingHashState:
    """Create a hash state for windows of ``k`` bytes with ``value = 0``."""
    if k <= 0:
        raise ConfigError(f"chunk size must be positive, got {k}")
    if base < 2 or modulus < 2:
        raise ConfigError(f"invalid hash parameters base={base} modulus={modulus}")
    if modulus * base >= INT64_LIMIT:
        raise ConfigError(f"modulus {modulus} * base {base} does not fit in 64 bits")
    return RollingHashState(
        base=base,
        modulus=modulus,
        k=k,
        base_pow_k_minus_1=pow(base, k - 1, modulus),
    )


def rolling_init_from_config(k: int, cfg: HashConfig) -> RollingHashState:
    return rolling_init(k, base=cfg.base, modulus=cfg.modulus)


def hash_window(state: RollingHashState, window: bytes) -> int:
    """Hash exactly ``k`` bytes from scratch (Horner's method)."""
    if len(window) != state.k:
        raise ValueError(f"window must be {state.k} bytes, got {len(window)}")
    m = state.modulus
    value = 0
    for byte in window:
        value = mod_add(mod_mul(value, state.base, m), byte % m, m)
    state.value = value
    return value


def roll(state: RollingHashState, outgoing: int, incoming: int) -> int:
    """Advance the window by one byte and return the new hash."""
    m = state.modulus
    value = mod_sub(state.value, mod_mul(outgoing, state.base_pow_k_minus_1, m), m)
    value = mod_mul(value, state.base, m)
    value = mod_add(value, incoming % m, m)
    state.value = value
    return value


def window_hashes(state: RollingHashState, data: bytes) -> Iterator[int]:
    """Yield the hash of every k-byte window of ``data``, offsets 0..n-k."""
    k = state.k
    n = len(data)
    if n < k:
        return
    yield hash_window(state, data[:k])
    for i in range(n - k):
        yield roll(state, data[i], data[i + k])
