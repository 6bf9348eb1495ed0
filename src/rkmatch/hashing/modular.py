"""Modular arithmetic for the rolling hash.

Every helper expects operands already reduced into ``[0, m)`` and returns a
value in ``[0, m)``. Python integers never overflow, but the hash values are
also fed to numpy ``int64`` arrays, so callers must keep ``m * 256 < 2**63``
(checked by :func:`rkmatch.hashing.rolling.rolling_init`).
"""
from __future__ import annotations


def mod_add(a: int, b: int, m: int) -> int:
    s = a + b
    return s - m if s >= m else s


def mod_sub(a: int, b: int, m: int) -> int:
    """a - b mod m, adding m back instead of going negative."""
    return a - b if a >= b else a + m - b


def mod_mul(a: int, b: int, m: int) -> int:
    return (a * b) % m
