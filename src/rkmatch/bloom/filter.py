"""
Bloom filter over Rabin-Karp hash values.

The bitmap is a flat bytearray packed big-endian: bit 0 is the most
significant bit of byte 0, bit 9 is the second bit of byte 1.
Each key sets ``hash_fan_out`` bits derived from two auxiliary moduli.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Tuple

import numpy as np

from rkmatch.exceptions import ConfigError

H1_PRIME = 4189793
H2_PRIME = 3296731
DEFAULT_FAN_OUT = 10


def derive_index(i: int, key: int, bit_count: int) -> int:
    """The i-th bit index for ``key``, always inside ``[0, bit_count)``."""
    return ((key % H1_PRIME) + i * (key % H2_PRIME) + 1 + i * i) % bit_count


def filter_size_for(chunk_count: int, bits_per_chunk: int = 10) -> int:
    """Bitmap size for ``chunk_count`` keys, rounded down to a whole byte (min 8)."""
    return max(8, (bits_per_chunk * chunk_count) // 8 * 8)


def theoretical_false_positive_rate(bit_count: int, n_keys: int, hash_fan_out: int = DEFAULT_FAN_OUT) -> float:
    """(1 - e^(-h*n/m))^h"""
    return (1.0 - math.exp(-hash_fan_out * n_keys / bit_count)) ** hash_fan_out


def _bit_position(index: int) -> Tuple[int, int]:
    return index >> 3, 0x80 >> (index & 7)


@dataclass
class BloomFilter:
    bit_count: int
    hash_fan_out: int = DEFAULT_FAN_OUT
    bits: bytearray = field(init=False, repr=False)

    def __post_init__(self):
        if self.bit_count <= 0 or self.bit_count % 8 != 0:
            raise ConfigError(
                f"bloom filter size must be a positive multiple of 8, got {self.bit_count}"
            )
        if self.hash_fan_out < 1:
            raise ConfigError(f"hash fan-out must be positive, got {self.hash_fan_out}")
        self.bits = bytearray(self.bit_count // 8)

    @classmethod
    def create(cls, bit_count: int, hash_fan_out: int = DEFAULT_FAN_OUT) -> "BloomFilter":
        return cls(bit_count=bit_count, hash_fan_out=hash_fan_out)

    def _indices(self, key: int) -> Iterable[int]:
        for i in range(self.hash_fan_out):
            yield derive_index(i, key, self.bit_count)

    def add(self, key: int) -> None:
        for idx in self._indices(key):
            byte, mask = _bit_position(idx)
            self.bits[byte] |= mask

    def query(self, key: int) -> bool:
        """True if ``key`` may have been added; never false for an added key."""
        for idx in self._indices(key):
            byte, mask = _bit_position(idx)
            if not self.bits[byte] & mask:
                return False
        return True

    def __contains__(self, key: int) -> bool:
        return self.query(key)

    def query_many(self, keys) -> np.ndarray:
        """Vectorized :meth:`query` over an array of non-negative int64 keys."""
        keys = np.asarray(keys, dtype=np.int64)
        flat = np.unpackbits(np.frombuffer(self.bits, dtype=np.uint8)).astype(bool)
        k1 = keys % H1_PRIME
        k2 = keys % H2_PRIME
        hits = np.ones(keys.shape, dtype=bool)
        for i in range(self.hash_fan_out):
            hits &= flat[(k1 + i * k2 + 1 + i * i) % self.bit_count]
        return hits

    def popcount(self) -> int:
        return sum(bin(b).count("1") for b in self.bits)

    @property
    def fill_ratio(self) -> float:
        return self.popcount() / self.bit_count

    def expected_false_positive_rate(self, n_keys: int) -> float:
        return theoretical_false_positive_rate(self.bit_count, n_keys, self.hash_fan_out)

    def debug_dump(self, count_bits: int) -> str:
        """First ``count_bits`` bits as hex bytes, e.g. ``"00 04 10"``."""
        if count_bits < 0 or count_bits % 8 != 0:
            raise ConfigError(f"dump size must be a non-negative multiple of 8, got {count_bits}")
        n_bytes = min(self.bit_count, count_bits) // 8
        return " ".join(f"{b:02x}" for b in self.bits[:n_bytes])
