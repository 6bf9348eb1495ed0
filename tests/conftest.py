from __future__ import annotations

import random

import pytest

from rkmatch.config import HashConfig, MatchConfig


@pytest.fixture
def zeros40() -> bytes:
    return bytes(40)


@pytest.fixture
def prose() -> bytes:
    return (
        b"the quick brown fox jumps over the lazy dog while the cat sleeps "
        b"on the warm windowsill and the bird sings a song about summer rain"
    )


@pytest.fixture
def random_buffer() -> bytes:
    rng = random.Random(1234)
    return bytes(rng.randrange(256) for _ in range(2000))


@pytest.fixture
def tiny_modulus() -> HashConfig:
    """A modulus small enough that unrelated windows collide constantly."""
    return HashConfig(modulus=7)


@pytest.fixture
def cfg() -> MatchConfig:
    return MatchConfig()


@pytest.fixture
def write_doc(tmp_path):
    def _write(name: str, data: bytes):
        p = tmp_path / name
        p.write_bytes(data)
        return p
    return _write
