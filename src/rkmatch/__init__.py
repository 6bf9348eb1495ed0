"""Chunk matching with Rabin-Karp rolling hashes and Bloom filters."""

from rkmatch.exceptions import ConfigError, RKMatchError, ResourceError
from rkmatch.types import Algorithm, MatchResult

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "ConfigError",
    "MatchResult",
    "RKMatchError",
    "ResourceError",
]
