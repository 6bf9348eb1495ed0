"""Command line entry point.

Match every k-byte chunk of a query document against one or more target
documents::

    rkmatch -t 3 -k 20 query.txt doc1.txt [doc2.txt ...]

Algorithms: 0 exact, 1 naive substring, 2 Rabin-Karp, 3 Rabin-Karp batch
with a Bloom filter.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from rkmatch.config import MatchConfig, load_config
from rkmatch.exceptions import ConfigError, RKMatchError
from rkmatch.ingestion.loader import load_normalized
from rkmatch.match.batch import batch_match
from rkmatch.match.chunks import iter_chunks, validate_chunk_size
from rkmatch.match.exact import exact_match
from rkmatch.match.naive import naive_chunks
from rkmatch.match.rabin_karp import rabin_karp_chunks, trace_hashes
from rkmatch.types import Algorithm

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="rkmatch",
        description="Match k-byte chunks of a query document against target documents",
    )
    parser.add_argument("-t", dest="algorithm", type=int, default=int(Algorithm.SIMPLE),
                        help="0 exact, 1 naive, 2 rabin-karp, 3 rabin-karp batch (default 1)")
    parser.add_argument("-k", dest="chunk_size", type=int, default=20,
                        help="Chunk size in bytes (default 20)")
    parser.add_argument("-q", dest="modulus", type=int, default=None,
                        help="Prime modulus for the rolling hash")
    parser.add_argument("--verify", action="store_true",
                        help="Confirm batch filter hits against the query chunks")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("query", help="Query document")
    parser.add_argument("targets", nargs="+", metavar="target", help="Document(s) to match against")
    return parser


def _config_from_args(args: argparse.Namespace) -> MatchConfig:
    if args.algorithm not in set(Algorithm):
        raise ConfigError(f"wrong algorithm type {args.algorithm}, choose from 0 1 2 3")
    overrides = {
        "chunk_size": args.chunk_size,
        "algorithm": args.algorithm,
        "verify": args.verify,
    }
    if args.modulus is not None:
        overrides["hash"] = {"modulus": args.modulus}
    return load_config(**overrides)


def run_one(query: bytes, target: bytes, cfg: MatchConfig) -> List[str]:
    """Report lines for one (query, target) pair."""
    k = cfg.chunk_size
    algo = cfg.algorithm

    if algo == Algorithm.EXACT:
        return ["Exact match" if exact_match(query, target) else "Not an exact match"]

    if algo == Algorithm.SIMPLE:
        return [naive_chunks(query, target, k).report_line()]

    if algo == Algorithm.RK:
        result = rabin_karp_chunks(query, target, k, cfg.hash)
        lines: List[str] = []
        for _, chunk in iter_chunks(query, k):
            chunk_hash, window = trace_hashes(chunk, target, cfg.hash, cfg.print_hashes)
            lines.append(str(chunk_hash))
            lines.append(" ".join(str(h) for h in window))
        lines.append(result.report_line())
        return lines

    result = batch_match(query, target, k, cfg)
    return [result.bloom.debug_dump(cfg.bloom.dump_bits), result.report_line()]


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        cfg = _config_from_args(args)
        logger.debug("config: %s", cfg.model_dump())

        query = load_normalized(args.query)
        targets = [(path, load_normalized(path)) for path in args.targets]
        if cfg.algorithm != Algorithm.EXACT:
            for _, target in targets:
                validate_chunk_size(cfg.chunk_size, query, target)

        blocks: List[List[str]] = []
        for path, target in targets:
            lines = run_one(query, target, cfg)
            if len(targets) > 1:
                lines.insert(0, f"== {path} ==")
            blocks.append(lines)
        for lines in blocks:
            for line in lines:
                print(line)
    except RKMatchError as exc:
        logger.debug("aborting", exc_info=True)
        print(f"rkmatch: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
