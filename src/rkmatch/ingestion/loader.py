"""Read documents into memory and normalize them for chunk matching."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from rkmatch.exceptions import ResourceError

logger = logging.getLogger(__name__)

_WS_RUN = re.compile(rb"\s+")


def read_document(path: str | os.PathLike) -> bytes:
    """Read the whole file, failing on open/stat errors or a short read."""
    p = Path(path)
    try:
        with p.open("rb") as f:
            size = os.fstat(f.fileno()).st_size
            data = f.read()
    except OSError as exc:
        raise ResourceError(f"cannot read {p}: {exc.strerror or exc}") from exc
    if len(data) != size:
        raise ResourceError(f"short read on {p}: got {len(data)} of {size} bytes")
    logger.debug("read %s (%d bytes)", p, size)
    return data


def normalize(data: bytes) -> bytes:
    """Lower-case ASCII letters, squeeze whitespace runs to one space, trim the ends."""
    return _WS_RUN.sub(b" ", data.lower()).strip()


def load_normalized(path: str | os.PathLike) -> bytes:
    data = normalize(read_document(path))
    logger.debug("normalized %s to %d bytes", path, len(data))
    return data
