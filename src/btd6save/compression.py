from __future__ import annotations

import zlib

from .errors import CorruptStreamError

DEFAULT_LEVEL = 3


def compress(data: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    """zlib-compress data (2-byte header, deflate stream, Adler-32 trailer)."""
    if not -1 <= level <= 9:
        raise ValueError(f"Compression level must be in -1..9, got {level}")
    return zlib.compress(data, level)


def decompress(data: bytes) -> bytes:
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise CorruptStreamError(f"Payload is not a valid zlib stream: {e}") from e
