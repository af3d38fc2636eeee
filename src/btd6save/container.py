"""Byte layout of a packed save.

A packed save is a fixed prefix followed by the ciphertext::

    offset 0   44 bytes  header (opaque, kept verbatim)
    offset 44   8 bytes  format version, unsigned integer
    offset 52  24 bytes  PBKDF2 salt
    offset 76   N bytes  AES-128-CBC ciphertext

Sizes and the version byte order come from :class:`CodecConfig`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import CodecConfig
from .errors import TruncatedInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveContainer:
    header: bytes
    version_bytes: bytes
    salt: bytes
    ciphertext: bytes
    byteorder: str = "little"

    @property
    def version(self) -> int:
        return int.from_bytes(self.version_bytes, self.byteorder, signed=False)

    def to_bytes(self) -> bytes:
        return self.header + self.version_bytes + self.salt + self.ciphertext


def zero_header(config: Optional[CodecConfig] = None) -> bytes:
    config = config or CodecConfig.default()
    return bytes(config.header_size)


def encode_version(version: int, config: Optional[CodecConfig] = None) -> bytes:
    config = config or CodecConfig.default()
    return version.to_bytes(config.version_size, config.version_byteorder, signed=False)


def decode(data: bytes, config: Optional[CodecConfig] = None) -> SaveContainer:
    """Split a packed save into header, version, salt and ciphertext.

    Raises TruncatedInputError if the fixed prefix is incomplete. The
    ciphertext may be empty here; the cipher stage rejects it.
    """
    config = config or CodecConfig.default()
    if len(data) < config.prefix_size:
        raise TruncatedInputError(
            f"Save is {len(data)} bytes; expected at least {config.prefix_size} "
            f"({config.header_size} header + {config.version_size} version + {config.salt_size} salt)"
        )

    version_at = config.header_size
    salt_at = version_at + config.version_size
    cipher_at = salt_at + config.salt_size
    container = SaveContainer(
        header=bytes(data[:version_at]),
        version_bytes=bytes(data[version_at:salt_at]),
        salt=bytes(data[salt_at:cipher_at]),
        ciphertext=bytes(data[cipher_at:]),
        byteorder=config.version_byteorder,
    )
    if container.version != config.format_version:
        logger.warning(
            "Unexpected save format version %d (expected %d)",
            container.version,
            config.format_version,
        )
    logger.debug(
        "Decoded container: version=%d ciphertext=%d bytes",
        container.version,
        len(container.ciphertext),
    )
    return container


def encode(
    header: bytes,
    version: int,
    salt: bytes,
    ciphertext: bytes,
    config: Optional[CodecConfig] = None,
) -> bytes:
    """Concatenate the container fields in file order, without padding."""
    config = config or CodecConfig.default()
    if len(header) != config.header_size:
        raise ValueError(f"header must be {config.header_size} bytes, got {len(header)}")
    if len(salt) != config.salt_size:
        raise ValueError(f"salt must be {config.salt_size} bytes, got {len(salt)}")
    return SaveContainer(
        header=bytes(header),
        version_bytes=encode_version(version, config),
        salt=bytes(salt),
        ciphertext=bytes(ciphertext),
        byteorder=config.version_byteorder,
    ).to_bytes()
