"""Pack and unpack pipelines.

unpack: container decode -> key derivation -> AES decrypt -> zlib inflate
        -> BOM strip -> JSON parse -> pretty print
pack:   BOM strip -> JSON parse -> compact print -> zlib deflate
        -> key derivation -> AES encrypt -> container encode

The byte-level functions are pure; the path-level functions read the whole
input, run the pipeline in memory and write the output only once every stage
has succeeded.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import cipher, compression, container, jsonnorm
from .config import CodecConfig
from .fs import PathLike, atomic_write_bytes, check_distinct, read_bytes
from .kdf import derive_for
from .salt import SaltProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerInfo:
    """Metadata of a packed save, readable without decrypting it."""

    path: Path
    size: int
    header: bytes
    version: int
    salt: bytes
    ciphertext_size: int

    @property
    def header_is_zero(self) -> bool:
        return not any(self.header)

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "size": self.size,
            "header": self.header.hex(),
            "header_is_zero": self.header_is_zero,
            "version": self.version,
            "salt": self.salt.hex(),
            "ciphertext_size": self.ciphertext_size,
        }


def pack_bytes(
    json_bytes: bytes,
    *,
    config: Optional[CodecConfig] = None,
    salt_provider: Optional[SaltProvider] = None,
    header: Optional[bytes] = None,
) -> bytes:
    """Turn JSON text into a packed save.

    The header defaults to all zeros; pass the header of an existing save to
    keep it.
    """
    config = config or CodecConfig.default()
    salt_provider = salt_provider or SaltProvider()
    if header is None:
        header = container.zero_header(config)

    salt = salt_provider.salt(config.salt_size)
    value = jsonnorm.parse(jsonnorm.strip_bom(json_bytes))
    compact = jsonnorm.serialize_compact(value)
    logger.debug("Minified JSON: %d -> %d bytes", len(json_bytes), len(compact))

    deflated = compression.compress(compact, config.compression_level)
    logger.debug("Compressed payload: %d bytes (level %d)", len(deflated), config.compression_level)

    material = derive_for(salt, config)
    encrypted = cipher.encrypt(material.key, material.iv, deflated)
    logger.debug("Encrypted payload: %d bytes", len(encrypted))

    return container.encode(header, config.format_version, salt, encrypted, config)


def unpack_bytes(save_bytes: bytes, *, config: Optional[CodecConfig] = None) -> bytes:
    """Turn a packed save into pretty-printed UTF-8 JSON."""
    config = config or CodecConfig.default()
    save = container.decode(save_bytes, config)

    material = derive_for(save.salt, config)
    deflated = cipher.decrypt(material.key, material.iv, save.ciphertext)
    logger.debug("Decrypted payload: %d bytes", len(deflated))

    raw = compression.decompress(deflated)
    logger.debug("Decompressed payload: %d bytes", len(raw))

    value = jsonnorm.parse(jsonnorm.strip_bom(raw))
    return jsonnorm.serialize_pretty(value, indent=config.pretty_indent)


def read_header(path: PathLike, *, config: Optional[CodecConfig] = None) -> bytes:
    """Return the header block of an existing packed save."""
    config = config or CodecConfig.default()
    return container.decode(read_bytes(Path(path)), config).header


def pack(
    input_path: PathLike,
    output_path: PathLike,
    *,
    config: Optional[CodecConfig] = None,
    salt_provider: Optional[SaltProvider] = None,
    header: Optional[bytes] = None,
) -> Path:
    """Pack the JSON file at input_path into a save file at output_path."""
    check_distinct(input_path, output_path)
    source, target = Path(input_path), Path(output_path)

    packed = pack_bytes(read_bytes(source), config=config, salt_provider=salt_provider, header=header)
    atomic_write_bytes(target, packed)
    logger.info("Packed %s -> %s (%d bytes)", source, target, len(packed))
    return target


def unpack(
    input_path: PathLike,
    output_path: PathLike,
    *,
    config: Optional[CodecConfig] = None,
) -> Path:
    """Unpack the save file at input_path into pretty JSON at output_path."""
    check_distinct(input_path, output_path)
    source, target = Path(input_path), Path(output_path)

    text = unpack_bytes(read_bytes(source), config=config)
    atomic_write_bytes(target, text)
    logger.info("Unpacked %s -> %s (%d bytes)", source, target, len(text))
    return target


def inspect(input_path: PathLike, *, config: Optional[CodecConfig] = None) -> ContainerInfo:
    config = config or CodecConfig.default()
    source = Path(input_path)
    data = read_bytes(source)
    save = container.decode(data, config)
    return ContainerInfo(
        path=source,
        size=len(data),
        header=save.header,
        version=save.version,
        salt=save.salt,
        ciphertext_size=len(save.ciphertext),
    )
