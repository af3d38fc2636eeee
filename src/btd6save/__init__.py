"""
BTD6 save file tool.

Converts encrypted save containers into editable JSON and back:
- Container layout (header, format version, salt, ciphertext)
- PBKDF2-HMAC-SHA1 key derivation
- AES-128-CBC with PKCS#7 padding
- zlib compression
- JSON normalization (BOM stripping, compact vs. pretty output)

The command line front end lives in ``btd6save.cli``.
"""
from importlib.metadata import version, PackageNotFoundError

from .codec import ContainerInfo, inspect, pack, pack_bytes, unpack, unpack_bytes
from .config import CodecConfig
from .errors import (
    SaveToolError,
    SamePathError,
    SaveIOError,
    TruncatedInputError,
    CorruptCiphertextError,
    InvalidPaddingError,
    CorruptStreamError,
    InvalidJsonError,
    ConfigError,
)
from .salt import SaltProvider

try:
    __version__ = version("btd6save")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ContainerInfo",
    "CodecConfig",
    "SaltProvider",
    "inspect",
    "pack",
    "pack_bytes",
    "unpack",
    "unpack_bytes",
    "SaveToolError",
    "SamePathError",
    "SaveIOError",
    "TruncatedInputError",
    "CorruptCiphertextError",
    "InvalidPaddingError",
    "CorruptStreamError",
    "InvalidJsonError",
    "ConfigError",
]
