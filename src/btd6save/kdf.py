from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from Crypto.Hash import SHA1
from Crypto.Protocol.KDF import PBKDF2

from .config import CodecConfig

BLOCK_SIZE = 16
DERIVED_SIZE = 2 * BLOCK_SIZE


@dataclass(frozen=True)
class DerivedKeyMaterial:
    key: bytes
    iv: bytes

    def __repr__(self) -> str:
        return "DerivedKeyMaterial(key=<hidden>, iv=<hidden>)"


def derive(password: bytes, salt: bytes, iterations: int = 10) -> DerivedKeyMaterial:
    """Derive the AES key and IV for one save.

    PBKDF2-HMAC-SHA1 yields 32 bytes: the first 16 are the IV, the last 16
    the key.
    """
    derived = PBKDF2(
        password,
        salt,
        dkLen=DERIVED_SIZE,
        count=iterations,
        hmac_hash_module=SHA1,
    )
    return DerivedKeyMaterial(key=derived[BLOCK_SIZE:], iv=derived[:BLOCK_SIZE])


def derive_for(salt: bytes, config: Optional[CodecConfig] = None) -> DerivedKeyMaterial:
    config = config or CodecConfig.default()
    return derive(config.password, salt, config.iterations)
