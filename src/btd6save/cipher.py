from __future__ import annotations

from Crypto.Cipher import AES
from Crypto.Util.Padding import pad, unpad

from .errors import CorruptCiphertextError, InvalidPaddingError


def _check_key_iv(key: bytes, iv: bytes) -> None:
    if len(key) != 16:
        raise ValueError(f"AES-128 key must be 16 bytes, got {len(key)}")
    if len(iv) != AES.block_size:
        raise ValueError(f"IV must be {AES.block_size} bytes, got {len(iv)}")


def encrypt(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """AES-128-CBC encrypt with PKCS#7 padding.

    Block-aligned input gains a full block of padding.
    """
    _check_key_iv(key, iv)
    cipher = AES.new(key, AES.MODE_CBC, iv)
    return cipher.encrypt(pad(plaintext, AES.block_size, style="pkcs7"))


def decrypt(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Decrypt AES-128-CBC and strip PKCS#7 padding."""
    _check_key_iv(key, iv)
    if not ciphertext or len(ciphertext) % AES.block_size:
        raise CorruptCiphertextError(
            f"Ciphertext length {len(ciphertext)} is not a positive multiple of {AES.block_size}"
        )
    cipher = AES.new(key, AES.MODE_CBC, iv)
    padded = cipher.decrypt(ciphertext)
    try:
        return unpad(padded, AES.block_size, style="pkcs7")
    except ValueError as e:
        raise InvalidPaddingError(f"Invalid padding after decryption: {e}") from e
