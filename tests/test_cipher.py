import pytest
from Crypto.Cipher import AES

from btd6save import cipher
from btd6save.errors import CorruptCiphertextError, InvalidPaddingError

KEY = bytes(range(16))
IV = bytes(range(16, 32))


@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 1000])
def test_encrypt_decrypt_round_trip(length):
    plaintext = bytes(i % 251 for i in range(length))
    encrypted = cipher.encrypt(KEY, IV, plaintext)
    assert len(encrypted) % 16 == 0
    assert len(encrypted) > length
    assert cipher.decrypt(KEY, IV, encrypted) == plaintext


def test_block_aligned_input_gets_full_padding_block():
    assert len(cipher.encrypt(KEY, IV, b"x" * 16)) == 32
    assert len(cipher.encrypt(KEY, IV, b"")) == 16


@pytest.mark.parametrize("length", [0, 1, 15, 17])
def test_decrypt_rejects_bad_lengths(length):
    with pytest.raises(CorruptCiphertextError):
        cipher.decrypt(KEY, IV, b"\x00" * length)


def test_decrypt_rejects_malformed_padding():
    # A block of 'A' (0x41) decrypts to a pad byte larger than the block size.
    raw = AES.new(KEY, AES.MODE_CBC, IV).encrypt(b"A" * 16)
    with pytest.raises(InvalidPaddingError):
        cipher.decrypt(KEY, IV, raw)


def test_padding_error_is_a_ciphertext_error():
    raw = AES.new(KEY, AES.MODE_CBC, IV).encrypt(b"\x00" * 16)
    with pytest.raises(CorruptCiphertextError):
        cipher.decrypt(KEY, IV, raw)


def test_wrong_key_size_is_rejected():
    with pytest.raises(ValueError):
        cipher.encrypt(b"short", IV, b"data")
