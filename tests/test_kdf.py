import hashlib

from btd6save.config import CodecConfig
from btd6save.kdf import DerivedKeyMaterial, derive, derive_for


def test_derive_is_deterministic():
    salt = bytes(range(24))
    assert derive(b"11", salt, 10) == derive(b"11", salt, 10)


def test_derive_sizes():
    material = derive(b"11", b"\x00" * 24, 10)
    assert len(material.key) == 16
    assert len(material.iv) == 16


def test_derive_matches_pbkdf2_hmac_sha1_with_iv_first():
    salt = b"0123456789abcdefghijklmn"
    expected = hashlib.pbkdf2_hmac("sha1", b"11", salt, 10, dklen=32)
    material = derive(b"11", salt, 10)
    assert material.iv == expected[:16]
    assert material.key == expected[16:]


def test_different_salts_give_different_material():
    a = derive(b"11", b"a" * 24, 10)
    b = derive(b"11", b"b" * 24, 10)
    assert a.key != b.key
    assert a.iv != b.iv


def test_derive_for_uses_config_constants():
    salt = b"x" * 24
    config = CodecConfig(password=b"22", iterations=3)
    assert derive_for(salt, config) == derive(b"22", salt, 3)
    assert derive_for(salt) == derive(b"11", salt, 10)


def test_repr_hides_material():
    material = derive(b"11", b"x" * 24)
    assert material.key.hex() not in repr(material)
    assert isinstance(material, DerivedKeyMaterial)
