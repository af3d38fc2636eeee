import pytest

from btd6save import container
from btd6save.config import CodecConfig
from btd6save.errors import TruncatedInputError


def _packed(version_bytes: bytes = (2).to_bytes(8, "little"), ciphertext: bytes = b"\x01" * 32) -> bytes:
    return b"H" * 44 + version_bytes + b"S" * 24 + ciphertext


def test_decode_splits_fixed_prefix():
    save = container.decode(_packed())
    assert save.header == b"H" * 44
    assert save.version == 2
    assert save.salt == b"S" * 24
    assert save.ciphertext == b"\x01" * 32


def test_decode_exact_prefix_has_empty_ciphertext():
    save = container.decode(_packed(ciphertext=b""))
    assert save.ciphertext == b""


@pytest.mark.parametrize("size", [0, 1, 50, 75])
def test_decode_rejects_short_input(size):
    with pytest.raises(TruncatedInputError) as exc:
        container.decode(_packed()[:size])
    assert "76" in str(exc.value)


def test_encode_layout_and_version_little_endian():
    data = container.encode(bytes(44), 2, b"s" * 24, b"cipher")
    assert len(data) == 76 + len(b"cipher")
    assert data[:44] == bytes(44)
    assert data[44:52] == b"\x02\x00\x00\x00\x00\x00\x00\x00"
    assert data[52:76] == b"s" * 24
    assert data[76:] == b"cipher"


def test_encode_big_endian_when_configured():
    config = CodecConfig(version_byteorder="big")
    data = container.encode(bytes(44), 2, b"s" * 24, b"", config)
    assert data[44:52] == b"\x00\x00\x00\x00\x00\x00\x00\x02"
    assert container.decode(data, config).version == 2


def test_encode_rejects_wrong_field_sizes():
    with pytest.raises(ValueError):
        container.encode(bytes(43), 2, b"s" * 24, b"")
    with pytest.raises(ValueError):
        container.encode(bytes(44), 2, b"s" * 23, b"")


def test_round_trip_preserves_header_verbatim():
    header = bytes(range(44))
    data = container.encode(header, 2, b"s" * 24, b"payload")
    save = container.decode(data)
    assert save.header == header
    assert save.to_bytes() == data


def test_unexpected_version_is_logged_not_rejected(caplog):
    save = container.decode(_packed(version_bytes=(7).to_bytes(8, "little")))
    assert save.version == 7
    assert "Unexpected save format version 7" in caplog.text


def test_zero_header():
    assert container.zero_header() == bytes(44)
