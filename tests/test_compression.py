import zlib

import pytest

from btd6save import compression
from btd6save.errors import CorruptStreamError

DATA = b'{"a":1,"b":[true,false,null]}' * 20


@pytest.mark.parametrize("level", list(range(-1, 10)))
def test_round_trip_all_levels(level):
    assert compression.decompress(compression.compress(DATA, level)) == DATA


def test_empty_input_round_trips():
    assert compression.decompress(compression.compress(b"")) == b""


def test_output_is_zlib_framed():
    out = compression.compress(DATA)
    assert out == zlib.compress(DATA, 3)
    assert out[0] == 0x78


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        compression.compress(DATA, 10)


def test_checksum_mismatch_raises():
    out = bytearray(compression.compress(DATA))
    out[-1] ^= 0xFF
    with pytest.raises(CorruptStreamError):
        compression.decompress(bytes(out))


def test_garbage_and_truncated_streams_raise():
    with pytest.raises(CorruptStreamError):
        compression.decompress(b"not a zlib stream")
    with pytest.raises(CorruptStreamError):
        compression.decompress(compression.compress(DATA)[:-6])
