import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from btd6save.config import CodecConfig  # noqa: E402
from btd6save.salt import SaltProvider  # noqa: E402


@pytest.fixture
def config() -> CodecConfig:
    return CodecConfig()


@pytest.fixture
def fixed_salt() -> bytes:
    return bytes(range(24))


@pytest.fixture
def fixed_salt_provider(fixed_salt: bytes) -> SaltProvider:
    return SaltProvider(fixed=fixed_salt)


@pytest.fixture
def sample_json(tmp_path: Path) -> Path:
    path = tmp_path / "profile.json"
    path.write_bytes(b'{"a":1,"b":[true,false,null]}')
    return path
