from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import ConfigError

logger = logging.getLogger(__name__)

BYTEORDERS = ("little", "big")
INT_FIELDS = (
    "iterations",
    "salt_size",
    "header_size",
    "version_size",
    "format_version",
    "compression_level",
    "pretty_indent",
)


@dataclass(frozen=True)
class CodecConfig:
    """Format constants shared by pack and unpack.

    The defaults describe the container the game reads and writes:
      - password: PBKDF2 password (2 ASCII bytes)
      - iterations: PBKDF2 iteration count
      - salt_size / header_size / version_size: byte sizes of the fixed prefix
      - format_version: value written to the version field on pack
      - version_byteorder: "little" or "big" encoding of the version field
      - compression_level: zlib level used on pack
      - pretty_indent: indent of unpacked JSON
    """

    password: bytes = b"11"
    iterations: int = 10
    salt_size: int = 24
    header_size: int = 44
    version_size: int = 8
    format_version: int = 2
    version_byteorder: str = "little"
    compression_level: int = 3
    pretty_indent: int = 2

    def __post_init__(self) -> None:
        if not isinstance(self.password, bytes):
            raise ConfigError(f"password must be bytes, got {type(self.password).__name__}")
        for name in INT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.version_byteorder, str):
            raise ConfigError(f"version_byteorder must be a string, got {self.version_byteorder!r}")
        if not self.password:
            raise ConfigError("password must not be empty")
        if self.iterations < 1:
            raise ConfigError(f"iterations must be >= 1, got {self.iterations}")
        for name in ("salt_size", "header_size", "version_size"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be >= 1, got {getattr(self, name)}")
        if self.version_byteorder not in BYTEORDERS:
            raise ConfigError(
                f"version_byteorder must be one of {BYTEORDERS}, got {self.version_byteorder!r}"
            )
        if not -1 <= self.compression_level <= 9:
            raise ConfigError(f"compression_level must be in -1..9, got {self.compression_level}")
        if self.format_version < 0 or self.format_version >= 1 << (8 * self.version_size):
            raise ConfigError(
                f"format_version {self.format_version} does not fit in {self.version_size} bytes"
            )
        if self.pretty_indent < 0:
            raise ConfigError(f"pretty_indent must be >= 0, got {self.pretty_indent}")

    @property
    def prefix_size(self) -> int:
        """Number of bytes that precede the ciphertext in a packed save."""
        return self.header_size + self.version_size + self.salt_size

    @staticmethod
    def default() -> "CodecConfig":
        return CodecConfig()

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid settings file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodecConfig":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}")
        values = dict(data)
        if "password" in values:
            password = values["password"]
            if not isinstance(password, bytes):
                password = str(password).encode("utf-8")
            values["password"] = password
        try:
            return cls(**values)
        except TypeError as e:
            raise ConfigError(f"Invalid settings: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        data = dataclasses.asdict(self)
        data["password"] = self.password.decode("utf-8")
        return data

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "CodecConfig":
        """Load settings from the packaged defaults and an optional user override file."""
        try:
            with resources.files("btd6save.config").joinpath("default_settings.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            data = CodecConfig().to_dict()

        if user_path is not None:
            if not user_path.exists():
                raise ConfigError(f"Settings file not found: {user_path}")
            data = {**data, **cls._load_yaml(user_path)}
            logger.info("Loaded user settings from %s", user_path)

        config = cls.from_dict(data)
        logger.debug("Codec settings: %s", config)
        return config
