from __future__ import annotations

import json
import logging
from typing import Any

from .errors import InvalidJsonError

logger = logging.getLogger(__name__)

BOM = b"\xef\xbb\xbf"


def strip_bom(data: bytes) -> bytes:
    """Drop a leading UTF-8 byte-order marker, if any. Never adds one."""
    if data.startswith(BOM):
        logger.debug("Stripped UTF-8 byte-order marker")
        return data[len(BOM):]
    return data


def _reject_constant(name: str) -> Any:
    raise InvalidJsonError(f"Invalid JSON: {name} is not a JSON value")


def parse(data: bytes) -> Any:
    """Parse UTF-8 JSON bytes (BOM already removed)."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidJsonError(f"Invalid JSON: not UTF-8 text ({e.reason} at byte {e.start})", pos=e.start) from e
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(f"Invalid JSON: {e}", lineno=e.lineno, colno=e.colno, pos=e.pos) from e
    except RecursionError as e:
        raise InvalidJsonError("Invalid JSON: nested too deeply") from e
    except ValueError as e:
        # e.g. integer literals past the int/str digit limit
        raise InvalidJsonError(f"Invalid JSON: {e}") from e


def _encode(value: Any, **kwargs: Any) -> bytes:
    try:
        return json.dumps(value, ensure_ascii=False, **kwargs).encode("utf-8")
    except RecursionError as e:
        raise InvalidJsonError("Invalid JSON: nested too deeply") from e
    except ValueError as e:
        # UnicodeEncodeError for lone surrogates such as "\ud800"
        raise InvalidJsonError(f"Invalid JSON: cannot encode as UTF-8 ({e})") from e


def serialize_compact(value: Any) -> bytes:
    return _encode(value, separators=(",", ":"))


def serialize_pretty(value: Any, indent: int = 2) -> bytes:
    return _encode(value, indent=indent)
