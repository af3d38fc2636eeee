from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from .errors import SamePathError, SaveIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def check_distinct(input_path: PathLike, output_path: PathLike) -> None:
    """Reject operations whose output would overwrite their input.

    Compares normalized absolute paths only; the filesystem is not touched.
    """
    first = os.path.normcase(os.path.abspath(os.fspath(input_path)))
    second = os.path.normcase(os.path.abspath(os.fspath(output_path)))
    if first == second:
        raise SamePathError(f"Input cannot be equal to Output ('{input_path}' == '{output_path}').")


def read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise SaveIOError(f"Cannot read {path}: {e.strerror or e}") from e


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Atomically write bytes to a path using a temporary file and replace.

    Either the old file remains or the new file fully replaces it; no partial
    output is left behind.
    """
    tmp_dir = path.parent
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=tmp_dir)
    except OSError as e:
        raise SaveIOError(f"Cannot write {path}: {e.strerror or e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        raise SaveIOError(f"Cannot write {path}: {e.strerror or e}") from e
    finally:
        try:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp_name, exc_info=True)
