from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class SaltProvider:
    """
    Source of per-save salts. Uses the OS CSPRNG unless a fixed salt is
    given, which makes pack output reproducible in tests.
    """

    fixed: Optional[bytes] = None

    def salt(self, size: int) -> bytes:
        if self.fixed is None:
            return os.urandom(size)
        if len(self.fixed) != size:
            raise ValueError(f"Fixed salt must be {size} bytes, got {len(self.fixed)}")
        return bytes(self.fixed)
