"""Names for temporary files that do not exist yet."""

from __future__ import annotations

import os

_DIGITS = 8
_LIMIT = 10**_DIGITS


def unused_file_name(prefix: str) -> str:
    """Return ``prefix-NNNNNNNN`` for the lowest number not taken on disk.

    Raises ``FileExistsError`` when every number is taken.
    """
    for number in range(_LIMIT):
        candidate = f"{prefix}-{number:0{_DIGITS}d}"
        if not os.access(candidate, os.F_OK):
            return candidate
    raise FileExistsError(f"no unused file name for prefix {prefix!r}")