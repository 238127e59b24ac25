"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

import sys

REGISTER_NAMES: tuple[str, ...] = ("w", "x", "y", "z")
REGISTER_COUNT = len(REGISTER_NAMES)

DEFAULT_IDENTITY_START = 0
DEFAULT_IDENTITY_LIMIT = sys.maxsize

STDIN_PATH = "-"
