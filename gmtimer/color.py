"""Green highlighting for terminal output, using ANSI escape sequences."""

from __future__ import annotations

import sys
from typing import TextIO

GREEN = "\033[1;32m"
RESET = "\033[0m"


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def set_green(stream: TextIO | None = None) -> None:
    """Switch ``stream`` (standard output by default) to bold green text."""
    out = _target(stream)
    out.write(GREEN)
    out.flush()


def reset(stream: TextIO | None = None) -> None:
    """Restore the default text attributes of ``stream``."""
    out = _target(stream)
    out.write(RESET)
    out.flush()