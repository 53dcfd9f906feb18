"""Formatting and emitting timer reports to the terminal or a log file."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from pathlib import Path
from typing import TextIO

from gmtimer.color import reset, set_green

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_GIT_HEAD = "git rev-parse HEAD"
_NO_COMMIT = "NOCOMMITID"
_DEFAULT_PRECISION = 6


def timestamp_now() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime(_TIMESTAMP_FORMAT, time.localtime())


def exec_command(cmd: str) -> str:
    """Run ``cmd`` through the shell and return what it wrote to stdout.

    An empty string is returned when the command cannot be started.
    """
    try:
        completed = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, text=True, check=False
        )
    except OSError:
        print("popen() failed!", file=sys.stderr)
        return ""
    return completed.stdout or ""


def git_commit_id() -> str:
    """Return the hash of the checked-out git commit, or an empty string."""
    return exec_command(_GIT_HEAD).rstrip("\n")


def _format_seconds(duration_us: int, precision: int) -> str:
    digits = precision if precision >= 0 else _DEFAULT_PRECISION
    return f"{duration_us / 1_000_000:.{digits}f}"


def replace_keywords(
    fmt: str,
    label: str,
    duration_us: int,
    precision: int,
    timestamp: str,
    commit_id: str,
) -> str:
    """Fill the ``{time}``, ``{label}``, ``{duration}``, ``{commitID}`` and
    ``{commitID-s}`` placeholders of ``fmt``.

    The duration is given in microseconds and shown in seconds with
    ``precision`` decimal places; ``{commitID-s}`` is the first seven
    characters of the commit id.
    """
    result = fmt.replace("{time}", timestamp)
    result = result.replace("{label}", label)
    result = result.replace("{duration}", _format_seconds(duration_us, precision))
    result = result.replace("{commitID}", commit_id)
    return result.replace("{commitID-s}", commit_id[:7])


def std_output(
    label: str,
    duration_us: int,
    precision: int,
    fmt: str,
    stream: TextIO | None = None,
) -> str:
    """Print the report in green on ``stream`` and return the report line."""
    out = sys.stdout if stream is None else stream
    line = replace_keywords(
        fmt, label, duration_us, precision, timestamp_now(), git_commit_id()
    )
    set_green(out)
    out.write("\n" + line + "\n")
    out.flush()
    reset(out)
    return line


def _directory_of(dst: str) -> str:
    separators = [os.sep] + ([os.altsep] if os.altsep else [])
    cut = max(dst.rfind(sep) for sep in separators)
    return dst[:cut] if cut > 0 else ""


def log_output(
    label: str,
    duration_us: int,
    precision: int,
    dst: str | os.PathLike[str],
    fmt: str,
) -> str:
    """Append the report line to the log file ``dst`` and return it.

    Missing parent directories are created. The commit id is looked up only
    when ``fmt`` contains ``{commitID}``; otherwise a placeholder is used.
    """
    path = os.fspath(dst)
    directory = _directory_of(path)
    if directory:
        Path(directory).mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as log_file:
        commit_id = _NO_COMMIT
        if "{commitID}" in fmt:
            commit_id = git_commit_id()
        line = replace_keywords(
            fmt, label, duration_us, precision, timestamp_now(), commit_id
        )
        log_file.write(line + "\n")
    return line