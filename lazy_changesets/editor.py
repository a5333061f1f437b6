"""Opening a written changeset in the user's editor."""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from pathlib import Path


def resolve_editor() -> tuple[str, list[str]]:
    """Return the editor binary and its leading arguments.

    $VISUAL wins over $EDITOR; both may carry arguments ("code -w").
    Falls back to notepad on Windows and vi elsewhere.

    Raises:
        ValueError: The variable can't be split into a command (an
                    unclosed quote, or nothing but whitespace).
    """
    command = os.environ.get("VISUAL") or os.environ.get("EDITOR")
    if not command:
        command = "notepad" if sys.platform == "win32" else "vi"
    words = shlex.split(command, posix=sys.platform != "win32")
    if not words:
        raise ValueError(f"Editor command is empty: {command!r}")
    binary, *args = words
    return binary, args


def launch_detached(path: str | Path) -> None:
    """Open ``path`` in the editor without waiting for it.

    The editor inherits the terminal, so terminal editors like vi stay
    usable, but runs in its own session and is never awaited. A bad editor
    setting or a failure to start is ignored; the changeset is already on
    disk.
    """
    try:
        binary, args = resolve_editor()
        subprocess.Popen([binary, *args, str(path)], start_new_session=True)
    except (OSError, ValueError):
        pass
