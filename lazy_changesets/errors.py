"""Exceptions raised by the add workflow."""

from __future__ import annotations


class ExitError(Exception):
    """The user asked to stop the whole command.

    Not a crash: the CLI turns this into a plain exit with ``code`` and
    prints no traceback.
    """

    def __init__(self, code: int = 1) -> None:
        super().__init__(f"exited with code {code}")
        self.code = code


class PreconditionError(RuntimeError):
    """A workflow stage was run without the output of the stage before it."""


class EditorError(RuntimeError):
    """No usable external editor, or the user aborted it."""
