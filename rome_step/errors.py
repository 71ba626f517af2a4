"""
Exceptions raised when a resolved Rome step is executed.

Building a step never raises: every failure below surfaces only once the
formatter binary is actually launched.
"""

from __future__ import annotations


class RomeStepError(Exception):
    """Base class for Rome step execution errors."""


class RomeExecutableNotFoundError(RomeStepError):
    """The Rome executable could not be located or launched."""

    def __init__(self, executable: str):
        super().__init__(f"Rome executable not found: {executable}")
        self.executable = executable


class RomeFormatError(RomeStepError):
    """Rome ran but did not produce formatted output."""

    def __init__(self, message: str, exit_code: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr
