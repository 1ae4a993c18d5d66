"""
Error types raised or returned while evaluating checks.

Configuration errors abort the run. Everything else is an execution error
that a predicate hands back to the dispatch engine, which turns it into a
failed condition.
"""
from typing import Optional


class ConfigurationError(Exception):
    """Malformed check configuration. Fatal for the whole run."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} {self.hint}"
        return self.message


class CommandError(Exception):
    """A shell command could not be run or exited abnormally."""

    def __init__(self, cmd: str, returncode: Optional[int], output: str = ""):
        if returncode is None:
            message = f"command could not be run: {cmd}"
        else:
            message = f"command exited with status {returncode}: {cmd}"
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
        self.output = output


class DirectorySearchError(Exception):
    """Recursive directory search could not run to completion."""


class ObfuscationError(Exception):
    """Stored condition values could not be revealed or hidden."""
