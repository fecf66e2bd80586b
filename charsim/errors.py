"""
Exception hierarchy for charsim.

Every error carries the process exit code the CLI reports for it, so
library code raises and only ``app.main`` decides how the run ends.
"""

from pathlib import Path
from typing import Optional


class CharSimError(Exception):
    """Base class for all charsim errors."""

    exit_code = 3


class UsageError(CharSimError):
    """Raised when the command line is malformed (wrong argument count, bad option)."""

    exit_code = 1


class FileAccessError(CharSimError):
    """Raised when an input cannot be read or the result cannot be written."""

    exit_code = 2

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class FileReadError(FileAccessError):
    """Input file could not be opened, read, or decoded."""
    pass


class FileWriteError(FileAccessError):
    """Output directory could not be created or the output file written."""
    pass
