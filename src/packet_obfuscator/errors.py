"""Exceptions raised while obfuscating files.

A FileAccessError or ParseError concerns a single file and is reported by
the directory pass without stopping it.  DirectoryError means the pass
could not start at all.
"""

from __future__ import annotations
from pathlib import Path


class ObfuscationError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class FileAccessError(ObfuscationError):
    """A file could not be opened, read or written."""


class ParseError(ObfuscationError):
    """A structured file is not valid JSON."""


class DirectoryError(ObfuscationError):
    """The target directory could not be listed."""
