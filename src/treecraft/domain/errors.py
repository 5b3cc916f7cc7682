from __future__ import annotations

"""
Domain Error Types.

Every failure of a top-level operation is raised as a TreeCraftError
subclass. The string form of each error is the one-line diagnostic shown
to the user.
"""

from typing import Optional


class TreeCraftError(Exception):
    """Base class for all treecraft failures."""

    kind: str = "error"


class ParseError(TreeCraftError):
    """The diagram text could not be turned into a tree."""

    kind = "parse"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Parse error: {self.message}"


class FileSystemError(TreeCraftError):
    """
    Wraps an underlying OSError raised while reading the diagram or
    creating directories and files.
    """

    kind = "filesystem"

    def __init__(self, original: OSError, path: Optional[str] = None):
        super().__init__(str(original))
        self.original = original
        self.path = path

    def __str__(self) -> str:
        return f"File system error: {self.original}"


class AlreadyExistsError(TreeCraftError):
    """The destination path exists; raised before any mutation."""

    kind = "already_exists"

    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Path already exists: {self.path}"
