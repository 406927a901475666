from __future__ import annotations

"""
Filesystem Error Taxonomy.

Domain exceptions raised by the filesystem layer and the tree builder.
Every error names the offending path so the CLI can report it verbatim.
"""

from typing import Optional


class FilesystemError(Exception):
    """
    Base class for failures reading the filesystem.

    Attributes:
        path: The path that could not be read.
        reason: Low-level cause (usually the OS error string).
    """

    label = "Filesystem error"

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        message = f"{self.label}: '{path}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PathNotFound(FilesystemError):
    label = "Path does not exist"


class NotADirectory(FilesystemError):
    label = "Not a directory"


class PermissionDenied(FilesystemError):
    label = "Permission denied"


class MetadataUnavailable(FilesystemError):
    label = "Metadata unavailable"
