from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the immutable node types produced by the tree builder and
consumed by the renderer. A tree node is either a DirectoryNode or a
FileEntry; both carry a ``kind`` tag so consumers can dispatch on it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# NODE DISCRIMINATOR
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EntryMeta:
    """
    OS-level metadata carried along with a file entry.

    Never used to make traversal or rendering decisions; ``file_type`` is
    only informative (``"file"``, ``"symlink"``, ``"fifo"``, ...).

    Attributes:
        mode: Raw ``st_mode`` permission and type bits.
        uid: Owner id (0 on platforms without one).
        gid: Group id (0 on platforms without one).
        file_type: Short name of the entry type.
    """
    mode: int = 0
    uid: int = 0
    gid: int = 0
    file_type: str = "file"


@dataclass(frozen=True)
class FileEntry:
    """
    Represents a leaf entry (file or other non-directory) in the tree.

    Attributes:
        path: Filesystem path joined from the starting path.
        name: Base name of the entry.
        size: Length in bytes.
        modified: Last modification time (local time).
        meta: Opaque OS metadata.
    """
    kind: ClassVar[NodeKind] = NodeKind.FILE

    path: str
    name: str
    size: int
    modified: datetime
    meta: EntryMeta = field(default_factory=EntryMeta)


@dataclass(frozen=True)
class DirectoryNode:
    """
    Represents a directory and its ordered children.

    Attributes:
        name: Base name of the directory.
        path: Filesystem path joined from the starting path.
        children: Child nodes in builder order.
        error: Reason the listing failed, when the branch was isolated.
    """
    kind: ClassVar[NodeKind] = NodeKind.DIRECTORY

    name: str
    path: str = ""
    children: Tuple["TreeNode", ...] = ()
    error: Optional[str] = None

    @property
    def is_readable(self) -> bool:
        return self.error is None


TreeNode = Union[DirectoryNode, FileEntry]

# -----------------------------------------------------------------------------
# BUILD RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildFailure:
    """
    A problem isolated during the build instead of aborting it.

    Attributes:
        path: Path of the entry or directory that failed.
        error: Descriptive error message.
    """
    path: str
    error: str


@dataclass(frozen=True)
class DirectoryTree:
    """
    Result of one build: the root directory and any isolated failures.
    """
    root: DirectoryNode
    recursive: bool = False
    failures: Tuple[BuildFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures


def count_nodes(node: TreeNode) -> Tuple[int, int]:
    """Return ``(directories, files)`` below and including ``node``."""
    dirs = files = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if current.kind is NodeKind.FILE:
            files += 1
        else:
            dirs += 1
            stack.extend(current.children)
    return dirs, files
