from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, directory listing and metadata extraction.
Acts as the only place that touches 'os' directly: raw OSErrors are
translated into the domain error taxonomy before they reach the core.
"""

import errno
import os
import stat
from datetime import datetime
from typing import List, Optional

from dirscope.domain.errors import (
    FilesystemError,
    MetadataUnavailable,
    NotADirectory,
    PathNotFound,
    PermissionDenied,
)
from dirscope.domain.tree_models import EntryMeta, FileEntry

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def display_name(path: str) -> str:
    """Base name of a directory path, falling back to the path itself for '/'."""
    name = os.path.basename(os.path.normpath(path))
    return name or path

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def ensure_directory(path: str) -> None:
    """
    Verify that ``path`` exists and is a directory.

    Raises:
        PathNotFound: The path does not exist.
        NotADirectory: The path exists but is not a directory.
    """
    if not os.path.lexists(path):
        raise PathNotFound(path)
    if not os.path.isdir(path):
        raise NotADirectory(path)


def list_directory(path: str, sort_entries: bool = True) -> List[os.DirEntry]:
    """
    Enumerate the immediate entries of a directory.

    Args:
        path: Directory to list.
        sort_entries: Sort by name; otherwise keep the OS enumeration order.

    Returns:
        List[os.DirEntry]: Entries of the directory.

    Raises:
        FilesystemError: The directory could not be listed.
    """
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        raise translate_os_error(path, e) from e

    if sort_entries:
        entries.sort(key=lambda entry: entry.name)
    return entries


def is_directory_entry(entry: os.DirEntry) -> bool:
    """True for real directories. Symlinks to directories are not followed."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False

# -----------------------------------------------------------------------------
# METADATA API
# -----------------------------------------------------------------------------

def read_file_entry(entry: os.DirEntry) -> FileEntry:
    """
    Build a FileEntry from a directory entry without following symlinks.

    Symlinks (dangling or not), FIFOs, sockets and device nodes are
    described by their own ``lstat`` data.

    Raises:
        MetadataUnavailable: The entry vanished or could not be stat'ed.
    """
    try:
        st = entry.stat(follow_symlinks=False)
    except OSError as e:
        raise MetadataUnavailable(entry.path, e.strerror or str(e)) from e

    return FileEntry(
        path=entry.path,
        name=entry.name,
        size=int(st.st_size),
        modified=datetime.fromtimestamp(st.st_mtime),
        meta=EntryMeta(
            mode=st.st_mode,
            uid=getattr(st, "st_uid", 0),
            gid=getattr(st, "st_gid", 0),
            file_type=describe_file_type(st.st_mode),
        ),
    )


def describe_file_type(mode: int) -> str:
    """Map ``st_mode`` type bits to a short type name."""
    if stat.S_ISLNK(mode):
        return "symlink"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISCHR(mode):
        return "char_device"
    if stat.S_ISBLK(mode):
        return "block_device"
    if stat.S_ISDIR(mode):
        return "directory"
    return "file"


def translate_os_error(path: str, error: OSError) -> FilesystemError:
    """Map an OSError onto the domain error taxonomy."""
    reason = error.strerror or str(error)
    if error.errno == errno.ENOENT:
        return PathNotFound(path, reason)
    if error.errno == errno.ENOTDIR:
        return NotADirectory(path, reason)
    if error.errno in (errno.EACCES, errno.EPERM):
        return PermissionDenied(path, reason)
    return FilesystemError(path, reason)
