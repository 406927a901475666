from __future__ import annotations

"""
Directory Tree Builder.

Constructs the immutable in-memory tree for a starting directory, either
one level deep (shallow) or fully expanded (recursive). Recursive mode
lists directories level by level on a thread pool; results are collected
by position so every parent keeps its own child order regardless of which
worker finishes first.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Dict, List, Optional, Union

from dirscope.domain.errors import FilesystemError, MetadataUnavailable
from dirscope.domain.tree_models import (
    BuildFailure,
    DirectoryNode,
    DirectoryTree,
    FileEntry,
    TreeNode,
)
from dirscope.infra.fs import (
    display_name,
    ensure_directory,
    is_directory_entry,
    list_directory,
    read_file_entry,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# INTERNAL LISTING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class _SubdirSlot:
    """Placeholder for a subdirectory inside a parent's listing."""
    name: str
    path: str


@dataclass
class _Listing:
    """One directory's entries, in the order they will be rendered."""
    path: str
    slots: List[Union[FileEntry, _SubdirSlot]] = field(default_factory=list)
    failures: List[BuildFailure] = field(default_factory=list)
    error: Optional[str] = None

    def subdirectories(self) -> List[str]:
        return [s.path for s in self.slots if isinstance(s, _SubdirSlot)]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        input_path: str,
        recursive: bool = False,
        *,
        sort_entries: bool = True,
        fail_fast: bool = False,
        max_workers: Optional[int] = None,
) -> DirectoryTree:
    """
    Build the directory tree rooted at ``input_path``.

    Args:
        input_path: Starting directory.
        recursive: Expand every subdirectory; otherwise list one level.
        sort_entries: Sort children by name; otherwise keep OS order.
        fail_fast: Abort on the first unreadable subdirectory instead of
                   recording it and continuing with its siblings.
        max_workers: Upper bound of the scanning thread pool.

    Returns:
        DirectoryTree: Root node plus any isolated failures.

    Raises:
        FilesystemError: The starting path is missing, not a directory or
                         unreadable; or, with ``fail_fast``, any
                         subdirectory is unreadable.
    """
    logger.info(f"Building {'recursive' if recursive else 'shallow'} tree for: {input_path}")

    ensure_directory(input_path)
    root_listing = _scan_directory(input_path, sort_entries=sort_entries, raise_errors=True)

    listings: Dict[str, _Listing] = {root_listing.path: root_listing}
    if recursive:
        _expand_levels(
            root_listing.subdirectories(),
            listings,
            sort_entries=sort_entries,
            fail_fast=fail_fast,
            max_workers=max_workers,
        )

    failures: List[BuildFailure] = []
    root = _assemble(root_listing, listings, failures)

    for failure in failures:
        logger.warning(f"Skipped '{failure.path}': {failure.error}")
    logger.info(f"Tree built: {len(listings)} directories listed, {len(failures)} failures.")

    return DirectoryTree(root=root, recursive=recursive, failures=tuple(failures))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SCANNING)
# -----------------------------------------------------------------------------

def _expand_levels(
        frontier: List[str],
        listings: Dict[str, _Listing],
        sort_entries: bool,
        fail_fast: bool,
        max_workers: Optional[int],
) -> None:
    """
    List every directory below the root, one depth level per round.

    ``executor.map`` yields in submission order, so results land in the
    slot of the directory that produced them. Workers never wait on the
    pool themselves.
    """
    scan = partial(_scan_directory, sort_entries=sort_entries, raise_errors=fail_fast)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="dirscope-scan") as executor:
        depth = 1
        while frontier:
            logger.debug(f"Scanning depth {depth}: {len(frontier)} directories")
            next_frontier: List[str] = []
            for listing in executor.map(scan, frontier):
                listings[listing.path] = listing
                next_frontier.extend(listing.subdirectories())
            frontier = next_frontier
            depth += 1


def _scan_directory(path: str, sort_entries: bool, raise_errors: bool) -> _Listing:
    """
    List one directory into a _Listing.

    Entries whose metadata cannot be read are skipped and recorded. A
    listing failure is raised when ``raise_errors`` is set, otherwise it is
    recorded on the listing itself.
    """
    listing = _Listing(path=path)

    try:
        entries = list_directory(path, sort_entries=sort_entries)
    except FilesystemError as e:
        if raise_errors:
            raise
        logger.debug(f"Listing failed for '{path}': {e}")
        listing.error = e.reason or str(e)
        listing.failures.append(BuildFailure(path=path, error=str(e)))
        return listing

    for entry in entries:
        if is_directory_entry(entry):
            listing.slots.append(_SubdirSlot(name=entry.name, path=entry.path))
            continue
        try:
            listing.slots.append(read_file_entry(entry))
        except MetadataUnavailable as e:
            listing.failures.append(BuildFailure(path=entry.path, error=str(e)))

    return listing

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (ASSEMBLY)
# -----------------------------------------------------------------------------

def _assemble(
        root_listing: _Listing,
        listings: Dict[str, _Listing],
        failures: List[BuildFailure],
) -> DirectoryNode:
    """
    Turn collected listings into immutable nodes.

    Listings are ordered pre-order with an explicit stack (failures are
    collected in that order), then built in reverse so every child node
    exists before its parent. Nesting depth is therefore not bounded by
    the interpreter's recursion limit. Subdirectories without a listing
    (shallow mode) become empty nodes.
    """
    order: List[_Listing] = []
    stack: List[_Listing] = [root_listing]
    while stack:
        listing = stack.pop()
        order.append(listing)
        failures.extend(listing.failures)
        for sub_path in reversed(listing.subdirectories()):
            sub_listing = listings.get(sub_path)
            if sub_listing is not None:
                stack.append(sub_listing)

    built: Dict[str, DirectoryNode] = {}
    for listing in reversed(order):
        children: List[TreeNode] = []
        for slot in listing.slots:
            if isinstance(slot, FileEntry):
                children.append(slot)
            elif slot.path in built:
                children.append(built.pop(slot.path))
            else:
                children.append(DirectoryNode(name=slot.name, path=slot.path))

        built[listing.path] = DirectoryNode(
            name=display_name(listing.path),
            path=listing.path,
            children=tuple(children),
            error=listing.error,
        )

    return built[root_listing.path]
