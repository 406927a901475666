from __future__ import annotations

"""
Tree Renderer.

Converts DirectoryTree models into terminal lines. Two modes:

- compact: box-drawing connectors (├──, └──), directories colored by depth.
- verbose: flat indentation, bracketed directories and per-file metadata.

Rendering is a pure function of the node, its depth and the last-child
flags of its ancestors; the builder's child order is never changed.
"""

from typing import List, Tuple, Union

from dirscope.domain.constants import (
    ANSI_RESET,
    BRANCH_LAST,
    BRANCH_MIDDLE,
    DIRECTORY_PALETTE,
    PAD_CONTINUE,
    PAD_EMPTY,
    TIMESTAMP_FORMAT,
    UNREADABLE_SUFFIX,
    VERBOSE_DIRECTORY_COLOR,
    VERBOSE_FILE_COLOR,
    VERBOSE_INDENT,
    VERBOSE_META_INDENT,
)
from dirscope.domain.tree_models import DirectoryTree, FileEntry, NodeKind, TreeNode

Renderable = Union[DirectoryTree, TreeNode]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_compact(tree: Renderable, *, color: bool = True) -> List[str]:
    """
    Render the tree with branch connectors.

    The root prints bare. Every other node is prefixed by one padding
    segment per ancestor below the root (``│   `` while that ancestor has
    following siblings, blanks otherwise) and its own connector.
    Directory names take ``DIRECTORY_PALETTE[depth % 6]``.

    Args:
        tree: Build result or any node of it.
        color: Emit ANSI color sequences.

    Returns:
        List[str]: Output lines in traversal order.
    """
    lines: List[str] = []
    stack: List[_CompactFrame] = [(_root_of(tree), 0, (), True)]

    while stack:
        node, depth, ancestors, is_last = stack.pop()
        lines.append(_compact_line(node, depth, ancestors, is_last, color))

        if node.kind is NodeKind.DIRECTORY:
            child_ancestors = ancestors + (is_last,) if depth > 0 else ()
            last_index = len(node.children) - 1
            for i in range(last_index, -1, -1):
                stack.append((node.children[i], depth + 1, child_ancestors, i == last_index))

    return lines


def render_verbose(tree: Renderable, *, color: bool = True) -> List[str]:
    """
    Render the tree as an indented listing with file metadata.

    Directories print as ``[name]`` followed by their children and a
    color-reset marker line. Files print their name and, when indented,
    their path, size and modification time.

    Args:
        tree: Build result or any node of it.
        color: Emit ANSI color sequences.

    Returns:
        List[str]: Output lines in traversal order.
    """
    lines: List[str] = []
    # (node, indent, closing): a closing frame emits the directory's reset line
    stack: List[Tuple[TreeNode, int, bool]] = [(_root_of(tree), 0, False)]

    while stack:
        node, indent, closing = stack.pop()
        if closing:
            lines.append(ANSI_RESET if color else "")
            continue

        pad = " " * indent

        # Scenario A: Directory, children then reset marker
        if node.kind is NodeKind.DIRECTORY:
            label = f"[{node.name}]" if node.is_readable else f"[{node.name}]{UNREADABLE_SUFFIX}"
            lines.append(f"{pad}{VERBOSE_DIRECTORY_COLOR}{label}" if color else f"{pad}{label}")
            stack.append((node, indent, True))
            for child in reversed(node.children):
                stack.append((child, indent + VERBOSE_INDENT, False))
            continue

        # Scenario B: File with metadata
        if color:
            lines.append(f"{pad}{VERBOSE_FILE_COLOR}{node.name}{ANSI_RESET}")
        else:
            lines.append(f"{pad}{node.name}")

        if indent > 0:
            lines.extend(_format_file_info(node, indent + VERBOSE_META_INDENT))

    return lines


def directory_color(depth: int) -> str:
    return DIRECTORY_PALETTE[depth % len(DIRECTORY_PALETTE)]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

_CompactFrame = Tuple[TreeNode, int, Tuple[bool, ...], bool]


def _compact_line(
        node: TreeNode,
        depth: int,
        ancestors: Tuple[bool, ...],
        is_last: bool,
        color: bool,
) -> str:
    """
    Format one compact line.

    ``ancestors`` holds the last-child flag of every ancestor between the
    root (exclusive) and ``node`` (exclusive).
    """
    if depth == 0:
        padding = connector = ""
    else:
        padding = "".join(PAD_EMPTY if last else PAD_CONTINUE for last in ancestors)
        connector = BRANCH_LAST if is_last else BRANCH_MIDDLE

    # Scenario A: Directory, colored by depth
    if node.kind is NodeKind.DIRECTORY:
        label = node.name if node.is_readable else node.name + UNREADABLE_SUFFIX
        if color:
            return f"{padding}{directory_color(depth)}{connector}{label}{ANSI_RESET}"
        return f"{padding}{connector}{label}"

    # Scenario B: File, default terminal color
    return f"{padding}{connector}{node.name}"


def _format_file_info(entry: FileEntry, indent: int) -> List[str]:
    pad = " " * indent
    return [
        f"{pad}Path: {entry.path}",
        f"{pad}Size: {entry.size} bytes",
        f"{pad}Last modified: {entry.modified.strftime(TIMESTAMP_FORMAT)}",
    ]


def _root_of(tree: Renderable) -> TreeNode:
    if isinstance(tree, DirectoryTree):
        return tree.root
    return tree
