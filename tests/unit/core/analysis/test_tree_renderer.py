from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies connector and padding placement, depth-based directory colors,
the verbose metadata layout, and that rendering is deterministic.
"""

from datetime import datetime

from dirscope.core.analysis.tree_renderer import (
    directory_color,
    render_compact,
    render_verbose,
)
from dirscope.domain.constants import (
    ANSI_BLUE,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    DIRECTORY_PALETTE,
)
from dirscope.domain.tree_models import DirectoryNode, DirectoryTree, FileEntry


def entry(name: str, size: int = 0) -> FileEntry:
    return FileEntry(path=f"/p/{name}", name=name, size=size, modified=datetime(2023, 5, 6, 7, 8, 9))


def chain(depth: int) -> DirectoryNode:
    """Directories nested ``depth`` levels below a root named d0."""
    node = DirectoryNode(name=f"d{depth}")
    for level in range(depth - 1, -1, -1):
        node = DirectoryNode(name=f"d{level}", children=(node,))
    return node


# -----------------------------------------------------------------------------
# COMPACT MODE
# -----------------------------------------------------------------------------

def test_compact_reference_scenario(sample_tree: DirectoryTree) -> None:
    """4 lines; sub and b.txt are last children; b.txt has one padding segment."""
    lines = render_compact(sample_tree, color=False)

    assert lines == [
        "root",
        "├── a.txt",
        "└── sub",
        "    └── b.txt",
    ]


def test_compact_colors_directories_only(sample_tree: DirectoryTree) -> None:
    lines = render_compact(sample_tree, color=True)

    assert lines[0] == f"{ANSI_RED}root{ANSI_RESET}"
    assert lines[1] == "├── a.txt"
    assert lines[2] == f"{DIRECTORY_PALETTE[1]}└── sub{ANSI_RESET}"
    assert lines[3] == "    └── b.txt"


def test_compact_padding_tracks_every_ancestor() -> None:
    root = DirectoryNode(
        name="root",
        children=(
            DirectoryNode(
                name="d1",
                children=(
                    DirectoryNode(name="d2", children=(entry("f"),)),
                    entry("g"),
                ),
            ),
            entry("x"),
        ),
    )

    assert render_compact(root, color=False) == [
        "root",
        "├── d1",
        "│   ├── d2",
        "│   │   └── f",
        "│   └── g",
        "└── x",
    ]


def test_compact_exactly_one_last_glyph_per_directory() -> None:
    children = tuple(entry(f"f{i}") for i in range(5))
    lines = render_compact(DirectoryNode(name="r", children=children), color=False)

    assert sum(line.startswith("└── ") for line in lines) == 1
    assert sum(line.startswith("├── ") for line in lines) == 4
    assert lines[-1] == "└── f4"


def test_compact_palette_rotates_by_depth() -> None:
    """Depth d uses palette[d % 6]; the seventh level wraps back to red."""
    lines = render_compact(chain(7), color=True)

    for depth, line in enumerate(lines):
        assert line.startswith(" " * 4 * max(depth - 1, 0) + directory_color(depth))
    assert directory_color(6) == ANSI_RED
    assert lines[6].endswith(f"└── d6{ANSI_RESET}")


def test_compact_sibling_directories_share_a_color() -> None:
    root = DirectoryNode(name="r", children=(DirectoryNode(name="a"), DirectoryNode(name="b")))
    lines = render_compact(root, color=True)

    assert lines[1] == f"{DIRECTORY_PALETTE[1]}├── a{ANSI_RESET}"
    assert lines[2] == f"{DIRECTORY_PALETTE[1]}└── b{ANSI_RESET}"


def test_compact_marks_unreadable_directories() -> None:
    root = DirectoryNode(name="r", children=(DirectoryNode(name="locked", error="Permission denied"),))
    assert render_compact(root, color=False) == ["r", "└── locked [unreadable]"]


def test_compact_empty_root() -> None:
    assert render_compact(DirectoryNode(name="empty"), color=False) == ["empty"]


def test_compact_does_not_resort_children() -> None:
    root = DirectoryNode(name="r", children=(entry("z"), entry("a")))
    assert render_compact(root, color=False) == ["r", "├── z", "└── a"]

# -----------------------------------------------------------------------------
# VERBOSE MODE
# -----------------------------------------------------------------------------

def test_verbose_layout_without_color(sample_tree: DirectoryTree) -> None:
    lines = render_verbose(sample_tree, color=False)

    assert lines == [
        "[root]",
        "    a.txt",
        "      Path: /data/root/a.txt",
        "      Size: 10 bytes",
        "      Last modified: 2024-03-01 12:30:45",
        "    [sub]",
        "        b.txt",
        "          Path: /data/root/sub/b.txt",
        "          Size: 20 bytes",
        "          Last modified: 2024-03-01 12:30:45",
        "",
        "",
    ]


def test_verbose_colors_and_reset_markers(sample_tree: DirectoryTree) -> None:
    lines = render_verbose(sample_tree, color=True)

    assert lines[0] == f"{ANSI_BLUE}[root]"
    assert lines[1] == f"    {ANSI_GREEN}a.txt{ANSI_RESET}"
    assert lines[5] == f"    {ANSI_BLUE}[sub]"
    assert lines[-2:] == [ANSI_RESET, ANSI_RESET]


def test_verbose_file_at_indent_zero_has_no_metadata() -> None:
    assert render_verbose(entry("lonely.txt", 3), color=False) == ["lonely.txt"]

# -----------------------------------------------------------------------------
# DEEP NESTING
# -----------------------------------------------------------------------------

def test_deep_nesting_renders_past_recursion_limit() -> None:
    """Nesting depth is bounded by memory, not by the interpreter stack."""
    depth = 1500
    root = chain(depth)

    compact = render_compact(root, color=False)
    assert len(compact) == depth + 1
    assert compact[0] == "d0"
    assert compact[-1] == "    " * (depth - 1) + f"└── d{depth}"

    verbose = render_verbose(root, color=False)
    assert len(verbose) == 2 * (depth + 1)
    assert verbose[depth] == " " * (4 * depth) + f"[d{depth}]"
    assert verbose[depth + 1:] == [""] * (depth + 1)

# -----------------------------------------------------------------------------
# DETERMINISM
# -----------------------------------------------------------------------------

def test_rendering_is_deterministic(sample_tree: DirectoryTree) -> None:
    assert render_compact(sample_tree) == render_compact(sample_tree)
    assert render_verbose(sample_tree) == render_verbose(sample_tree)


def test_tree_and_root_node_render_identically(sample_tree: DirectoryTree) -> None:
    assert render_compact(sample_tree) == render_compact(sample_tree.root)
    assert render_verbose(sample_tree) == render_verbose(sample_tree.root)
