from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application identity, tree drawing glyphs
and the ANSI color codes used by both rendering modes.
"""

from typing import Tuple

APP_NAME = "dirscope"
APP_VERSION = "0.3.0"

# -----------------------------------------------------------------------------
# TREE GLYPHS
# -----------------------------------------------------------------------------
BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
PAD_CONTINUE = "│   "
PAD_EMPTY = "    "

VERBOSE_INDENT = 4
VERBOSE_META_INDENT = 2

UNREADABLE_SUFFIX = " [unreadable]"

# -----------------------------------------------------------------------------
# ANSI COLORS
# -----------------------------------------------------------------------------
ANSI_RESET = "\x1b[0m"
ANSI_RED = "\x1b[31m"
ANSI_GREEN = "\x1b[32m"
ANSI_YELLOW = "\x1b[33m"
ANSI_BLUE = "\x1b[34m"
ANSI_MAGENTA = "\x1b[35m"
ANSI_CYAN = "\x1b[36m"

# Directory colors for compact mode, indexed by depth modulo length
DIRECTORY_PALETTE: Tuple[str, ...] = (
    ANSI_RED,
    ANSI_GREEN,
    ANSI_YELLOW,
    ANSI_BLUE,
    ANSI_MAGENTA,
    ANSI_CYAN,
)

VERBOSE_DIRECTORY_COLOR = ANSI_BLUE
VERBOSE_FILE_COLOR = ANSI_GREEN

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

COLOR_CHOICES: Tuple[str, ...] = ("auto", "always", "never")
