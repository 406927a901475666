from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the raw argparse namespace
into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from dirscope.domain.constants import APP_NAME, APP_VERSION, COLOR_CHOICES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirscope CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Print a directory as a colorized tree, optionally with file metadata.",
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to inspect (default: current working directory).",
    )

    # --- Traversal ---
    p.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Descend into every subdirectory instead of listing one level.",
    )
    p.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep filesystem enumeration order instead of sorting by name.",
    )
    p.add_argument(
        "--fail-fast",
        action="store_true",
        help="Abort on the first unreadable subdirectory instead of skipping it.",
    )
    p.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Maximum number of scanning threads in recursive mode.",
    )

    # --- Display ---
    p.add_argument(
        "-l", "--long",
        dest="long_format",
        action="store_true",
        help="Verbose listing with path, size and modification time per file.",
    )
    p.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default=None,
        help="Colorize output: auto (only on a terminal), always or never.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Elevate logging verbosity to DEBUG and print the parsed options.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. Unset options map
        to None and are ignored by the merge.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.path
    overrides["workers"] = args.workers
    overrides["color"] = args.color
    overrides["log_file"] = args.log_file

    if args.recursive:
        overrides["recursive"] = True
    if args.no_sort:
        overrides["sort_entries"] = False
    if args.fail_fast:
        overrides["fail_fast"] = True
    if args.long_format:
        overrides["long_format"] = True
    if args.verbose:
        overrides["verbose"] = True

    return overrides
