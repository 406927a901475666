from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults and
command-line overrides, tree construction, and rendering to stdout.
Diagnostics and errors go to stderr so stdout only ever carries the tree.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from dirscope.core.analysis.tree_builder import build_tree
from dirscope.core.analysis.tree_renderer import render_compact, render_verbose
from dirscope.core.services.validator import validate_config
from dirscope.domain.config import get_default_config
from dirscope.domain.errors import FilesystemError
from dirscope.domain.tree_models import DirectoryTree, count_nodes
from dirscope.infra.fs import normalize_path
from dirscope.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from dirscope.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_PATH = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 2 bad starting path, 1 other failure,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level="DEBUG" if args.verbose else "WARNING",
        console=True,
        log_file=args.log_file or None,
    )
    configure_logging(logging_conf, force=True)

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    # 3. Merge defaults with command-line overrides and normalize
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    input_path = normalize_path(clean_conf["input_path"], os.getcwd())
    clean_conf["input_path"] = input_path
    logger.debug("Parsed options:\n" + json.dumps(clean_conf, indent=2, sort_keys=True))

    try:
        # 4. Tree construction phase
        tree = build_tree(
            input_path,
            recursive=clean_conf["recursive"],
            sort_entries=clean_conf["sort_entries"],
            fail_fast=clean_conf["fail_fast"],
            max_workers=clean_conf["workers"],
        )

        # 5. Output rendering phase
        use_color = resolve_color(clean_conf["color"], sys.stdout)
        _print_tree(tree, long_format=clean_conf["long_format"], color=use_color)
    except FilesystemError as e:
        logger.debug("Tree construction aborted.", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_PATH if e.path == input_path else EXIT_FAILURE
    except BrokenPipeError:
        # The reader stopped early (e.g. `| head`); nothing left to deliver
        _detach_stdout()
        logger.debug("Output stream closed by the reader.")
        return EXIT_OK
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    _report_failures(tree)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged and None means "not given on the command line".
    """
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def resolve_color(mode: str, stream: TextIO) -> bool:
    """Decide whether to emit ANSI colors for ``stream``."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_tree(tree: DirectoryTree, long_format: bool, color: bool) -> None:
    if long_format:
        lines = render_verbose(tree, color=color)
    else:
        lines = render_compact(tree, color=color)

    for line in lines:
        print(line)
    sys.stdout.flush()

    dirs, files = count_nodes(tree.root)
    logger.debug(f"Rendered {len(lines)} lines ({dirs} directories, {files} files).")


def _report_failures(tree: DirectoryTree) -> None:
    """Summarize isolated branches on stderr; the per-path detail is logged by the builder."""
    if tree.ok:
        return
    count = len(tree.failures)
    noun, verb = ("entry", "was") if count == 1 else ("entries", "were")
    print(f"{count} {noun} could not be read and {verb} skipped.", file=sys.stderr)


def _detach_stdout() -> None:
    """
    Point the stdout descriptor at the null device.

    Buffered output still pending is then discarded by the interpreter's
    final flush instead of raising a second BrokenPipeError at exit.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
