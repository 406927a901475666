from __future__ import annotations

"""
Configuration Domain Defaults.

Every invocation is independent: there is no configuration file and no
environment lookup. The runtime configuration is a plain dictionary built
from these defaults and overridden by command-line flags.
"""

import os
from typing import Any, Dict


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": os.getcwd(),

        # Traversal
        "recursive": False,
        "sort_entries": True,
        "fail_fast": False,
        "workers": None,

        # Display
        "long_format": False,
        "color": "auto",

        # Diagnostics
        "verbose": False,
        "log_file": "",
    }
