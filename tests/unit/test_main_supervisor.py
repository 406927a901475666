from __future__ import annotations

"""
Unit tests for the Global Supervisor.

Verifies that unexpected exceptions escaping the CLI controller are
reported on stderr and converted into exit code 1.
"""

import sys
from unittest.mock import patch

import pytest


@pytest.fixture
def supervisor():
    original_hook = sys.excepthook
    from dirscope import main as entry
    yield entry
    sys.excepthook = original_hook


def test_unexpected_exception_returns_one(supervisor, capsys) -> None:
    with patch("dirscope.interface.cli.app.main", side_effect=RuntimeError("boom")):
        code = supervisor.main()

    err = capsys.readouterr().err
    assert code == 1
    assert "CRITICAL ERROR (DIRSCOPE)" in err
    assert "RuntimeError: boom" in err


def test_successful_run_passes_exit_code_through(supervisor) -> None:
    with patch("dirscope.interface.cli.app.main", return_value=0):
        assert supervisor.main() == 0
