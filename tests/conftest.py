from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from typer.testing import CliRunner

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolate_config(tmp_path: Path, monkeypatch: Any) -> Path:
    """Point config to a temp path so tests don't touch user state."""
    cfg_path = tmp_path / "config.toml"
    monkeypatch.setenv("TIL_CONFIG", str(cfg_path))
    monkeypatch.delenv("TIL_NOTES_DIR", raising=False)
    monkeypatch.delenv("TIL_LOG_LEVEL", raising=False)
    return cfg_path


@pytest.fixture
def notes_root(tmp_path: Path, monkeypatch: Any) -> Path:
    """Send every note written through the CLI into a temp directory."""
    root = tmp_path / "notes"
    monkeypatch.setenv("TIL_NOTES_DIR", str(root))
    return root


@pytest.fixture(autouse=True)
def capture_console(monkeypatch: Any) -> Console:
    """Use an in-memory Rich console during tests."""
    test_console = Console(record=True, width=200)
    import til.commands.notes as notes_cmd
    import til.core.console as core_console
    import til.main as til_main

    monkeypatch.setattr(core_console, "console", test_console)
    monkeypatch.setattr(til_main, "console", test_console)
    monkeypatch.setattr(notes_cmd, "console", test_console)
    return test_console
