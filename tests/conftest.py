"""Shared test fixtures for oascompat.

Provides fixture documents, config isolation, output state management, and a
CLI runner. Fixtures are discovered by pytest automatically.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from oascompat import output as output_module
from oascompat.output import OutputFormat, OutputManager, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without a global OutputManager.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time; CliRunner swaps those streams per invocation.
    monkeypatch restores the previous value after the test.
    """
    monkeypatch.setattr(output_module, "_output", None)


# ---------------------------------------------------------------------------
# Spec fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_raw() -> dict[str, Any]:
    """Raw petstore 3.1 spec dict (no webhooks)."""
    with open(FIXTURES_DIR / "petstore.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def petstore_path() -> Path:
    return FIXTURES_DIR / "petstore.json"


@pytest.fixture
def webhooks_text() -> str:
    """Raw text of a 3.1 spec with a ``webhooks`` section."""
    return (FIXTURES_DIR / "webhooks.json").read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Forces the XDG code path, points XDG_CONFIG_HOME at tmp_path, and clears
    the OASCOMPAT_* environment overrides.

    Returns:
        The ``oascompat`` config directory under tmp_path.
    """
    monkeypatch.setattr("oascompat.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in ["OASCOMPAT_MAX_SCHEMA_DEPTH", "OASCOMPAT_OUTPUT"]:
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "config" / "oascompat"


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def json_output() -> OutputManager:
    """Install a JSON-format OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.JSON)
    set_output(output)
    return output


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
