"""Shared pytest fixtures for domaddr tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from domaddr.config.discovery import CONFIG_ENV_VAR
from domaddr.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty temp directory with no DOMADDR_* overrides.

    Keeps a stray ``domaddr.toml`` above the checkout (or in the user's
    environment) from leaking into settings discovery, and undoes the logging
    and telemetry setup that the CLI root performs.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for name in [n for n in os.environ if n.startswith("DOMADDR_")]:
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    pkg_level = logging.getLogger("domaddr").level
    yield
    disable_telemetry()
    root.handlers = handlers
    logging.getLogger("domaddr").setLevel(pkg_level)
