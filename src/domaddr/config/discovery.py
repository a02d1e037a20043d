"""Locate ``domaddr.toml``: ``$DOMADDR_CONFIG`` first, then walk up from cwd."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "domaddr.toml"
CONFIG_ENV_VAR = "DOMADDR_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``domaddr.toml`` at or above *start*, or None.

    A set ``DOMADDR_CONFIG`` wins outright; if it names a missing file no
    walk-up happens and None is returned.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
