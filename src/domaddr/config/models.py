"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, domaddr.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- domaddr.toml sections ---


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    allow_trailing_dot: bool = True


class RegistryConfig(BaseModel):
    """[registry] section.

    ``list_limit`` caps ``tld list`` output when no ``--limit`` is given;
    0 means unlimited.
    """

    model_config = {"frozen": True}

    list_limit: int = Field(default=0, ge=0)
    show_dates: bool = True


class DomaddrConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    parse: ParseConfig = Field(default_factory=ParseConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
