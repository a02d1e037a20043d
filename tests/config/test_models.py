"""Tests for config models: defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from domaddr.config.models import DomaddrConfig, ParseConfig, RegistryConfig


class TestDefaults:
    def test_parse_section(self) -> None:
        assert ParseConfig().allow_trailing_dot is True

    def test_registry_section(self) -> None:
        cfg = RegistryConfig()
        assert cfg.list_limit == 0
        assert cfg.show_dates is True

    def test_root(self) -> None:
        cfg = DomaddrConfig()
        assert cfg.parse == ParseConfig()
        assert cfg.registry == RegistryConfig()


class TestValidation:
    def test_sparse_override(self) -> None:
        cfg = DomaddrConfig.model_validate({"registry": {"list_limit": 10}})
        assert cfg.registry.list_limit == 10
        assert cfg.registry.show_dates is True

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RegistryConfig(list_limit=-1)

    def test_frozen(self) -> None:
        cfg = ParseConfig()
        with pytest.raises(ValidationError):
            cfg.allow_trailing_dot = False  # type: ignore[misc]
