"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalog_resolver.config import Settings
from catalog_resolver.models import EntityType


class TestSettings:
    """Tests for Settings defaults and overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "RESOLUTION_FUZZY_THRESHOLD",
            "RESOLUTION_FUZZY_CONFIDENCE",
            "RESOLUTION_GHOST_PREFIX",
            "RESOLUTION_BLOCKING_ENTITY_TYPES",
        ):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.resolution_fuzzy_threshold == 0.8
        assert config.resolution_fuzzy_confidence == 0.85
        assert config.resolution_ghost_prefix == "ghost-"
        assert config.resolution_blocking_entity_types == [
            EntityType.SPACE,
            EntityType.ASSET,
            EntityType.PERSON,
        ]

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESOLUTION_FUZZY_THRESHOLD", "0.9")
        monkeypatch.setenv("RESOLUTION_GHOST_PREFIX", "tmp-")

        config = Settings(_env_file=None)

        assert config.resolution_fuzzy_threshold == 0.9
        assert config.resolution_ghost_prefix == "tmp-"

    def test_blocking_types_from_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESOLUTION_BLOCKING_ENTITY_TYPES", '["space", "team"]')

        config = Settings(_env_file=None)

        assert config.resolution_blocking_entity_types == [EntityType.SPACE, EntityType.TEAM]

    @pytest.mark.parametrize("value", ["1.5", "-0.1"])
    def test_threshold_out_of_range(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("RESOLUTION_FUZZY_THRESHOLD", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_unknown_blocking_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESOLUTION_BLOCKING_ENTITY_TYPES", '["vendor"]')
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
