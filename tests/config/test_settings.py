"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from neo_catalog.config import CatalogSettings, get_settings
from neo_catalog.core.exceptions import ConfigurationError
from neo_catalog.platform.tags import EntityType


class TestCatalogSettings:

    def test_defaults(self, settings):
        assert settings.label_cache_sizes == {
            "tag": 100,
            "classification": 25,
            "glossary": 25,
            "glossaryTerm": 100,
        }
        assert settings.label_cache_ttl_seconds == 120.0
        assert settings.data_insight_date_format == "%Y-%m-%d"
        assert settings.log_format == "simple"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CATALOG_TAG_CACHE_MAX_ENTRIES", "7")
        monkeypatch.setenv("CATALOG_LABEL_CACHE_TTL_SECONDS", "5")
        monkeypatch.setenv("CATALOG_LOG_FORMAT", "JSON")

        settings = CatalogSettings(_env_file=None)

        assert settings.tag_cache_max_entries == 7
        assert settings.label_cache_ttl_seconds == 5.0
        assert settings.log_format == "json"

    @pytest.mark.parametrize("field,value", [
        ("tag_cache_max_entries", 0),
        ("glossary_term_cache_max_entries", -1),
        ("label_cache_ttl_seconds", 0),
        ("log_format", "xml"),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            CatalogSettings(_env_file=None, **{field: value})

    def test_max_entries_for_entity_type(self, settings):
        assert settings.max_entries_for(EntityType.GLOSSARY_TERM) == 100
        assert settings.max_entries_for(EntityType.CLASSIFICATION) == 25
        assert settings.max_entries_for("glossary") == 25

    def test_max_entries_for_unknown_type(self, settings):
        with pytest.raises(ConfigurationError):
            settings.max_entries_for("table")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
