"""Pytest configuration and fixtures for neo-catalog tests."""

import pytest

from neo_catalog.config.settings import CatalogSettings
from neo_catalog.platform.tags import EntityType, TagLabelCache
import neo_catalog.platform.tags.application.services.tag_label_cache as tag_label_cache_module

from .fakes import FakeClock, InMemoryRepository, entity


@pytest.fixture(autouse=True)
def reset_shared_label_cache(monkeypatch):
    """Isolate the process-wide tag label cache between tests."""
    monkeypatch.setattr(tag_label_cache_module, "_shared_cache", None)
    monkeypatch.setattr(tag_label_cache_module, "_shared_guard", None)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    """Default settings, ignoring any local .env file."""
    return CatalogSettings(_env_file=None)


@pytest.fixture
def repositories():
    """Repositories seeded with a small classification and glossary hierarchy."""
    return {
        EntityType.CLASSIFICATION: InMemoryRepository(
            EntityType.CLASSIFICATION,
            [entity("PII", mutually_exclusive=True), entity("Tier", mutually_exclusive=False)],
        ),
        EntityType.TAG: InMemoryRepository(
            EntityType.TAG,
            [
                entity("PII.Sensitive", mutually_exclusive=False),
                entity("PII.NonSensitive"),
                entity("Tier.Tier1", mutually_exclusive=True),
                entity("Tier.Tier1.Gold"),
            ],
        ),
        EntityType.GLOSSARY: InMemoryRepository(
            EntityType.GLOSSARY,
            [entity("Business", mutually_exclusive=False)],
        ),
        EntityType.GLOSSARY_TERM: InMemoryRepository(
            EntityType.GLOSSARY_TERM,
            [
                entity("Business.Revenue", mutually_exclusive=True),
                entity("Business.Revenue.Net"),
            ],
        ),
    }


@pytest.fixture
def label_cache(repositories, settings, clock):
    """Uninitialized tag label cache over the seeded repositories."""
    return TagLabelCache(repositories, settings=settings, clock=clock)
