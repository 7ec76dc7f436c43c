"""
Configuration for the neo-catalog library.

Environment-driven settings (prefix ``CATALOG_``) for the label lookup caches,
data insight aggregation and logging.
"""
from functools import lru_cache
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Settings shared by the neo-catalog platform modules."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Label cache sizes (entries per entity type)
    tag_cache_max_entries: int = Field(default=100)
    classification_cache_max_entries: int = Field(default=25)
    glossary_cache_max_entries: int = Field(default=25)
    glossary_term_cache_max_entries: int = Field(default=100)

    # Absolute expiry after write, shared by all label caches
    label_cache_ttl_seconds: float = Field(default=120.0)  # 2 minutes

    # Data insight
    data_insight_date_format: str = Field(default="%Y-%m-%d")

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")

    @field_validator(
        "tag_cache_max_entries",
        "classification_cache_max_entries",
        "glossary_cache_max_entries",
        "glossary_term_cache_max_entries",
    )
    @classmethod
    def validate_max_entries(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Cache size must be at least 1")
        return v

    @field_validator("label_cache_ttl_seconds")
    @classmethod
    def validate_ttl(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Cache TTL must be positive")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"simple", "detailed", "json"}
        if v.lower() not in allowed:
            raise ValueError(f"Log format must be one of {sorted(allowed)}")
        return v.lower()

    @property
    def label_cache_sizes(self) -> Dict[str, int]:
        """Maximum entries keyed by entity type name."""
        return {
            "tag": self.tag_cache_max_entries,
            "classification": self.classification_cache_max_entries,
            "glossary": self.glossary_cache_max_entries,
            "glossaryTerm": self.glossary_term_cache_max_entries,
        }

    def max_entries_for(self, entity_type: str) -> int:
        """Get the configured cache size for an entity type."""
        key = getattr(entity_type, "value", entity_type)
        try:
            return self.label_cache_sizes[key]
        except KeyError:
            from ..core.exceptions import ConfigurationError
            raise ConfigurationError(
                f"No cache size configured for entity type {entity_type}"
            ) from None


@lru_cache()
def get_settings() -> CatalogSettings:
    """Get cached settings instance."""
    return CatalogSettings()
