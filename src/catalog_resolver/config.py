"""Configuration settings for the catalog resolver."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_resolver.models.enums import EntityType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Fuzzy label matching ─────────────────────────────────────────────────
    # Minimum similarity for a catalog entry to count as a fuzzy match
    resolution_fuzzy_threshold: float = Field(default=0.8, ge=0.0, le=1.0)

    # Flat confidence reported for a single fuzzy match (trust in
    # auto-acceptance, not lexical closeness)
    resolution_fuzzy_confidence: float = Field(default=0.85, ge=0.0, le=1.0)

    # ── Exact identifier matching ────────────────────────────────────────────
    # raw_value ids starting with this prefix are placeholders, never looked up
    resolution_ghost_prefix: str = "ghost-"

    # ── Suggestion classification ────────────────────────────────────────────
    # Entity types whose unresolved state blocks task submission
    resolution_blocking_entity_types: list[EntityType] = Field(
        default_factory=lambda: [EntityType.SPACE, EntityType.ASSET, EntityType.PERSON]
    )


settings = Settings()
