"""Shared configuration for SkillScope.

The Config class is immutable, validated via pydantic-settings, and designed
to be passed explicitly (no global singleton). Environment variables are
prefixed with SKILLSCOPE_ (e.g., SKILLSCOPE_DB_PATH).
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SKILLSCOPE_HOME = Path("~/.skillscope").expanduser()

DEFAULT_SKILLS_INDEX_URL = (
    "https://raw.githubusercontent.com/VoltAgent/awesome-openclaw-skills/main/README.md"
)
DEFAULT_CONTENT_FEED_URL = "https://anchor.fm/s/f7cac464/podcast/rss"


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SKILLSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Storage
    db_path: Path = Field(
        default=SKILLSCOPE_HOME / "catalog.lancedb",
        description="LanceDB database path",
    )

    # Embeddings
    embedding_provider: Literal["none", "openai", "gemini"] = Field(
        default="none",
        description="Embedding provider for vector search",
    )
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key",
        validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key"),
    )
    openai_embedding_model: str = Field(
        default="text-embedding-3-small",
        validation_alias=AliasChoices("OPENAI_EMBEDDING_MODEL", "openai_embedding_model"),
    )
    gemini_api_key: str | None = Field(
        default=None,
        description="Gemini API key",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "gemini_api_key"),
    )
    gemini_embedding_model: str = Field(
        default="gemini-embedding-001",
        validation_alias=AliasChoices("GEMINI_EMBEDDING_MODEL", "gemini_embedding_model"),
    )
    embedding_dimensions: int = Field(
        default=1536, ge=1, description="Vector length stored in the catalog"
    )
    embedding_max_chars: int = Field(
        default=8000, ge=1, description="Per-input truncation before submission"
    )
    embedding_batch_size: int = Field(
        default=100, ge=1, le=2048, description="Inputs per provider call"
    )
    embedding_max_attempts: int = Field(
        default=3, ge=1, description="Attempts per batch on rate-limit responses"
    )
    embedding_backoff_seconds: float = Field(
        default=1.0, ge=0.0, description="Base delay for exponential backoff"
    )
    embedding_max_backoff_seconds: float = Field(default=20.0, ge=0.0)
    embedding_timeout_seconds: float = Field(
        default=30.0, gt=0.0, description="Per-request provider timeout"
    )

    # Ingestion
    skills_index_url: str = Field(
        default=DEFAULT_SKILLS_INDEX_URL,
        description="README listing skill collections",
    )
    content_feed_url: str = Field(
        default=DEFAULT_CONTENT_FEED_URL,
        description="Podcast RSS feed for the related-content catalog",
    )
    listing_cap: int = Field(
        default=500, ge=1, description="Max documents considered per run"
    )
    fetch_concurrency: int = Field(
        default=10, ge=1, le=64, description="Documents fetched in flight"
    )
    listing_timeout_seconds: float = Field(default=15.0, gt=0.0)
    fetch_timeout_seconds: float = Field(default=8.0, gt=0.0)
    feed_timeout_seconds: float = Field(default=10.0, gt=0.0)
    new_window_days: int = Field(
        default=7, ge=0, description="Seeded records younger than this are marked new"
    )
    user_agent: str = Field(default="SkillScope/0.3 (+catalog crawler)")

    # Query
    search_threshold: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Minimum similarity for search hits"
    )
    similar_threshold: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Minimum similarity for similar skills"
    )
    content_threshold: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Minimum similarity for related content"
    )
    trending_candidate_cap: int = Field(
        default=200, ge=1, description="Candidates scored for the hot sort"
    )

    # HTTP
    crawl_secret: str | None = Field(
        default=None,
        description="Bearer token required by the crawl endpoint",
        validation_alias=AliasChoices("SKILLSCOPE_CRAWL_SECRET", "CRON_SECRET", "crawl_secret"),
    )
    rate_limit: str = Field(default="60/minute", description="Per-client API rate limit")

    log_level: str = Field(default="INFO")

    @field_validator("db_path", mode="before")
    @classmethod
    def expand_path(cls, value: str | Path) -> Path:
        return Path(value).expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def validate_provider_keys(self):
        if self.embedding_provider == "openai" and not self.openai_api_key:
            raise ValueError(
                "OPENAI_API_KEY is required when embedding_provider='openai'"
            )
        if self.embedding_provider == "gemini" and not self.gemini_api_key:
            raise ValueError(
                "GEMINI_API_KEY (or GOOGLE_API_KEY) is required when embedding_provider='gemini'"
            )
        return self

    def with_overrides(self, **kwargs) -> "Config":
        """Create new Config with overrides (immutable pattern)."""
        return self.model_copy(update=kwargs)


__all__ = ["Config", "SKILLSCOPE_HOME"]
