from datetime import datetime
from typing import Optional

from pydantic import Field

from skillscope.shared.types import ContentType, FrozenModel, SkillCategory, SourceType


class SkillLink(FrozenModel):
    """One document found in a source listing."""

    raw_url: str
    category: SkillCategory = SkillCategory.UNCATEGORIZED


class SkillCandidate(FrozenModel):
    """A normalized, store-ready skill minus identity and timestamps."""

    source_url: str
    name: str
    description: Optional[str] = None
    full_instructions: Optional[str] = None
    raw_content: Optional[str] = None
    tools_used: list[str] = Field(default_factory=list)
    triggers: list[str] = Field(default_factory=list)
    source_type: SourceType = SourceType.GITHUB
    author: Optional[str] = None
    category: SkillCategory = SkillCategory.UNCATEGORIZED
    embedding_text: str = Field(..., description="Text sent to the embedding provider")

    # Authoritative popularity: applied on insert and on update.
    mention_count: Optional[int] = Field(default=None, ge=0)
    upvote_count: Optional[int] = Field(default=None, ge=0)

    # Insert-only values; None falls back to the pipeline defaults.
    initial_mention_count: Optional[int] = Field(default=None, ge=0)
    is_new: Optional[bool] = None
    first_seen_at: Optional[datetime] = None


class ContentCandidate(FrozenModel):
    """A related-content item ready for upsert keyed by ``url``."""

    title: str
    content_type: ContentType
    description: Optional[str] = None
    url: str
    published_at: Optional[datetime] = None

    @property
    def embedding_text(self) -> str:
        return f"{self.title} | {self.description or ''}"


class IngestResult(FrozenModel):
    """Counts reported by one ingestion run."""

    found: int = 0
    new: int = 0
    updated: int = 0

    def combine(self, other: "IngestResult") -> "IngestResult":
        return IngestResult(
            found=self.found + other.found,
            new=self.new + other.new,
            updated=self.updated + other.updated,
        )


class CrawlSummary(FrozenModel):
    """Outcome of a full crawl across every source."""

    success: bool
    skills: IngestResult
    content: IngestResult
    resources: IngestResult
    completed_at: datetime


__all__ = [
    "SkillLink",
    "SkillCandidate",
    "ContentCandidate",
    "IngestResult",
    "CrawlSummary",
]
