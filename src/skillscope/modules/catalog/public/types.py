from datetime import datetime
from typing import Optional

from pydantic import Field

from skillscope.shared.types import (
    ContentType,
    CrawlStatus,
    FrozenModel,
    SkillCategory,
    SourceType,
)


class SkillRecord(FrozenModel):
    """One catalogued skill. ``source_url`` is the natural key."""

    id: str = Field(default="", description="Store-assigned identifier")
    source_url: str
    name: str = "Unknown"
    description: Optional[str] = None
    full_instructions: Optional[str] = None
    raw_content: Optional[str] = None
    tools_used: list[str] = Field(default_factory=list)
    triggers: list[str] = Field(default_factory=list)
    source_type: SourceType = SourceType.GITHUB
    author: Optional[str] = None
    category: SkillCategory = SkillCategory.UNCATEGORIZED
    first_seen_at: datetime
    last_crawled_at: datetime
    mention_count: int = Field(default=0, ge=0)
    upvote_count: int = Field(default=0, ge=0)
    is_new: bool = True
    embedding: Optional[list[float]] = Field(default=None, repr=False)


class ContentRecord(FrozenModel):
    """Related educational or media content. ``url`` is the natural key."""

    id: str = ""
    title: str
    content_type: ContentType
    description: Optional[str] = None
    url: str
    published_at: Optional[datetime] = None
    transcript: Optional[str] = None
    embedding: Optional[list[float]] = Field(default=None, repr=False)


class CrawlLog(FrozenModel):
    """Audit entry for one ingestion run."""

    id: str = ""
    source: str
    status: CrawlStatus = CrawlStatus.RUNNING
    started_at: datetime
    completed_at: Optional[datetime] = None
    skills_found: int = 0
    skills_new: int = 0
    skills_updated: int = 0
    error_message: Optional[str] = None


__all__ = ["SkillRecord", "ContentRecord", "CrawlLog"]
