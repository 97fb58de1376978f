"""Outward-facing response models. None of them carries an embedding."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from skillscope.modules.catalog import ContentRecord, SkillRecord
from skillscope.modules.skills import InstallInfo
from skillscope.shared.types import ContentType, FrozenModel, SkillCategory, SourceType


class SkillView(FrozenModel):
    id: str
    name: str
    description: Optional[str] = None
    full_instructions: Optional[str] = None
    raw_content: Optional[str] = None
    tools_used: list[str] = Field(default_factory=list)
    triggers: list[str] = Field(default_factory=list)
    source_url: str
    source_type: SourceType
    author: Optional[str] = None
    category: SkillCategory
    first_seen_at: datetime
    last_crawled_at: datetime
    mention_count: int
    upvote_count: int
    is_new: bool

    @classmethod
    def from_record(cls, record: SkillRecord, **extra):
        return cls(**record.model_dump(exclude={"embedding"}), **extra)


class ContentMatch(FrozenModel):
    """Related content with the similarity it was matched at."""

    id: str
    title: str
    content_type: ContentType
    description: Optional[str] = None
    url: str
    published_at: Optional[datetime] = None
    transcript: Optional[str] = None
    relevance_score: float

    @classmethod
    def from_record(cls, record: ContentRecord, similarity: float) -> "ContentMatch":
        return cls(**record.model_dump(exclude={"embedding"}), relevance_score=similarity)


class SearchResult(SkillView):
    relevance_score: float
    related_content: Optional[ContentMatch] = None


class SearchResponse(FrozenModel):
    results: list[SearchResult] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Candidates above the threshold")
    query: str = Field(..., description="Trimmed query")


class UniqueFeatures(FrozenModel):
    unique_tools: list[str] = Field(default_factory=list)
    unique_triggers: list[str] = Field(default_factory=list)


class SkillComparison(FrozenModel):
    skills: list[SkillView]
    similarity_matrix: dict[str, float] = Field(default_factory=dict)
    shared_tools: list[str] = Field(default_factory=list)
    shared_triggers: list[str] = Field(default_factory=list)
    unique_features: dict[str, UniqueFeatures] = Field(default_factory=dict)
    related_content: list[ContentMatch] = Field(default_factory=list)


class TrendingSkill(SkillView):
    hot_score: float
    related_content: Optional[ContentMatch] = None


class TrendingResponse(FrozenModel):
    skills: list[TrendingSkill] = Field(default_factory=list)
    window: str
    sort: str
    total: int = Field(..., ge=0)
    total_skills: int = Field(..., ge=0, description="Size of the whole catalog")


class SimilarSkill(FrozenModel):
    id: str
    name: str
    description: Optional[str] = None
    similarity: float


class SkillDetailResponse(FrozenModel):
    skill: SkillView
    related_content: list[ContentMatch] = Field(default_factory=list)
    similar_skills: list[SimilarSkill] = Field(default_factory=list)
    install: Optional[InstallInfo] = None


__all__ = [
    "SkillView",
    "ContentMatch",
    "SearchResult",
    "SearchResponse",
    "UniqueFeatures",
    "SkillComparison",
    "TrendingSkill",
    "TrendingResponse",
    "SimilarSkill",
    "SkillDetailResponse",
]
