"""Public API for the query module."""

from .internal.validation import MAX_QUERY_LENGTH, SORTS, WINDOWS, split_ids
from .public.service import QueryService
from .public.types import (
    ContentMatch,
    SearchResponse,
    SearchResult,
    SimilarSkill,
    SkillComparison,
    SkillDetailResponse,
    SkillView,
    TrendingResponse,
    TrendingSkill,
    UniqueFeatures,
)

__all__ = [
    "QueryService",
    "MAX_QUERY_LENGTH",
    "WINDOWS",
    "SORTS",
    "split_ids",
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
