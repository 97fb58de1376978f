"""Search, compare, trending and detail over the catalog.

Primary lookups propagate their errors. Secondary enrichment (related
content, similar skills) is logged and degrades to an empty result.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from skillscope.modules.catalog import CatalogStore, SkillRecord
from skillscope.modules.embeddings import EmbeddingClient
from skillscope.modules.ranking import (
    age_in_days,
    average_vectors,
    hot_score,
    shared_features,
    similarity_matrix,
    unique_features,
)
from skillscope.modules.skills import get_install_info
from skillscope.shared.config import Config
from skillscope.shared.errors import NotFoundError, ServiceUnavailableError
from skillscope.shared.utils import utcnow
from ..internal.validation import (
    SEARCH_LIMIT,
    TRENDING_LIMIT,
    clamp,
    normalize_ids,
    normalize_query,
    validate_sort,
    validate_window,
)
from .types import (
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

logger = logging.getLogger(__name__)

DETAIL_CONTENT_COUNT = 5
COMPARE_CONTENT_COUNT = 5
SIMILAR_SKILLS_COUNT = 5
TRENDING_CONTENT_TOP = 5


class QueryService:
    def __init__(self, store: CatalogStore, embedder: EmbeddingClient, config: Config):
        self.store = store
        self.embedder = embedder
        self.config = config

    # --- Enrichment helpers ---
    def _embed_query(self, text: str) -> List[float]:
        vector = self.embedder.embed(text) if self.embedder.enabled else None
        if vector is None:
            raise ServiceUnavailableError(
                "Semantic search needs an embedding provider "
                "(set SKILLSCOPE_EMBEDDING_PROVIDER to 'openai' or 'gemini')"
            )
        return vector

    def _related_content(self, vector: Optional[Sequence[float]], count: int) -> List[ContentMatch]:
        if vector is None:
            return []
        try:
            matches = self.store.nearest_content(vector, self.config.content_threshold, count)
        except Exception as exc:
            logger.warning("Related content lookup failed: %s", exc)
            return []
        return [ContentMatch.from_record(record, score) for record, score in matches]

    def _related_from_average(
        self, vectors: Iterable[Optional[Sequence[float]]], count: int
    ) -> List[ContentMatch]:
        present = [v for v in vectors if v is not None]
        if not present:
            return []
        try:
            average = average_vectors(present)
        except ValueError as exc:
            logger.warning("Cannot average embeddings for related content: %s", exc)
            return []
        return self._related_content(average, count)

    def _similar_skills(self, record: SkillRecord) -> List[SimilarSkill]:
        if record.embedding is None:
            return []
        try:
            matches = self.store.nearest_skills(
                record.embedding, self.config.similar_threshold, SIMILAR_SKILLS_COUNT + 1
            )
        except Exception as exc:
            logger.warning("Similar skills lookup failed for %s: %s", record.id, exc)
            return []
        similar = [
            SimilarSkill(id=r.id, name=r.name, description=r.description, similarity=score)
            for r, score in matches
            if r.id != record.id
        ]
        return similar[:SIMILAR_SKILLS_COUNT]

    # --- Operations ---
    def search(self, q: Optional[str], limit: int = 10, offset: int = 0) -> SearchResponse:
        query = normalize_query(q)
        limit = clamp(limit, *SEARCH_LIMIT)
        offset = max(offset, 0)

        vector = self._embed_query(query)
        matches = self.store.nearest_skills(vector, self.config.search_threshold, limit + offset)
        page = matches[offset:offset + limit]

        shared = self._related_content(vector, 1)
        related = shared[0] if shared else None
        results = [
            SearchResult.from_record(
                record.model_copy(update={"raw_content": None}),
                relevance_score=score,
                related_content=related,
            )
            for record, score in page
        ]
        return SearchResponse(results=results, total=len(matches), query=query)

    def compare(self, ids: Iterable[str]) -> SkillComparison:
        skill_ids = normalize_ids(ids)
        found = {record.id: record for record in self.store.get_skills(skill_ids)}
        missing = [i for i in skill_ids if i not in found]
        if missing:
            raise NotFoundError(missing)
        records = [found[i] for i in skill_ids]

        tools = [r.tools_used for r in records]
        triggers = [r.triggers for r in records]
        return SkillComparison(
            skills=[SkillView.from_record(r) for r in records],
            similarity_matrix=similarity_matrix([(r.id, r.embedding) for r in records]),
            shared_tools=shared_features(tools),
            shared_triggers=shared_features(triggers),
            unique_features={
                r.id: UniqueFeatures(
                    unique_tools=unique_features(tools, i),
                    unique_triggers=unique_features(triggers, i),
                )
                for i, r in enumerate(records)
            },
            related_content=self._related_from_average(
                (r.embedding for r in records), COMPARE_CONTENT_COUNT
            ),
        )

    def trending(
        self,
        window: str = "7d",
        sort: str = "hot",
        limit: int = 20,
        now: Optional[datetime] = None,
    ) -> TrendingResponse:
        span = validate_window(window)
        sort = validate_sort(sort)
        limit = clamp(limit, *TRENDING_LIMIT)
        now = now or utcnow()
        since = now - span

        if sort == "hot":
            records = self.store.list_skills(
                since=since, order="none", limit=self.config.trending_candidate_cap
            )
        else:
            order = "first_seen_at" if sort == "new" else "mention_count"
            records = self.store.list_skills(since=since, order=order, limit=limit)

        scored = [
            (r, hot_score(r.mention_count, age_in_days(r.first_seen_at, now))) for r in records
        ]
        if sort == "hot":
            scored.sort(key=lambda pair: pair[1], reverse=True)
            scored = scored[:limit]

        top = scored[:TRENDING_CONTENT_TOP]
        shared = self._related_from_average((r.embedding for r, _ in top), 1)
        related = shared[0] if shared else None

        skills = [
            TrendingSkill.from_record(
                record,
                hot_score=score,
                related_content=related if i < TRENDING_CONTENT_TOP else None,
            )
            for i, (record, score) in enumerate(scored)
        ]
        return TrendingResponse(
            skills=skills,
            window=window,
            sort=sort,
            total=len(skills),
            total_skills=self.store.count_skills(),
        )

    def detail(self, skill_id: str) -> SkillDetailResponse:
        record = self.store.get_skill(skill_id)
        if record is None:
            raise NotFoundError([skill_id])
        return SkillDetailResponse(
            skill=SkillView.from_record(record),
            related_content=self._related_content(record.embedding, DETAIL_CONTENT_COUNT),
            similar_skills=self._similar_skills(record),
            install=get_install_info(record.source_url, record.source_type),
        )


__all__ = ["QueryService"]
