"""Insert-or-update of candidates against the catalog store.

Every match counts as ``updated`` whether or not any value changed.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Optional, Sequence

from skillscope.modules.catalog import CatalogStore, ContentRecord, SkillRecord
from ..public.types import ContentCandidate, IngestResult, SkillCandidate

logger = logging.getLogger(__name__)

Embedding = Optional[list[float]]

# (exclusive rank bound, low, high) for listings without authoritative counts.
MENTION_TIERS = ((100, 20, 50), (300, 5, 20))
MENTION_TAIL = (1, 5)


def initial_mention_count(rank: int, rng: random.Random) -> int:
    """Display heuristic: earlier listing positions start with more mentions."""
    for bound, low, high in MENTION_TIERS:
        if rank < bound:
            return rng.randint(low, high)
    return rng.randint(*MENTION_TAIL)


def _skill_fields(candidate: SkillCandidate, embedding: Embedding, now: datetime) -> dict:
    return {
        "source_url": candidate.source_url,
        "name": candidate.name,
        "description": candidate.description,
        "full_instructions": candidate.full_instructions,
        "raw_content": candidate.raw_content,
        "tools_used": list(candidate.tools_used),
        "triggers": list(candidate.triggers),
        "source_type": candidate.source_type,
        "author": candidate.author,
        "category": candidate.category,
        "embedding": embedding,
        "last_crawled_at": now,
    }


def merge_skill(
    existing: Optional[SkillRecord],
    candidate: SkillCandidate,
    embedding: Embedding,
    *,
    now: datetime,
    rank: int,
    rng: random.Random,
) -> SkillRecord:
    """Record to write for ``candidate``; identity and history of ``existing`` survive."""
    fields = _skill_fields(candidate, embedding, now)

    if existing is not None:
        if candidate.mention_count is not None:
            fields["mention_count"] = candidate.mention_count
        if candidate.upvote_count is not None:
            fields["upvote_count"] = candidate.upvote_count
        return existing.model_copy(update=fields)

    mention_count = candidate.mention_count
    if mention_count is None:
        mention_count = candidate.initial_mention_count
    if mention_count is None:
        mention_count = initial_mention_count(rank, rng)

    return SkillRecord(
        **fields,
        first_seen_at=candidate.first_seen_at or now,
        mention_count=mention_count,
        upvote_count=candidate.upvote_count or 0,
        is_new=True if candidate.is_new is None else candidate.is_new,
    )


def upsert_skills(
    candidates: Sequence[SkillCandidate],
    embeddings: Sequence[Embedding],
    store: CatalogStore,
    *,
    now: datetime,
    rng: random.Random,
    found: Optional[int] = None,
) -> IngestResult:
    new = updated = 0
    for rank, (candidate, embedding) in enumerate(zip(candidates, embeddings)):
        try:
            existing = store.get_skill_by_source_url(candidate.source_url)
            record = merge_skill(existing, candidate, embedding, now=now, rank=rank, rng=rng)
            store.upsert_skill(record)
        except Exception as exc:
            logger.warning("Skipping %s: store error: %s", candidate.source_url, exc)
            continue
        if existing is None:
            new += 1
        else:
            updated += 1
    return IngestResult(
        found=len(candidates) if found is None else found, new=new, updated=updated
    )


def upsert_content(
    candidates: Sequence[ContentCandidate],
    embeddings: Sequence[Embedding],
    store: CatalogStore,
) -> IngestResult:
    new = updated = 0
    for candidate, embedding in zip(candidates, embeddings):
        fields = candidate.model_dump()
        fields["embedding"] = embedding
        try:
            existing = store.get_content_by_url(candidate.url)
            if existing is None:
                store.upsert_content(ContentRecord(**fields))
            else:
                store.upsert_content(existing.model_copy(update=fields))
        except Exception as exc:
            logger.warning("Skipping content %s: store error: %s", candidate.url, exc)
            continue
        if existing is None:
            new += 1
        else:
            updated += 1
    return IngestResult(found=len(candidates), new=new, updated=updated)


__all__ = [
    "MENTION_TIERS",
    "initial_mention_count",
    "merge_skill",
    "upsert_skills",
    "upsert_content",
]
