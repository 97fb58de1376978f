"""Shared pytest fixtures: an in-memory catalog store and a deterministic embedder."""

from __future__ import annotations

import math
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Sequence

import pytest

from skillscope.modules.catalog import ContentRecord, CrawlLog, SkillRecord
from skillscope.modules.embeddings import EmbeddingClient
from skillscope.modules.ranking import cosine_similarity
from skillscope.shared.config import Config
from skillscope.shared.types import ContentType, CrawlStatus, SkillCategory, SourceType

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

# One axis per keyword; text mentioning none of them lands on the last axis.
KEYWORDS = ("deploy", "email", "review", "security")
DIMENSIONS = len(KEYWORDS) + 1


def keyword_vector(text: str) -> list[float]:
    lowered = text.lower()
    vector = [1.0 if word in lowered else 0.0 for word in KEYWORDS]
    vector.append(0.0 if any(vector) else 1.0)
    return vector


class FakeStore:
    """In-memory CatalogStore."""

    def __init__(self):
        self.skills: dict[str, SkillRecord] = {}
        self.content: dict[str, ContentRecord] = {}
        self.logs: dict[str, CrawlLog] = {}
        self.fail_nearest_content = False
        self.fail_upsert_urls: set[str] = set()
        self.list_calls: list[dict] = []

    # skills
    def get_skill(self, skill_id):
        return self.skills.get(skill_id)

    def get_skills(self, skill_ids):
        return [self.skills[i] for i in skill_ids if i in self.skills]

    def get_skill_by_source_url(self, source_url):
        return next((r for r in self.skills.values() if r.source_url == source_url), None)

    def upsert_skill(self, record):
        if record.source_url in self.fail_upsert_urls:
            raise RuntimeError("disk full")
        existing = self.get_skill_by_source_url(record.source_url)
        if existing is not None:
            record = record.model_copy(update={"id": existing.id})
        elif not record.id:
            record = record.model_copy(update={"id": uuid.uuid4().hex[:8]})
        self.skills[record.id] = record
        return record

    def list_skills(self, since=None, order="none", limit=None):
        self.list_calls.append({"since": since, "order": order, "limit": limit})
        records = [r for r in self.skills.values() if since is None or r.first_seen_at >= since]
        if order != "none":
            records.sort(key=lambda r: getattr(r, order), reverse=True)
        return records[:limit] if limit is not None else records

    def count_skills(self, since=None):
        return len([r for r in self.skills.values() if since is None or r.first_seen_at >= since])

    def _nearest(self, records, vector, threshold, limit):
        scored = []
        for record in records:
            if record.embedding is None:
                continue
            score = cosine_similarity(vector, record.embedding)
            if not math.isnan(score) and score >= threshold:
                scored.append((record, score))
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return scored[:limit]

    def nearest_skills(self, vector, threshold, limit):
        return self._nearest(list(self.skills.values()), vector, threshold, limit)

    # content
    def get_content_by_url(self, url):
        return next((r for r in self.content.values() if r.url == url), None)

    def upsert_content(self, record):
        existing = self.get_content_by_url(record.url)
        if existing is not None:
            record = record.model_copy(update={"id": existing.id})
        elif not record.id:
            record = record.model_copy(update={"id": uuid.uuid4().hex[:8]})
        self.content[record.id] = record
        return record

    def nearest_content(self, vector, threshold, limit):
        if self.fail_nearest_content:
            raise RuntimeError("content index offline")
        return self._nearest(list(self.content.values()), vector, threshold, limit)

    # audit log
    def start_crawl_log(self, source):
        log = CrawlLog(
            id=uuid.uuid4().hex[:8], source=source, status=CrawlStatus.RUNNING, started_at=NOW
        )
        self.logs[log.id] = log
        return log

    def finish_crawl_log(self, log):
        self.logs[log.id] = log
        return log

    def list_crawl_logs(self, limit=20):
        return list(self.logs.values())[:limit]


def build_skill(
    skill_id: str,
    embedding: Optional[Sequence[float]] = None,
    *,
    name: Optional[str] = None,
    tools: Sequence[str] = (),
    triggers: Sequence[str] = (),
    first_seen_at: datetime = NOW,
    mention_count: int = 10,
    source_type: SourceType = SourceType.GITHUB,
    source_url: Optional[str] = None,
    category: SkillCategory = SkillCategory.BUILDING_AGENTS,
) -> SkillRecord:
    return SkillRecord(
        id=skill_id,
        source_url=source_url or f"https://example.com/skills/{skill_id}/SKILL.md",
        name=name or skill_id,
        description=f"{skill_id} description",
        full_instructions="Do the thing.",
        raw_content="---\nname: x\n---\nDo the thing.",
        tools_used=list(tools),
        triggers=list(triggers),
        source_type=source_type,
        category=category,
        first_seen_at=first_seen_at,
        last_crawled_at=first_seen_at,
        mention_count=mention_count,
        embedding=list(embedding) if embedding is not None else None,
    )


def build_content(
    url: str, embedding: Optional[Sequence[float]], title: str = "Episode"
) -> ContentRecord:
    return ContentRecord(
        title=title,
        content_type=ContentType.PODCAST,
        description=f"{title} notes",
        url=url,
        published_at=NOW - timedelta(days=3),
        embedding=list(embedding) if embedding is not None else None,
    )


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(
        db_path=tmp_path / "catalog.lancedb",
        embedding_provider="none",
        embedding_dimensions=DIMENSIONS,
        embedding_backoff_seconds=0.0,
    )


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def embedder(config: Config) -> EmbeddingClient:
    """EmbeddingClient backed by keyword vectors instead of a provider."""
    return EmbeddingClient(
        config,
        batch_fn=lambda texts: [keyword_vector(t) for t in texts],
        sleep=lambda _: None,
    )


@pytest.fixture
def disabled_embedder(config: Config) -> EmbeddingClient:
    return EmbeddingClient(config)


@pytest.fixture
def make_skill():
    return build_skill


@pytest.fixture
def make_content():
    return build_content
