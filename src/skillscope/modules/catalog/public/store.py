"""Storage capability consumed by ingestion and queries.

Implementations must treat ``source_url`` (skills) and ``url`` (content) as
unique keys: ``upsert_*`` updates the matching row in place and assigns an
``id`` to new rows.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, Protocol, Sequence

from .types import ContentRecord, CrawlLog, SkillRecord

SkillOrder = Literal["first_seen_at", "mention_count", "none"]


class CatalogStore(Protocol):
    # skills
    def get_skill(self, skill_id: str) -> Optional[SkillRecord]: ...

    def get_skills(self, skill_ids: Sequence[str]) -> list[SkillRecord]: ...

    def get_skill_by_source_url(self, source_url: str) -> Optional[SkillRecord]: ...

    def upsert_skill(self, record: SkillRecord) -> SkillRecord: ...

    def list_skills(
        self,
        since: Optional[datetime] = None,
        order: SkillOrder = "none",
        limit: Optional[int] = None,
    ) -> list[SkillRecord]: ...

    def count_skills(self, since: Optional[datetime] = None) -> int: ...

    def nearest_skills(
        self, vector: Sequence[float], threshold: float, limit: int
    ) -> list[tuple[SkillRecord, float]]: ...

    # content
    def get_content_by_url(self, url: str) -> Optional[ContentRecord]: ...

    def upsert_content(self, record: ContentRecord) -> ContentRecord: ...

    def nearest_content(
        self, vector: Sequence[float], threshold: float, limit: int
    ) -> list[tuple[ContentRecord, float]]: ...

    # audit log
    def start_crawl_log(self, source: str) -> CrawlLog: ...

    def finish_crawl_log(self, log: CrawlLog) -> CrawlLog: ...

    def list_crawl_logs(self, limit: int = 20) -> list[CrawlLog]: ...


__all__ = ["CatalogStore", "SkillOrder"]
