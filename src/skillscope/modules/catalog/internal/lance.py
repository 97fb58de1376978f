"""LanceDB-backed catalog store."""

from __future__ import annotations

import logging
import math
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

import lancedb
import pyarrow as pa

from skillscope.shared.config import Config
from skillscope.shared.types import CrawlStatus
from skillscope.shared.utils import escape_sql_string, to_iso, utcnow
from ..public.store import SkillOrder
from ..public.types import ContentRecord, CrawlLog, SkillRecord
from .schema import (
    CONTENT_TABLE,
    CRAWL_LOGS_TABLE,
    SKILLS_TABLE,
    VECTOR_COLUMN,
    content_schema,
    content_to_row,
    crawl_log_to_row,
    crawl_logs_schema,
    row_to_content,
    row_to_crawl_log,
    row_to_skill,
    skill_to_row,
    skills_schema,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _new_id() -> str:
    return str(uuid.uuid4())


def _quote(value: str) -> str:
    return f"'{escape_sql_string(value)}'"


class LanceCatalogStore:
    """Catalog tables in a local LanceDB directory.

    Upserts are ``merge_insert`` on the natural key, so re-ingesting a URL
    rewrites the existing row instead of adding a second one.
    """

    def __init__(self, config: Config):
        self.config = config
        self.db_path = config.db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.db = lancedb.connect(self.db_path)

        dims = config.embedding_dimensions
        self._schemas: Dict[str, pa.Schema] = {
            SKILLS_TABLE: skills_schema(dims),
            CONTENT_TABLE: content_schema(dims),
            CRAWL_LOGS_TABLE: crawl_logs_schema(),
        }
        self._tables = {
            name: self.db.create_table(name, schema=schema, exist_ok=True)
            for name, schema in self._schemas.items()
        }

    # --- Table helpers ---
    def _table(self, name: str):
        return self._tables[name]

    def _select(
        self,
        name: str,
        where: Optional[str] = None,
        limit: Optional[int] = None,
        columns: Optional[List[str]] = None,
    ) -> List[Dict[str, Any]]:
        table = self._table(name)
        # Plain scans default to a small limit; ask for every row explicitly.
        n = limit if limit is not None else table.count_rows(where)
        if n <= 0:
            return []
        query = table.search()
        if where:
            query = query.where(where)
        if columns:
            query = query.select(columns)
        return query.limit(n).to_list()

    def _merge(self, name: str, key: str, row: Dict[str, Any]) -> None:
        data = pa.Table.from_pylist([row], schema=self._schemas[name])
        (
            self._table(name)
            .merge_insert(key)
            .when_matched_update_all()
            .when_not_matched_insert_all()
            # Records without an embedding are stored with a null vector.
            .execute(data, on_bad_vectors="null")
        )

    def _nearest(
        self,
        name: str,
        vector: Sequence[float],
        threshold: float,
        limit: int,
        convert: Callable[[Dict[str, Any]], T],
    ) -> List[tuple[T, float]]:
        table = self._table(name)
        if limit <= 0 or table.count_rows() == 0:
            return []
        rows = (
            table
            .search(list(vector), vector_column_name=VECTOR_COLUMN)
            .distance_type("cosine")
            .where(f"{VECTOR_COLUMN} IS NOT NULL", prefilter=True)
            .limit(limit)
            .to_list()
        )
        results: List[tuple[T, float]] = []
        for row in rows:
            distance = row.get("_distance")
            if distance is None or math.isnan(distance):
                continue
            similarity = 1.0 - float(distance)
            if similarity >= threshold:
                results.append((convert(row), similarity))
        results.sort(key=lambda pair: pair[1], reverse=True)
        return results

    # --- Skills ---
    def get_skill(self, skill_id: str) -> Optional[SkillRecord]:
        rows = self._select(SKILLS_TABLE, f"id = {_quote(skill_id)}", limit=1)
        return row_to_skill(rows[0]) if rows else None

    def get_skills(self, skill_ids: Sequence[str]) -> List[SkillRecord]:
        if not skill_ids:
            return []
        ids = ", ".join(_quote(i) for i in skill_ids)
        return [row_to_skill(r) for r in self._select(SKILLS_TABLE, f"id IN ({ids})")]

    def get_skill_by_source_url(self, source_url: str) -> Optional[SkillRecord]:
        rows = self._select(SKILLS_TABLE, f"source_url = {_quote(source_url)}", limit=1)
        return row_to_skill(rows[0]) if rows else None

    def upsert_skill(self, record: SkillRecord) -> SkillRecord:
        if not record.id:
            existing = self.get_skill_by_source_url(record.source_url)
            record = record.model_copy(update={"id": existing.id if existing else _new_id()})
        self._merge(SKILLS_TABLE, "source_url", skill_to_row(record))
        return record

    def list_skills(
        self,
        since: Optional[datetime] = None,
        order: SkillOrder = "none",
        limit: Optional[int] = None,
    ) -> List[SkillRecord]:
        where = f"first_seen_at >= {_quote(to_iso(since))}" if since else None
        if order == "none":
            return [row_to_skill(r) for r in self._select(SKILLS_TABLE, where, limit=limit)]

        # No ordered scans in LanceDB: rank on the key column alone, then load the top rows.
        keys = self._select(SKILLS_TABLE, where, columns=["id", order])
        keys.sort(key=lambda row: row[order], reverse=True)
        top = [row["id"] for row in (keys[:limit] if limit is not None else keys)]
        by_id = {record.id: record for record in self.get_skills(top)}
        return [by_id[i] for i in top if i in by_id]

    def count_skills(self, since: Optional[datetime] = None) -> int:
        if since is None:
            return self._table(SKILLS_TABLE).count_rows()
        return self._table(SKILLS_TABLE).count_rows(f"first_seen_at >= {_quote(to_iso(since))}")

    def nearest_skills(
        self, vector: Sequence[float], threshold: float, limit: int
    ) -> List[tuple[SkillRecord, float]]:
        return self._nearest(SKILLS_TABLE, vector, threshold, limit, row_to_skill)

    # --- Content ---
    def get_content_by_url(self, url: str) -> Optional[ContentRecord]:
        rows = self._select(CONTENT_TABLE, f"url = {_quote(url)}", limit=1)
        return row_to_content(rows[0]) if rows else None

    def upsert_content(self, record: ContentRecord) -> ContentRecord:
        if not record.id:
            existing = self.get_content_by_url(record.url)
            record = record.model_copy(update={"id": existing.id if existing else _new_id()})
        self._merge(CONTENT_TABLE, "url", content_to_row(record))
        return record

    def nearest_content(
        self, vector: Sequence[float], threshold: float, limit: int
    ) -> List[tuple[ContentRecord, float]]:
        return self._nearest(CONTENT_TABLE, vector, threshold, limit, row_to_content)

    # --- Crawl logs ---
    def start_crawl_log(self, source: str) -> CrawlLog:
        log = CrawlLog(
            id=_new_id(), source=source, status=CrawlStatus.RUNNING, started_at=utcnow()
        )
        self._merge(CRAWL_LOGS_TABLE, "id", crawl_log_to_row(log))
        return log

    def finish_crawl_log(self, log: CrawlLog) -> CrawlLog:
        self._merge(CRAWL_LOGS_TABLE, "id", crawl_log_to_row(log))
        return log

    def list_crawl_logs(self, limit: int = 20) -> List[CrawlLog]:
        logs = [row_to_crawl_log(r) for r in self._select(CRAWL_LOGS_TABLE)]
        logs.sort(key=lambda log: log.started_at, reverse=True)
        return logs[:limit]


__all__ = ["LanceCatalogStore"]
