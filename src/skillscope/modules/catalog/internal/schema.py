"""Arrow schemas and row conversion for the LanceDB tables.

Timestamps are stored as fixed-width ISO-8601 UTC strings so ``>=`` filters
compare chronologically.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pyarrow as pa

from skillscope.shared.utils import from_iso, to_iso
from ..public.types import ContentRecord, CrawlLog, SkillRecord

SKILLS_TABLE = "skills"
CONTENT_TABLE = "aidb_content"
CRAWL_LOGS_TABLE = "crawl_logs"
VECTOR_COLUMN = "vector"


def _vector_field(dimensions: int) -> pa.Field:
    return pa.field(VECTOR_COLUMN, pa.list_(pa.float32(), dimensions), nullable=True)


def skills_schema(dimensions: int) -> pa.Schema:
    return pa.schema(
        [
            pa.field("id", pa.string(), nullable=False),
            pa.field("source_url", pa.string(), nullable=False),
            pa.field("name", pa.string()),
            pa.field("description", pa.string()),
            pa.field("full_instructions", pa.string()),
            pa.field("raw_content", pa.string()),
            pa.field("tools_used", pa.list_(pa.string())),
            pa.field("triggers", pa.list_(pa.string())),
            pa.field("source_type", pa.string()),
            pa.field("author", pa.string()),
            pa.field("category", pa.string()),
            pa.field("first_seen_at", pa.string()),
            pa.field("last_crawled_at", pa.string()),
            pa.field("mention_count", pa.int64()),
            pa.field("upvote_count", pa.int64()),
            pa.field("is_new", pa.bool_()),
            _vector_field(dimensions),
        ]
    )


def content_schema(dimensions: int) -> pa.Schema:
    return pa.schema(
        [
            pa.field("id", pa.string(), nullable=False),
            pa.field("title", pa.string()),
            pa.field("content_type", pa.string()),
            pa.field("description", pa.string()),
            pa.field("url", pa.string(), nullable=False),
            pa.field("published_at", pa.string()),
            pa.field("transcript", pa.string()),
            _vector_field(dimensions),
        ]
    )


def crawl_logs_schema() -> pa.Schema:
    return pa.schema(
        [
            pa.field("id", pa.string(), nullable=False),
            pa.field("source", pa.string()),
            pa.field("status", pa.string()),
            pa.field("started_at", pa.string()),
            pa.field("completed_at", pa.string()),
            pa.field("skills_found", pa.int64()),
            pa.field("skills_new", pa.int64()),
            pa.field("skills_updated", pa.int64()),
            pa.field("error_message", pa.string()),
        ]
    )


def _maybe_iso(value) -> Optional[str]:
    return to_iso(value) if value is not None else None


def _maybe_datetime(value: Optional[str]):
    return from_iso(value) if value else None


def _vector(value) -> Optional[list[float]]:
    return [float(x) for x in value] if value is not None else None


def skill_to_row(record: SkillRecord) -> Dict[str, Any]:
    row = record.model_dump(exclude={"embedding"})
    row.update(
        source_type=record.source_type.value,
        category=record.category.value,
        first_seen_at=to_iso(record.first_seen_at),
        last_crawled_at=to_iso(record.last_crawled_at),
    )
    row[VECTOR_COLUMN] = record.embedding
    return row


def row_to_skill(row: Dict[str, Any]) -> SkillRecord:
    data = {k: v for k, v in row.items() if not k.startswith("_")}
    data["embedding"] = _vector(data.pop(VECTOR_COLUMN, None))
    data["tools_used"] = list(data.get("tools_used") or [])
    data["triggers"] = list(data.get("triggers") or [])
    data["first_seen_at"] = from_iso(data["first_seen_at"])
    data["last_crawled_at"] = from_iso(data["last_crawled_at"])
    return SkillRecord(**data)


def content_to_row(record: ContentRecord) -> Dict[str, Any]:
    row = record.model_dump(exclude={"embedding"})
    row.update(
        content_type=record.content_type.value,
        published_at=_maybe_iso(record.published_at),
    )
    row[VECTOR_COLUMN] = record.embedding
    return row


def row_to_content(row: Dict[str, Any]) -> ContentRecord:
    data = {k: v for k, v in row.items() if not k.startswith("_")}
    data["embedding"] = _vector(data.pop(VECTOR_COLUMN, None))
    data["published_at"] = _maybe_datetime(data.get("published_at"))
    return ContentRecord(**data)


def crawl_log_to_row(log: CrawlLog) -> Dict[str, Any]:
    row = log.model_dump()
    row.update(
        status=log.status.value,
        started_at=to_iso(log.started_at),
        completed_at=_maybe_iso(log.completed_at),
    )
    return row


def row_to_crawl_log(row: Dict[str, Any]) -> CrawlLog:
    data = {k: v for k, v in row.items() if not k.startswith("_")}
    data["started_at"] = from_iso(data["started_at"])
    data["completed_at"] = _maybe_datetime(data.get("completed_at"))
    return CrawlLog(**data)
