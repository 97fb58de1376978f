"""Public API for the ingestion module."""

from .internal.http import AwesomeListSource, SkillSource, fetch_feed, parse_feed
from .internal.listing import CATEGORY_MAP, extract_author, extract_skill_links
from .internal.upsert import initial_mention_count
from .public.crawl import run_crawl
from .public.pipeline import (
    ingest_content,
    ingest_curated_resources,
    ingest_seed_skills,
    ingest_skills,
)
from .public.types import (
    ContentCandidate,
    CrawlSummary,
    IngestResult,
    SkillCandidate,
    SkillLink,
)

__all__ = [
    "SkillSource",
    "AwesomeListSource",
    "fetch_feed",
    "parse_feed",
    "CATEGORY_MAP",
    "extract_skill_links",
    "extract_author",
    "initial_mention_count",
    "ingest_skills",
    "ingest_seed_skills",
    "ingest_curated_resources",
    "ingest_content",
    "run_crawl",
    "SkillLink",
    "SkillCandidate",
    "ContentCandidate",
    "IngestResult",
    "CrawlSummary",
]
