"""Ingestion pipelines.

Each pipeline gathers candidates, embeds them in one batched call and
upserts them keyed by source URL (skills) or URL (content). Embedding
failures abort the run; per-document fetch and store failures are logged
and skipped.
"""

from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from skillscope.modules.catalog import CatalogStore
from skillscope.modules.embeddings import EmbeddingClient
from skillscope.modules.skills import (
    UNKNOWN_NAME,
    ParsedSkill,
    build_embedding_text,
    parse_skill_document,
)
from skillscope.shared.config import Config
from skillscope.shared.types import ContentType, SkillCategory, SourceType
from skillscope.shared.utils import from_iso, utcnow
from ..internal.datasets import (
    load_curated_resources,
    load_editorial_content,
    load_seed_skills,
)
from ..internal.http import SkillSource, fetch_feed
from ..internal.listing import extract_author
from ..internal.upsert import upsert_content, upsert_skills
from .types import ContentCandidate, IngestResult, SkillCandidate, SkillLink

logger = logging.getLogger(__name__)

SEED_MAX_AGE_DAYS = 30
SEED_MENTIONS = (5, 124)
SEED_URL_TEMPLATE = "https://github.com/openclaw-skills/{name}/blob/main/SKILL.md"


def _fetch_window(source: SkillSource, window: Sequence[SkillLink], pool) -> List[tuple[SkillLink, str]]:
    futures = [(link, pool.submit(source.fetch_document, link)) for link in window]
    fetched: List[tuple[SkillLink, str]] = []
    for link, future in futures:
        try:
            fetched.append((link, future.result()))
        except Exception as exc:
            logger.warning("Skipping %s: fetch failed: %s", link.raw_url, exc)
    return fetched


def fetch_documents(
    source: SkillSource, links: Sequence[SkillLink], concurrency: int
) -> List[tuple[SkillLink, str]]:
    """Fetch documents ``concurrency`` at a time, preserving listing order."""
    fetched: List[tuple[SkillLink, str]] = []
    with ThreadPoolExecutor(max_workers=concurrency) as pool:
        for start in range(0, len(links), concurrency):
            fetched.extend(_fetch_window(source, links[start:start + concurrency], pool))
    return fetched


def is_usable(parsed: ParsedSkill) -> bool:
    return not (parsed.name == UNKNOWN_NAME and not parsed.description)


def candidate_from_document(link: SkillLink, parsed: ParsedSkill) -> SkillCandidate:
    return SkillCandidate(
        source_url=link.raw_url,
        name=parsed.name,
        description=parsed.description or None,
        full_instructions=parsed.full_instructions or None,
        raw_content=parsed.raw_content,
        tools_used=parsed.tools_used,
        triggers=parsed.triggers,
        source_type=SourceType.GITHUB,
        author=extract_author(link.raw_url),
        category=link.category,
        embedding_text=build_embedding_text(parsed),
    )


def _embed_and_upsert(
    candidates: Sequence[SkillCandidate],
    *,
    store: CatalogStore,
    embedder: EmbeddingClient,
    now: datetime,
    rng: random.Random,
    found: Optional[int] = None,
) -> IngestResult:
    embeddings = embedder.embed_many([c.embedding_text for c in candidates])
    return upsert_skills(candidates, embeddings, store, now=now, rng=rng, found=found)


def ingest_skills(
    source: SkillSource,
    *,
    store: CatalogStore,
    embedder: EmbeddingClient,
    config: Config,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> IngestResult:
    """Synchronize the catalog with ``source``; falls back to the seed dataset when nothing is usable."""
    now = now or utcnow()
    rng = rng or random.Random()

    links = source.fetch_listing()
    logger.info("Listing returned %d skill links", len(links))
    if not links:
        logger.warning("Skills listing is empty; using seed dataset")
        return ingest_seed_skills(store=store, embedder=embedder, config=config, now=now, rng=rng)

    candidates: List[SkillCandidate] = []
    for link, content in fetch_documents(source, links, config.fetch_concurrency):
        parsed = parse_skill_document(content)
        if not is_usable(parsed):
            logger.debug("Skipping %s: no name or description", link.raw_url)
            continue
        candidates.append(candidate_from_document(link, parsed))

    if not candidates:
        logger.warning("No usable skill documents fetched; using seed dataset")
        return ingest_seed_skills(store=store, embedder=embedder, config=config, now=now, rng=rng)

    return _embed_and_upsert(
        candidates, store=store, embedder=embedder, now=now, rng=rng, found=len(links)
    )


def _seed_raw_content(item: dict) -> str:
    tools = "\n".join(f"- {t}" for t in item["tools"])
    triggers = "\n".join(f'- "{t}"' for t in item["triggers"])
    return (
        f'---\nname: "{item["name"]}"\ndescription: "{item["description"]}"\n---\n\n'
        f"# {item['name']}\n\n{item['description']}\n\n"
        f"## Tools\n{tools}\n\n## Triggers\n{triggers}"
    )


def seed_candidate(item: dict, *, now: datetime, rng: random.Random, new_window_days: int) -> SkillCandidate:
    tools: list[str] = list(item["tools"])
    triggers: list[str] = list(item["triggers"])
    description: str = item["description"]
    age_days = rng.randrange(SEED_MAX_AGE_DAYS)
    return SkillCandidate(
        source_url=SEED_URL_TEMPLATE.format(name=item["name"]),
        name=item["name"],
        description=description,
        full_instructions=(
            f"Use when the user wants to {triggers[0]}. This skill integrates with "
            f"{', '.join(tools)} to provide {description.lower()}"
        ),
        raw_content=_seed_raw_content(item),
        tools_used=tools,
        triggers=triggers,
        source_type=SourceType.GITHUB,
        author=item.get("author"),
        category=SkillCategory(item.get("category", SkillCategory.UNCATEGORIZED.value)),
        embedding_text=(
            f"{item['name']} | {description} | Tools: {', '.join(tools)}"
            f" | Triggers: {', '.join(triggers)}"
        ),
        initial_mention_count=rng.randint(*SEED_MENTIONS),
        is_new=age_days < new_window_days,
        first_seen_at=now - timedelta(days=age_days),
    )


def ingest_seed_skills(
    *,
    store: CatalogStore,
    embedder: EmbeddingClient,
    config: Config,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> IngestResult:
    """Built-in seed dataset. Updates never touch first_seen_at, is_new or mention_count."""
    now = now or utcnow()
    rng = rng or random.Random()
    candidates = [
        seed_candidate(item, now=now, rng=rng, new_window_days=config.new_window_days)
        for item in load_seed_skills()
    ]
    return _embed_and_upsert(candidates, store=store, embedder=embedder, now=now, rng=rng)


def resource_candidate(item: dict) -> SkillCandidate:
    category = SkillCategory(item["category"])
    upvotes = int(item.get("upvote_count", 0))
    return SkillCandidate(
        source_url=item["source_url"],
        name=item["name"],
        description=item["description"],
        source_type=SourceType.CAMPCLAW,
        author=item.get("domain"),
        category=category,
        embedding_text=(
            f"{item['name']} | {item['description']} | "
            f"Category: {category.value.replace('_', ' ')}"
        ),
        mention_count=upvotes,
        upvote_count=upvotes,
        is_new=False,
    )


def ingest_curated_resources(
    *,
    store: CatalogStore,
    embedder: EmbeddingClient,
    config: Config,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> IngestResult:
    """Curated editorial resources: pre-structured, so there is no parse step."""
    candidates = [resource_candidate(item) for item in load_curated_resources()]
    return _embed_and_upsert(
        candidates,
        store=store,
        embedder=embedder,
        now=now or utcnow(),
        rng=rng or random.Random(),
    )


def editorial_candidate(item: dict) -> ContentCandidate:
    published = item.get("published_at")
    return ContentCandidate(
        title=item["title"],
        content_type=ContentType(item["content_type"]),
        description=item.get("description"),
        url=item["url"],
        published_at=from_iso(published) if isinstance(published, str) else published,
    )


def _store_content(
    candidates: Sequence[ContentCandidate], store: CatalogStore, embedder: EmbeddingClient
) -> IngestResult:
    if not candidates:
        return IngestResult()
    embeddings = embedder.embed_many([c.embedding_text for c in candidates])
    return upsert_content(candidates, embeddings, store)


def ingest_content(
    *,
    store: CatalogStore,
    embedder: EmbeddingClient,
    config: Config,
    feed_items: Optional[Sequence[ContentCandidate]] = None,
) -> IngestResult:
    """Podcast feed episodes plus the packaged editorial content list."""
    if feed_items is None:
        feed_items = fetch_feed(config)
    logger.info("Content feed returned %d episodes", len(feed_items))

    result = _store_content(feed_items, store, embedder)
    editorial = [editorial_candidate(item) for item in load_editorial_content()]
    return result.combine(_store_content(editorial, store, embedder))


__all__ = [
    "fetch_documents",
    "is_usable",
    "candidate_from_document",
    "ingest_skills",
    "seed_candidate",
    "ingest_seed_skills",
    "resource_candidate",
    "ingest_curated_resources",
    "editorial_candidate",
    "ingest_content",
]
