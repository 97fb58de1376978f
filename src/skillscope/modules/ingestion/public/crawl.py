"""Full crawl across every source, recorded in the crawl log."""

from __future__ import annotations

import logging
import random
from typing import Optional

from skillscope.modules.catalog import CatalogStore
from skillscope.modules.embeddings import EmbeddingClient
from skillscope.shared.config import Config
from skillscope.shared.types import CrawlStatus
from skillscope.shared.utils import utcnow
from ..internal.http import AwesomeListSource, SkillSource
from .pipeline import ingest_content, ingest_curated_resources, ingest_skills
from .types import CrawlSummary

logger = logging.getLogger(__name__)

CRAWL_SOURCE = "scheduled"


def run_crawl(
    *,
    store: CatalogStore,
    embedder: EmbeddingClient,
    config: Config,
    source: Optional[SkillSource] = None,
    rng: Optional[random.Random] = None,
    log_source: str = CRAWL_SOURCE,
) -> CrawlSummary:
    """Skills, then related content, then curated resources, one after another.

    The crawl log entry starts as ``running`` and ends as ``success`` with the
    skill counts, or ``error`` with the message before the error is re-raised.
    """
    source = source or AwesomeListSource(config)
    rng = rng or random.Random()
    log = store.start_crawl_log(log_source)

    try:
        skills = ingest_skills(source, store=store, embedder=embedder, config=config, rng=rng)
        logger.info("Skills: found=%d new=%d updated=%d", skills.found, skills.new, skills.updated)
        content = ingest_content(store=store, embedder=embedder, config=config)
        logger.info("Content: found=%d new=%d updated=%d", content.found, content.new, content.updated)
        resources = ingest_curated_resources(store=store, embedder=embedder, config=config, rng=rng)
        logger.info(
            "Resources: found=%d new=%d updated=%d", resources.found, resources.new, resources.updated
        )
    except Exception as exc:
        store.finish_crawl_log(
            log.model_copy(
                update={
                    "status": CrawlStatus.ERROR,
                    "completed_at": utcnow(),
                    "error_message": str(exc),
                }
            )
        )
        logger.error("Crawl failed: %s", exc)
        raise

    total = skills.combine(resources)
    completed_at = utcnow()
    store.finish_crawl_log(
        log.model_copy(
            update={
                "status": CrawlStatus.SUCCESS,
                "completed_at": completed_at,
                "skills_found": total.found,
                "skills_new": total.new,
                "skills_updated": total.updated,
            }
        )
    )
    return CrawlSummary(
        success=True,
        skills=skills,
        content=content,
        resources=resources,
        completed_at=completed_at,
    )


__all__ = ["run_crawl", "CRAWL_SOURCE"]
