"""run_crawl sequencing and crawl-log bookkeeping."""

import pytest

from skillscope.modules.ingestion import SkillLink, run_crawl
from skillscope.modules.ingestion.internal.datasets import (
    load_curated_resources,
    load_editorial_content,
)
from skillscope.shared.errors import IngestionError
from skillscope.shared.types import CrawlStatus

SKILL_URL = "https://raw.githubusercontent.com/openclaw/skills/main/skills/alice/deployer/SKILL.md"


class OneSkillSource:
    def __init__(self, listing_error=None):
        self.listing_error = listing_error

    def fetch_listing(self):
        if self.listing_error is not None:
            raise self.listing_error
        return [SkillLink(raw_url=SKILL_URL)]

    def fetch_document(self, link):
        return "---\nname: deployer\ndescription: Deploy services\n---\nbody"


@pytest.fixture(autouse=True)
def no_feed(monkeypatch):
    monkeypatch.setattr(
        "skillscope.modules.ingestion.public.pipeline.fetch_feed", lambda config: []
    )


def test_successful_crawl_is_logged(store, embedder, config):
    summary = run_crawl(store=store, embedder=embedder, config=config, source=OneSkillSource())

    resources = len(load_curated_resources())
    assert summary.success is True
    assert (summary.skills.found, summary.skills.new) == (1, 1)
    assert summary.content.new == len(load_editorial_content())
    assert summary.resources.new == resources

    (log,) = store.list_crawl_logs()
    assert log.source == "scheduled"
    assert log.status == CrawlStatus.SUCCESS
    assert log.completed_at is not None
    assert log.skills_found == 1 + resources
    assert log.skills_new == 1 + resources
    assert log.skills_updated == 0
    assert log.error_message is None


def test_failed_crawl_is_logged_and_reraised(store, embedder, config):
    source = OneSkillSource(listing_error=IngestionError("listing unreachable"))

    with pytest.raises(IngestionError):
        run_crawl(
            store=store, embedder=embedder, config=config, source=source, log_source="manual"
        )

    (log,) = store.list_crawl_logs()
    assert log.source == "manual"
    assert log.status == CrawlStatus.ERROR
    assert log.error_message == "listing unreachable"
    assert log.completed_at is not None
    assert store.skills == {}


def test_rerun_counts_updates(store, embedder, config):
    run_crawl(store=store, embedder=embedder, config=config, source=OneSkillSource())
    summary = run_crawl(store=store, embedder=embedder, config=config, source=OneSkillSource())

    assert summary.skills.updated == 1
    assert summary.skills.new == 0
    logs = store.list_crawl_logs()
    assert len(logs) == 2
    assert all(log.status == CrawlStatus.SUCCESS for log in logs)
