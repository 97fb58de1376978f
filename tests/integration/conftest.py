"""Integration-test-only pytest fixtures for SkillScope."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_skillscope_catalog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep integration tests away from ~/.skillscope and from real providers.

    CLI commands build their Config from the environment, so the default
    db path would otherwise point at the developer's own catalog.
    """
    monkeypatch.setenv("SKILLSCOPE_DB_PATH", str(tmp_path / "index" / "catalog.lancedb"))
    monkeypatch.setenv("SKILLSCOPE_EMBEDDING_PROVIDER", "none")
    monkeypatch.delenv("SKILLSCOPE_CRAWL_SECRET", raising=False)
    monkeypatch.delenv("CRON_SECRET", raising=False)
