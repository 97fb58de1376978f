"""Integration tests for CLI commands.

Uses Typer's CliRunner; the query service is swapped for one backed by the
in-memory store so no provider or network is involved.
"""

import json
from datetime import datetime, timezone

import pytest
from typer.testing import CliRunner

from skillscope.interfaces.cli.app import app
from skillscope.modules.ingestion import CrawlSummary, IngestResult
from skillscope.modules.query import QueryService

runner = CliRunner()

DEPLOY = [1.0, 0.0, 0.0, 0.0, 0.0]
EMAIL = [0.0, 1.0, 0.0, 0.0, 0.0]
COMMANDS = ("search", "trending", "compare", "show")


@pytest.fixture
def seeded(store, make_skill, make_content):
    store.upsert_skill(
        make_skill(
            "deployer",
            DEPLOY,
            name="k8s-deployer",
            tools=["docker", "git"],
            source_url="https://raw.githubusercontent.com/openclaw/skills/main/skills/alice/k8s-deployer/SKILL.md",
        )
    )
    store.upsert_skill(make_skill("mailer", EMAIL, name="mailer", tools=["gmail", "git"]))
    store.upsert_content(make_content("https://example.com/ep/1", DEPLOY, title="Shipping agents"))
    return store


def use_service(monkeypatch, service):
    for command in COMMANDS:
        monkeypatch.setattr(
            f"skillscope.interfaces.cli.commands.{command}.build_service",
            lambda config: service,
        )


@pytest.fixture
def cli_service(monkeypatch, seeded, embedder, config):
    service = QueryService(seeded, embedder, config)
    use_service(monkeypatch, service)
    return service


class TestSearchCommand:
    """skillscope search tests."""

    def test_json(self, cli_service):
        result = runner.invoke(app, ["search", "deploy", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [r["id"] for r in data["results"]] == ["deployer"]
        assert data["results"][0]["related_content"]["title"] == "Shipping agents"

    def test_table(self, cli_service):
        result = runner.invoke(app, ["search", "deploy"])
        assert result.exit_code == 0, result.output
        assert "Related content" in result.stdout
        assert "Shipping agents" in result.stdout

    def test_no_results(self, cli_service):
        result = runner.invoke(app, ["search", "security"])
        assert result.exit_code == 0
        assert "No skills found" in result.stdout

    def test_requires_provider(self, monkeypatch, seeded, disabled_embedder, config):
        use_service(monkeypatch, QueryService(seeded, disabled_embedder, config))
        result = runner.invoke(app, ["search", "deploy"])
        assert result.exit_code == 1
        assert "SKILLSCOPE_EMBEDDING_PROVIDER" in result.output


class TestTrendingCommand:
    """skillscope trending tests."""

    def test_json(self, cli_service):
        result = runner.invoke(app, ["trending", "--window", "30d", "--sort", "mentions", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert (data["window"], data["sort"], data["total_skills"]) == ("30d", "mentions", 2)

    def test_invalid_window(self, cli_service):
        result = runner.invoke(app, ["trending", "--window", "1y"])
        assert result.exit_code == 1
        assert "Invalid window" in result.output


class TestCompareCommand:
    """skillscope compare tests."""

    def test_json(self, cli_service):
        result = runner.invoke(app, ["compare", "deployer", "mailer", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["shared_tools"] == ["git"]
        assert data["similarity_matrix"] == {"deployer:mailer": 0.0}

    def test_table(self, cli_service):
        result = runner.invoke(app, ["compare", "deployer", "mailer"])
        assert result.exit_code == 0, result.output
        assert "Shared tools:" in result.stdout
        assert "docker" in result.stdout

    def test_unknown_id(self, cli_service):
        result = runner.invoke(app, ["compare", "deployer", "ghost"])
        assert result.exit_code == 1
        assert "not found: ghost" in result.output

    def test_single_id(self, cli_service):
        result = runner.invoke(app, ["compare", "deployer"])
        assert result.exit_code == 1
        assert "between 2 and 5" in result.output


class TestShowCommand:
    """skillscope show tests."""

    def test_panel(self, cli_service):
        result = runner.invoke(app, ["show", "deployer"])
        assert result.exit_code == 0, result.output
        assert "k8s-deployer" in result.stdout
        assert "clawhub install k8s-deployer" in result.stdout
        assert "Shipping agents" in result.stdout

    def test_json(self, cli_service):
        result = runner.invoke(app, ["show", "mailer", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["skill"]["name"] == "mailer"
        assert data["install"] is None

    def test_not_found(self, cli_service):
        result = runner.invoke(app, ["show", "ghost"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCrawlCommand:
    """skillscope crawl tests."""

    @pytest.fixture
    def fake_crawl(self, monkeypatch, store):
        calls = []

        def run(**kwargs):
            calls.append(kwargs)
            return CrawlSummary(
                success=True,
                skills=IngestResult(found=3, new=1, updated=2),
                content=IngestResult(found=8, new=8),
                resources=IngestResult(found=52, updated=52),
                completed_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
            )

        monkeypatch.setattr("skillscope.interfaces.cli.commands.crawl.build_store", lambda config: store)
        monkeypatch.setattr("skillscope.interfaces.cli.commands.crawl.run_crawl", run)
        return calls

    def test_json(self, fake_crawl, store):
        result = runner.invoke(app, ["crawl", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["skills"] == {"found": 3, "new": 1, "updated": 2}
        (call,) = fake_crawl
        assert call["log_source"] == "manual"
        assert call["store"] is store

    def test_summary_lines(self, fake_crawl):
        result = runner.invoke(app, ["crawl"])
        assert result.exit_code == 0, result.output
        assert "found=52 new=0 updated=52" in result.stdout
        assert "Crawl complete" in result.output


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "skillscope" in result.stdout

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("SKILLSCOPE_EMBEDDING_PROVIDER", "openai")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        result = runner.invoke(app, ["trending"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
