"""MCP tool implementations and server wiring."""

import pytest

from skillscope.interfaces.mcp import CatalogTools, create_mcp_server
from skillscope.modules.query import QueryService
from skillscope.shared.errors import InvalidRequestError, NotFoundError

DEPLOY = [1.0, 0.0, 0.0, 0.0, 0.0]
EMAIL = [0.0, 1.0, 0.0, 0.0, 0.0]


@pytest.fixture
def tools(store, make_skill, embedder, config):
    store.upsert_skill(make_skill("deployer", DEPLOY, tools=["docker"]))
    store.upsert_skill(make_skill("mailer", EMAIL, tools=["gmail"]))
    return CatalogTools(QueryService(store, embedder, config))


def test_search_skills_returns_json_shape(tools):
    data = tools.search_skills("deploy")
    assert data["query"] == "deploy"
    assert [r["id"] for r in data["results"]] == ["deployer"]
    assert isinstance(data["results"][0]["first_seen_at"], str)


def test_trending_skills(tools):
    data = tools.trending_skills(window="30d", sort="new", limit=5)
    assert data["sort"] == "new"
    assert data["total_skills"] == 2


def test_compare_skills(tools):
    data = tools.compare_skills(["deployer", "mailer"])
    assert data["unique_features"]["deployer"]["unique_tools"] == ["docker"]


def test_get_skill(tools):
    assert tools.get_skill("mailer")["skill"]["id"] == "mailer"


def test_errors_propagate(tools):
    with pytest.raises(NotFoundError):
        tools.get_skill("ghost")
    with pytest.raises(InvalidRequestError):
        tools.compare_skills(["deployer"])


def test_tools_keep_names_and_docs():
    for name in ("search_skills", "trending_skills", "compare_skills", "get_skill"):
        method = getattr(CatalogTools, name)
        assert method.__name__ == name
        assert method.__doc__


def test_create_server(store, embedder, config):
    server = create_mcp_server(config, store=store, embedder=embedder)
    assert server.name == "skillscope"
