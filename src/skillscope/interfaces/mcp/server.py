"""SkillScope MCP server."""

import logging
from typing import Optional

from fastmcp import FastMCP

from skillscope.modules.catalog import CatalogStore, open_store
from skillscope.modules.embeddings import EmbeddingClient
from skillscope.modules.query import QueryService
from skillscope.shared.config import Config
from .tools import CatalogTools

logger = logging.getLogger(__name__)

INSTRUCTIONS = """SkillScope catalogs agent skills (SKILL.md documents) from public collections.

Workflow: search_skills or trending_skills -> get_skill (by id) -> compare_skills (2-5 ids)
"""


def create_mcp_server(
    config: Config,
    store: Optional[CatalogStore] = None,
    embedder: Optional[EmbeddingClient] = None,
) -> FastMCP:
    """Create the MCP server with the catalog tools registered."""
    store = store if store is not None else open_store(config)
    embedder = embedder if embedder is not None else EmbeddingClient(config)
    tools = CatalogTools(QueryService(store, embedder, config))

    if not embedder.enabled:
        logger.warning("Embedding provider is 'none'; search_skills will be unavailable")

    mcp = FastMCP("skillscope", instructions=INSTRUCTIONS)
    mcp.tool()(tools.search_skills)
    mcp.tool()(tools.trending_skills)
    mcp.tool()(tools.compare_skills)
    mcp.tool()(tools.get_skill)
    return mcp


__all__ = ["create_mcp_server"]
