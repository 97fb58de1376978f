"""MCP interface."""

from .server import create_mcp_server
from .tools import CatalogTools

__all__ = ["create_mcp_server", "CatalogTools"]
