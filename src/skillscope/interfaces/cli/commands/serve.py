"""Serve the HTTP API or the MCP server."""

import typer

from ..context import get_config
from ..theme import stderr_console


def serve(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Port"),
):
    """Start the HTTP API (uvicorn)."""
    import uvicorn

    from skillscope.interfaces.http import create_app

    config = get_config(ctx)
    stderr_console.print(f"[info]SkillScope API[/info] on http://{host}:{port} [dim](db: {config.db_path})[/dim]")
    uvicorn.run(create_app(config), host=host, port=port, log_level=config.log_level.lower())


def mcp(
    ctx: typer.Context,
    http: bool = typer.Option(False, "--http", help="Serve over streamable HTTP instead of stdio"),
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address (with --http)"),
    port: int = typer.Option(8001, "--port", "-p", help="Port (with --http)"),
):
    """Start the MCP server."""
    from skillscope.interfaces.mcp import create_mcp_server

    config = get_config(ctx)
    server = create_mcp_server(config)
    if http:
        server.run(transport="http", host=host, port=port)
    else:
        server.run()
