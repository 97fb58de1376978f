"""Typer-based CLI entry point.

SkillScope CLI catalogs agent skills and queries the catalog:
- crawl: Refresh skills, related content and curated resources
- search: Semantic search over skills
- trending: Skills trending within a time window
- compare: Compare 2-5 skills side by side
- show: Display one skill with similar skills and related content
- serve: Start the HTTP API
- mcp: Start the MCP server
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from skillscope.shared.config import Config
from skillscope.shared.logging import setup_logging
from .commands.compare import compare
from .commands.crawl import crawl
from .commands.search import search
from .commands.serve import mcp, serve
from .commands.show import show
from .commands.trending import trending
from .theme import VERSION, console, print_error


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"skillscope [info]{VERSION}[/info]")
        raise typer.Exit()


app = typer.Typer(
    name="skillscope",
    help="[bold]SkillScope[/bold] - Catalog, search and rank agent skills\n\n"
         "Harvests SKILL.md documents from public collections, embeds them, and serves "
         "semantic search, trending and comparison.",
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=True,
    pretty_exceptions_show_locals=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    db_path: Optional[Path] = typer.Option(
        None,
        "--db-path",
        help="Override LanceDB path (CLI > env > default)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """SkillScope - Catalog, search and rank agent skills."""
    overrides = {}
    if db_path:
        overrides["db_path"] = db_path.expanduser().resolve()
    if log_level:
        overrides["log_level"] = log_level.upper()

    try:
        config = Config()
    except ValidationError as exc:
        print_error("Invalid configuration", hint=str(exc))
        raise typer.Exit(code=1)
    if overrides:
        config = config.with_overrides(**overrides)

    setup_logging(config.log_level)
    ctx.obj = config


app.command(
    "crawl",
    help="Refresh the catalog from every source.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscope crawl\n\n"
         "  skillscope crawl --json",
)(crawl)

app.command(
    "search",
    help="Search skills by meaning.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscope search 'deploy to kubernetes'\n\n"
         "  skillscope search 'code review' --limit 5\n\n"
         "  skillscope search email --json",
)(search)

app.command(
    "trending",
    help="Show trending skills.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscope trending\n\n"
         "  skillscope trending --window 24h --sort new\n\n"
         "  skillscope trending --sort mentions --limit 50 --json",
)(trending)

app.command(
    "compare",
    help="Compare 2 to 5 skills.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscope compare <id-a> <id-b>\n\n"
         "  skillscope compare <id-a> <id-b> <id-c> --json",
)(compare)

app.command(
    "show",
    help="Show skill details, similar skills and related content.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscope show <id>\n\n"
         "  skillscope show <id> --json",
)(show)

app.command(
    "serve",
    help="Start the HTTP API.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscope serve\n\n"
         "  skillscope serve --host 0.0.0.0 --port 8080",
)(serve)

app.command(
    "mcp",
    help="Start the MCP server.\n\n"
         "By default, runs in stdio mode for direct agent integration.\n"
         "Use --http for a remote server.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  skillscope mcp\n\n"
         "  skillscope mcp --http --port 8001",
)(mcp)


def run():
    """Entry point for CLI."""
    app()
