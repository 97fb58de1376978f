"""Semantic search command."""

import typer

from ..context import build_service, get_config, handle_errors
from ..theme import console
from ._render import content_lines, skills_table, truncate


def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query (max 500 characters)", show_default=False),
    limit: int = typer.Option(10, "--limit", "-n", help="Max results (1-50)"),
    offset: int = typer.Option(0, "--offset", help="Results to skip"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON (for scripting/AI agents)"),
):
    """Search skills by meaning."""
    config = get_config(ctx)
    with handle_errors():
        result = build_service(config).search(query, limit=limit, offset=offset)

    if json_output:
        console.print_json(data=result.model_dump(mode="json"))
        return

    if not result.results:
        console.print(f"[warning]No skills found for '{result.query}'[/warning]")
        return

    table = skills_table(f"Search: {result.query} ({result.total} matches)", score_label="Score")
    for item in result.results:
        table.add_row(
            item.id,
            f"{item.name}\n[dim]{truncate(item.description)}[/dim]",
            item.category.value,
            str(item.mention_count),
            f"{item.relevance_score:.3f}",
        )
    console.print(table)

    related = content_lines([result.results[0].related_content])
    if related:
        console.print("\n[bold]Related content[/bold]")
        for line in related:
            console.print(f"  {line}")
