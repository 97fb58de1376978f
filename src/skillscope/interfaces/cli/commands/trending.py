"""Trending skills command."""

import typer

from skillscope.modules.query import SORTS, WINDOWS
from ..context import build_service, get_config, handle_errors
from ..theme import console
from ._render import content_lines, skills_table, truncate


def trending(
    ctx: typer.Context,
    window: str = typer.Option("7d", "--window", "-w", help=f"Time window ({', '.join(WINDOWS)})"),
    sort: str = typer.Option("hot", "--sort", "-s", help=f"Ordering ({', '.join(SORTS)})"),
    limit: int = typer.Option(20, "--limit", "-n", help="Max results (1-100)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON (for scripting/AI agents)"),
):
    """Show skills trending within a time window."""
    config = get_config(ctx)
    with handle_errors():
        result = build_service(config).trending(window=window, sort=sort, limit=limit)

    if json_output:
        console.print_json(data=result.model_dump(mode="json"))
        return

    if not result.skills:
        console.print(
            f"[warning]No skills first seen in the last {result.window}[/warning] "
            f"[dim]({result.total_skills} in catalog)[/dim]"
        )
        return

    table = skills_table(
        f"Trending ({result.window}, by {result.sort}): "
        f"{result.total} of {result.total_skills} skills",
        score_label="Hot",
    )
    for item in result.skills:
        name = f"{item.name} [success]new[/success]" if item.is_new else item.name
        table.add_row(
            item.id,
            f"{name}\n[dim]{truncate(item.description)}[/dim]",
            item.category.value,
            str(item.mention_count),
            f"{item.hot_score:.2f}",
        )
    console.print(table)

    related = content_lines([result.skills[0].related_content])
    if related:
        console.print("\n[bold]Related content[/bold]")
        for line in related:
            console.print(f"  {line}")
