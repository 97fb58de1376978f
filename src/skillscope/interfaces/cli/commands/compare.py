"""Compare skills command."""

from typing import List

import typer
from rich.table import Table

from ..context import build_service, get_config, handle_errors
from ..theme import console
from ._render import content_lines


def compare(
    ctx: typer.Context,
    skill_ids: List[str] = typer.Argument(..., help="2 to 5 skill IDs", show_default=False),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON (for scripting/AI agents)"),
):
    """Compare tools, triggers and similarity across skills."""
    config = get_config(ctx)
    with handle_errors():
        result = build_service(config).compare(skill_ids)

    if json_output:
        console.print_json(data=result.model_dump(mode="json"))
        return

    names = {skill.id: skill.name for skill in result.skills}

    table = Table(title="Comparison", header_style="bold")
    table.add_column("Skill", style="info")
    table.add_column("Unique tools")
    table.add_column("Unique triggers")
    for skill in result.skills:
        features = result.unique_features.get(skill.id)
        table.add_row(
            skill.name,
            ", ".join(features.unique_tools) if features else "",
            "\n".join(features.unique_triggers) if features else "",
        )
    console.print(table)

    console.print(f"[bold]Shared tools:[/bold] {', '.join(result.shared_tools) or '[dim]none[/dim]'}")
    console.print(
        f"[bold]Shared triggers:[/bold] {', '.join(result.shared_triggers) or '[dim]none[/dim]'}"
    )

    if result.similarity_matrix:
        console.print("\n[bold]Similarity[/bold]")
        for key, score in result.similarity_matrix.items():
            left, right = key.split(":", 1)
            console.print(
                f"  {names.get(left, left)} ↔ {names.get(right, right)}: [score]{score:.3f}[/score]"
            )
    else:
        console.print("[dim]No embeddings available for similarity.[/dim]")

    related = content_lines(result.related_content)
    if related:
        console.print("\n[bold]Related content[/bold]")
        for line in related:
            console.print(f"  {line}")
