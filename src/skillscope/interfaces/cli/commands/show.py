"""Show skill details command."""

import typer
from rich.panel import Panel

from ..context import build_service, get_config, handle_errors
from ..theme import console
from ._render import content_lines


def show(
    ctx: typer.Context,
    skill_id: str = typer.Argument(..., help="Skill ID", show_default=False),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON (for scripting/AI agents)"),
):
    """Show one skill with related content and similar skills."""
    config = get_config(ctx)
    with handle_errors():
        detail = build_service(config).detail(skill_id)

    if json_output:
        console.print_json(data=detail.model_dump(mode="json"))
        return

    skill = detail.skill
    header = (
        f"[bold]{skill.name}[/bold]  [dim]{skill.category.value} · {skill.source_type.value}"
        f"{' · ' + skill.author if skill.author else ''}[/dim]\n\n"
        f"{skill.description or '[dim]No description[/dim]'}\n\n"
        f"[dim]Source:[/dim] {skill.source_url}\n"
        f"[dim]Mentions:[/dim] {skill.mention_count}  [dim]Upvotes:[/dim] {skill.upvote_count}"
    )
    if skill.tools_used:
        header += f"\n[dim]Tools:[/dim] {', '.join(skill.tools_used)}"
    if skill.triggers:
        header += f"\n[dim]Triggers:[/dim] {'; '.join(skill.triggers)}"
    console.print(Panel(header, title=skill.id, title_align="left"))

    if detail.install:
        console.print(f"[bold]Install:[/bold] [info]{detail.install.command}[/info]")
        console.print(f"[dim]  or: {detail.install.npx_command}[/dim]")

    if detail.similar_skills:
        console.print("\n[bold]Similar skills[/bold]")
        for similar in detail.similar_skills:
            console.print(
                f"  [info]{similar.name}[/info] [dim]{similar.id}[/dim] "
                f"[score]{similar.similarity:.3f}[/score]"
            )

    related = content_lines(detail.related_content)
    if related:
        console.print("\n[bold]Related content[/bold]")
        for line in related:
            console.print(f"  {line}")

    if skill.full_instructions:
        console.print("\n[bold]Instructions[/bold]")
        console.print(skill.full_instructions, markup=False)
