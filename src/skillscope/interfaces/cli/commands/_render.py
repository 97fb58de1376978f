"""Shared table rendering for skill listings."""

from typing import Iterable, Optional

from rich.markup import escape
from rich.table import Table

from skillscope.modules.query import ContentMatch


def skills_table(title: str, score_label: Optional[str] = None) -> Table:
    table = Table(title=title, show_lines=False, header_style="bold")
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Name", style="info")
    table.add_column("Category")
    table.add_column("Mentions", justify="right")
    if score_label:
        table.add_column(score_label, justify="right", style="score")
    return table


def truncate(text: Optional[str], width: int = 80) -> str:
    if not text:
        return ""
    return escape(text if len(text) <= width else text[: width - 1] + "…")


def content_lines(matches: Iterable[Optional[ContentMatch]]) -> list[str]:
    lines = []
    for match in matches:
        if match is None:
            continue
        lines.append(
            f"[info]{escape(match.title)}[/info] [dim]({match.content_type.value}, "
            f"{match.relevance_score:.2f})[/dim]\n  {match.url}"
        )
    return lines
