"""Crawl command: refresh the catalog from every source."""

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn

from skillscope.modules.embeddings import EmbeddingClient
from skillscope.modules.ingestion import run_crawl
from ..context import build_store, get_config, handle_errors
from ..theme import console, print_success, print_warning, stderr_console


def crawl(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON (for scripting/AI agents)"),
):
    """Fetch, parse, embed and upsert skills and related content."""
    config = get_config(ctx)
    if config.embedding_provider == "none":
        print_warning("Embedding provider is 'none'; records will be stored without vectors")

    with handle_errors():
        store = build_store(config)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=stderr_console,
            transient=True,
        ) as progress:
            progress.add_task("Crawling sources...", total=None)
            summary = run_crawl(
                store=store,
                embedder=EmbeddingClient(config),
                config=config,
                log_source="manual",
            )

    if json_output:
        console.print_json(data=summary.model_dump(mode="json"))
        return

    for label, result in (
        ("Skills", summary.skills),
        ("Content", summary.content),
        ("Resources", summary.resources),
    ):
        console.print(
            f"[info]{label:<10}[/info] found={result.found} new={result.new} updated={result.updated}"
        )
    print_success("Crawl complete")
