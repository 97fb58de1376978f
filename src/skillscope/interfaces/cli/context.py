"""Access to the Config injected by the app callback, plus service wiring."""

from contextlib import contextmanager
from typing import Iterator

import typer

from skillscope.modules.catalog import CatalogStore, open_store
from skillscope.modules.embeddings import EmbeddingClient
from skillscope.modules.query import QueryService
from skillscope.shared.config import Config
from skillscope.shared.errors import ServiceUnavailableError, SkillscopeError
from .theme import print_error

EXIT_ERROR = 1

_HINTS = {
    ServiceUnavailableError: "Set SKILLSCOPE_EMBEDDING_PROVIDER=openai (or gemini) and the matching API key.",
}


def get_config(ctx: typer.Context) -> Config:
    """Return the Config built by the app callback (falls back to env defaults)."""
    config = ctx.obj if ctx is not None else None
    if isinstance(config, Config):
        return config
    return Config()


def build_store(config: Config) -> CatalogStore:
    return open_store(config)


def build_service(config: Config) -> QueryService:
    return QueryService(build_store(config), EmbeddingClient(config), config)


@contextmanager
def handle_errors() -> Iterator[None]:
    """Print SkillScope errors and exit non-zero instead of showing a traceback."""
    try:
        yield
    except SkillscopeError as exc:
        hint = next((h for kind, h in _HINTS.items() if isinstance(exc, kind)), None)
        print_error(str(exc), hint=hint)
        raise typer.Exit(code=EXIT_ERROR)
