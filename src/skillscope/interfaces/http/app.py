"""FastAPI application exposing the query operations and the crawl trigger."""

from __future__ import annotations

import hmac
import logging
from typing import Optional

from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

from skillscope import __version__
from skillscope.modules.catalog import CatalogStore, open_store
from skillscope.modules.embeddings import EmbeddingClient
from skillscope.modules.ingestion import run_crawl
from skillscope.modules.query import QueryService, split_ids
from skillscope.shared.config import Config
from skillscope.shared.errors import (
    InvalidRequestError,
    NotFoundError,
    ServiceUnavailableError,
    SkillscopeError,
    UnauthorizedError,
)

from .security import setup_rate_limiting, setup_security_headers

logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (InvalidRequestError, 400),
    (UnauthorizedError, 401),
    (NotFoundError, 404),
    (ServiceUnavailableError, 503),
)


def status_for(exc: SkillscopeError) -> int:
    for kind, status in ERROR_STATUS:
        if isinstance(exc, kind):
            return status
    return 500


def _int_param(value: Optional[str], default: int) -> int:
    """Lenient integer parsing: anything unparseable falls back to the default."""
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def check_crawl_auth(config: Config, authorization: Optional[str]) -> None:
    if not config.crawl_secret:
        logger.error("Crawl secret is not configured")
        raise SkillscopeError("Server misconfigured")
    expected = f"Bearer {config.crawl_secret}"
    if not authorization or not hmac.compare_digest(authorization, expected):
        raise UnauthorizedError("Unauthorized")


def create_app(
    config: Config,
    store: Optional[CatalogStore] = None,
    embedder: Optional[EmbeddingClient] = None,
) -> FastAPI:
    store = store if store is not None else open_store(config)
    embedder = embedder if embedder is not None else EmbeddingClient(config)
    service = QueryService(store, embedder, config)

    app = FastAPI(title="SkillScope", version=__version__)
    app.state.config = config
    app.state.service = service

    limiter = setup_rate_limiting(app, config)
    setup_security_headers(app)

    @app.exception_handler(SkillscopeError)
    async def handle_skillscope_error(request: Request, exc: SkillscopeError):
        status = status_for(exc)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        body = {"error": str(exc)}
        if isinstance(exc, NotFoundError):
            body["missing"] = exc.missing_ids
        return JSONResponse(status_code=status, content=body)

    @app.get("/health")
    @limiter.exempt
    def health(request: Request):
        return {"status": "ok"}

    @app.get("/api/skills/search")
    def search(
        request: Request,
        q: Optional[str] = None,
        limit: Optional[str] = None,
        offset: Optional[str] = None,
    ):
        return service.search(
            q, limit=_int_param(limit, 10), offset=_int_param(offset, 0)
        ).model_dump(mode="json")

    @app.get("/api/skills/compare")
    def compare(request: Request, ids: Optional[str] = None):
        return service.compare(split_ids(ids)).model_dump(mode="json")

    @app.get("/api/skills/trending")
    def trending(
        request: Request,
        window: str = "7d",
        sort: str = "hot",
        limit: Optional[str] = None,
    ):
        return service.trending(
            window=window, sort=sort, limit=_int_param(limit, 20)
        ).model_dump(mode="json")

    @app.get("/api/skills/{skill_id}")
    def detail(request: Request, skill_id: str):
        return service.detail(skill_id).model_dump(mode="json")

    @app.post("/api/crawl")
    def crawl(request: Request, authorization: Optional[str] = Header(default=None)):
        check_crawl_auth(config, authorization)
        try:
            summary = run_crawl(store=store, embedder=embedder, config=config)
        except Exception as exc:
            logger.error("Crawl error: %s", exc)
            return JSONResponse(
                status_code=500, content={"error": "Crawl failed", "details": str(exc)}
            )
        return summary.model_dump(mode="json")

    return app


__all__ = ["create_app", "status_for", "check_crawl_auth"]
