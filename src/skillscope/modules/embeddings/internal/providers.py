"""Embedding provider calls.

Each function sends one batch and returns one vector per input, in order.
Provider SDKs are imported lazily so ``embedding_provider='none'`` needs
neither installed credentials nor network access.
"""

from __future__ import annotations

from typing import Callable, List

from skillscope.shared.config import Config

BatchFn = Callable[[List[str]], List[List[float]]]

RATE_LIMIT_STATUS = 429


def embed_openai_batch(texts: List[str], config: Config) -> List[List[float]]:
    from openai import OpenAI  # lazy import

    client = OpenAI(
        api_key=config.openai_api_key,
        timeout=config.embedding_timeout_seconds,
        max_retries=0,
    )
    resp = client.embeddings.create(
        input=texts,
        model=config.openai_embedding_model,
        dimensions=config.embedding_dimensions,
    )
    ordered = sorted(resp.data, key=lambda item: item.index)
    return [list(item.embedding) for item in ordered]


def embed_gemini_batch(texts: List[str], config: Config) -> List[List[float]]:
    from google import genai  # lazy import
    from google.genai import types

    client = genai.Client(
        api_key=config.gemini_api_key,
        http_options=types.HttpOptions(timeout=int(config.embedding_timeout_seconds * 1000)),
    )
    result = client.models.embed_content(
        model=config.gemini_embedding_model,
        contents=texts,
        config=types.EmbedContentConfig(output_dimensionality=config.embedding_dimensions),
    )
    if not result.embeddings:
        raise ValueError("Gemini embedding response missing embeddings")
    return [list(item.values) for item in result.embeddings]


def resolve_batch_fn(config: Config) -> BatchFn | None:
    """Batch function for the configured provider; None when provider='none'."""
    provider = config.embedding_provider
    if provider == "none":
        return None
    if provider == "openai":
        return lambda texts: embed_openai_batch(texts, config)
    if provider == "gemini":
        return lambda texts: embed_gemini_batch(texts, config)
    raise ValueError(f"Unsupported embedding_provider: {provider}")


def is_rate_limited(exc: BaseException) -> bool:
    """OpenAI errors expose ``status_code``; google-genai errors expose ``code``."""
    return (
        getattr(exc, "status_code", None) == RATE_LIMIT_STATUS
        or getattr(exc, "code", None) == RATE_LIMIT_STATUS
    )


__all__ = [
    "BatchFn",
    "embed_openai_batch",
    "embed_gemini_batch",
    "resolve_batch_fn",
    "is_rate_limited",
]
