"""Batched embedding client with rate-limit backoff."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, List, Optional, Sequence

from skillscope.shared.config import Config
from skillscope.shared.errors import EmbeddingError
from ..internal.providers import BatchFn, is_rate_limited, resolve_batch_fn

logger = logging.getLogger(__name__)

Embedding = Optional[List[float]]


class EmbeddingClient:
    """Turns text into vectors through the configured provider.

    Inputs are flattened to one line and truncated to
    ``config.embedding_max_chars``, then sent in sequential batches of
    ``config.embedding_batch_size``. A failing batch fails the whole call.
    With ``embedding_provider='none'`` every input maps to ``None``.
    """

    def __init__(
        self,
        config: Config,
        batch_fn: Optional[BatchFn] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self._batch_fn = batch_fn if batch_fn is not None else resolve_batch_fn(config)
        self._sleep = sleep
        self._rng = rng or random.Random()

    @property
    def enabled(self) -> bool:
        return self._batch_fn is not None

    def prepare(self, text: str) -> str:
        return text.replace("\n", " ")[: self.config.embedding_max_chars]

    def embed(self, text: str) -> Embedding:
        return self.embed_many([text])[0]

    def embed_many(self, texts: Sequence[str]) -> List[Embedding]:
        if not texts:
            return []
        if self._batch_fn is None:
            return [None] * len(texts)

        prepared = [self.prepare(text) for text in texts]
        size = self.config.embedding_batch_size
        vectors: List[Embedding] = []
        for start in range(0, len(prepared), size):
            batch = prepared[start:start + size]
            result = self._embed_batch(batch)
            if len(result) != len(batch):
                raise EmbeddingError(
                    f"Provider returned {len(result)} embeddings for {len(batch)} inputs"
                )
            vectors.extend(result)
        return vectors

    def _retry_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter."""
        base_delay = self.config.embedding_backoff_seconds * (2 ** attempt)
        jitter = self._rng.uniform(0.1, 0.3) * base_delay
        return min(base_delay + jitter, self.config.embedding_max_backoff_seconds)

    def _embed_batch(self, batch: List[str]) -> List[List[float]]:
        provider = self.config.embedding_provider
        attempts = self.config.embedding_max_attempts
        for attempt in range(attempts):
            try:
                return self._batch_fn(batch)
            except EmbeddingError:
                raise
            except Exception as exc:
                if not is_rate_limited(exc):
                    raise EmbeddingError(f"Embedding error ({provider}): {exc}") from exc
                if attempt + 1 >= attempts:
                    raise EmbeddingError(
                        f"Embedding rate limit persisted after {attempts} attempts ({provider})"
                    ) from exc
                delay = self._retry_delay(attempt)
                logger.warning(
                    "Embedding rate limited (%s), retrying in %.2fs (attempt %d/%d)",
                    provider,
                    delay,
                    attempt + 1,
                    attempts,
                )
                self._sleep(delay)
        raise EmbeddingError(f"Embedding failed ({provider})")


__all__ = ["EmbeddingClient", "Embedding"]
