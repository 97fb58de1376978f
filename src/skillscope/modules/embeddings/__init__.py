"""Public API for the embeddings module."""

from .public.client import Embedding, EmbeddingClient

__all__ = ["EmbeddingClient", "Embedding"]
