"""Public API for the ranking module."""

from .public.features import shared_features, unique_features
from .public.scoring import age_in_days, hot_score
from .public.vectors import (
    Vector,
    average_vectors,
    cosine_similarity,
    pair_key,
    similarity_matrix,
)

__all__ = [
    "Vector",
    "cosine_similarity",
    "average_vectors",
    "pair_key",
    "similarity_matrix",
    "age_in_days",
    "hot_score",
    "shared_features",
    "unique_features",
]
