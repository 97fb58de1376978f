"""Vector math over embeddings.

All functions accept plain sequences of floats and return plain Python
values so callers never see numpy types.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

Vector = Sequence[float]

PAIR_SEPARATOR = ":"
MATRIX_PRECISION = 3


def _as_array(vector: Vector) -> np.ndarray:
    return np.asarray(vector, dtype=np.float64)


def cosine_similarity(a: Vector, b: Vector) -> float:
    """dot(a, b) / (|a| * |b|). NaN when either norm is zero.

    The norms are combined under a single square root so that a vector is
    exactly 1.0 similar to itself and the result does not depend on argument
    order.
    """
    va, vb = _as_array(a), _as_array(b)
    if va.shape != vb.shape:
        raise ValueError(f"Vector lengths differ: {va.size} != {vb.size}")
    denominator = math.sqrt(float(np.dot(va, va)) * float(np.dot(vb, vb)))
    if denominator == 0.0:
        return math.nan
    return float(np.dot(va, vb)) / denominator


def average_vectors(vectors: Sequence[Vector]) -> list[float]:
    """Element-wise mean of equal-length vectors."""
    if not vectors:
        raise ValueError("Cannot average an empty list of vectors")
    lengths = {len(v) for v in vectors}
    if len(lengths) != 1:
        raise ValueError(f"Vectors must share one length, got {sorted(lengths)}")
    return np.mean(np.asarray(vectors, dtype=np.float64), axis=0).tolist()


def pair_key(left_id: str, right_id: str) -> str:
    return f"{left_id}{PAIR_SEPARATOR}{right_id}"


def similarity_matrix(items: Sequence[tuple[str, Optional[Vector]]]) -> dict[str, float]:
    """Pairwise similarities for ``(id, vector)`` items, keyed ``"id_i:id_j"`` with i < j.

    Pairs where either vector is missing, or the similarity is undefined,
    are left out rather than zero-filled.
    """
    matrix: dict[str, float] = {}
    for i, (left_id, left) in enumerate(items):
        if left is None:
            continue
        for right_id, right in items[i + 1:]:
            if right is None:
                continue
            score = cosine_similarity(left, right)
            if math.isnan(score):
                continue
            matrix[pair_key(left_id, right_id)] = round(score, MATRIX_PRECISION)
    return matrix


__all__ = [
    "Vector",
    "cosine_similarity",
    "average_vectors",
    "pair_key",
    "similarity_matrix",
]
