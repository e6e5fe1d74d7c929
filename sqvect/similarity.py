"""Similarity measures between vectors; higher results mean more similar."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

SimilarityFunc = Callable[[Sequence[float], Sequence[float]], float]


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between ``a`` and ``b``, in [-1, 1].

    Vectors of different lengths, or a zero vector, give 0.0.
    """
    if len(a) != len(b):
        return 0.0
    dot = norm_a = norm_b = 0.0
    for x, y in zip(a, b):
        x = float(x)
        y = float(y)
        dot += x * y
        norm_a += x * x
        norm_b += y * y
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of ``a`` and ``b``; 0.0 for vectors of different lengths."""
    if len(a) != len(b):
        return 0.0
    result = 0.0
    for x, y in zip(a, b):
        result += float(x) * float(y)
    return result


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Negative Euclidean distance, so that higher values mean more similar.

    Vectors of different lengths give negative infinity.
    """
    if len(a) != len(b):
        return -math.inf
    total = 0.0
    for x, y in zip(a, b):
        diff = float(x) - float(y)
        total += diff * diff
    return -math.sqrt(total)


def get_cosine_similarity() -> SimilarityFunc:
    """Return the cosine similarity function."""
    return cosine_similarity


def get_dot_product() -> SimilarityFunc:
    """Return the dot product function."""
    return dot_product


def get_euclidean_dist() -> SimilarityFunc:
    """Return the negative Euclidean distance function."""
    return euclidean_distance