from __future__ import annotations

from typing import Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]


class DimensionMismatchError(ValueError):
    """Vectors combined elementwise do not share one dimensionality."""


def _as_matrix(vectors: Sequence[VectorLike]) -> np.ndarray:
    arrays = [np.asarray(vec, dtype=np.float64) for vec in vectors]
    for idx, arr in enumerate(arrays):
        if arr.ndim != 1:
            raise DimensionMismatchError(f"vector {idx} is not one-dimensional: shape={arr.shape}")
    dims = {arr.shape[0] for arr in arrays}
    if len(dims) > 1:
        raise DimensionMismatchError(f"vectors differ in dimension: {sorted(dims)}")
    return np.stack(arrays)


def add_vectors(v1: VectorLike, v2: VectorLike, *vs: VectorLike) -> np.ndarray:
    return _as_matrix([v1, v2, *vs]).sum(axis=0)


def mult_vectors(v1: VectorLike, v2: VectorLike, *vs: VectorLike) -> np.ndarray:
    return _as_matrix([v1, v2, *vs]).prod(axis=0)


def mean_vectors(v1: VectorLike, v2: VectorLike, *vs: VectorLike) -> np.ndarray:
    """Elementwise mean; the divisor is the number of vectors passed."""

    matrix = _as_matrix([v1, v2, *vs])
    return matrix.sum(axis=0) / matrix.shape[0]


def cosine_similarity(v1: VectorLike, v2: VectorLike) -> float:
    matrix = _as_matrix([v1, v2])
    norms = np.linalg.norm(matrix, axis=1)
    if not np.all(norms > 0):
        raise ValueError("cosine similarity is undefined for zero vectors")
    return float(matrix[0] @ matrix[1] / (norms[0] * norms[1]))
