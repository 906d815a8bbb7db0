"""Vector math: the cosine similarity primitive used by scoring."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import numpy as np

from transference_core.models.enums import DimensionPolicy
from transference_engine.exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from collections.abc import Sequence

EPSILON = 1e-9


def _as_array(values: Sequence[float]) -> np.ndarray[Any, np.dtype[np.float64]]:
    return np.asarray(values, dtype=np.float64)


def _paired(
    a: Sequence[float],
    b: Sequence[float],
    policy: DimensionPolicy,
) -> tuple[np.ndarray[Any, np.dtype[np.float64]], np.ndarray[Any, np.dtype[np.float64]]]:
    left, right = _as_array(a), _as_array(b)
    if left.shape[0] == right.shape[0]:
        return left, right
    if policy is DimensionPolicy.STRICT:
        raise DimensionMismatchError(left.shape[0], right.shape[0])
    n = min(left.shape[0], right.shape[0])
    return left[:n], right[:n]


def _rescaled(
    values: np.ndarray[Any, np.dtype[np.float64]],
) -> np.ndarray[Any, np.dtype[np.float64]]:
    # Dividing by the largest component keeps dot and norms finite for huge inputs.
    if values.size == 0:
        return values
    peak = float(np.max(np.abs(values)))
    if not math.isfinite(peak) or peak == 0.0:
        return values
    return values / peak


def magnitude(values: Sequence[float]) -> float:
    """Euclidean norm of a vector. Zero for an empty vector."""
    return float(np.linalg.norm(_as_array(values)))


def cosine_distance(
    a: Sequence[float],
    b: Sequence[float],
    *,
    epsilon: float = EPSILON,
    policy: DimensionPolicy = DimensionPolicy.STRICT,
) -> float:
    """Cosine distance ``1 - a·b / (|a||b| + epsilon)``.

    The epsilon keeps zero-magnitude vectors from dividing by zero, so a
    degenerate input yields exactly 1.0 instead of an error. Under
    ``DimensionPolicy.TRUNCATE`` unequal vectors are paired up to the shorter
    length; under ``STRICT`` they raise DimensionMismatchError.

    Both vectors are scaled by their largest absolute component first, so
    very large finite components do not overflow; epsilon applies to the
    scaled magnitudes. Non-finite components propagate: the result is NaN,
    never an exception.
    """
    left, right = _paired(a, b, policy)
    left, right = _rescaled(left), _rescaled(right)
    with np.errstate(invalid="ignore", over="ignore"):
        dot = float(np.dot(left, right))
        denominator = float(np.linalg.norm(left) * np.linalg.norm(right)) + epsilon
        return 1.0 - dot / denominator


def cosine_similarity(
    a: Sequence[float],
    b: Sequence[float],
    *,
    epsilon: float = EPSILON,
    policy: DimensionPolicy = DimensionPolicy.STRICT,
) -> float:
    """``1 - cosine_distance(a, b)``; in [-1, 1] for finite inputs."""
    return 1.0 - cosine_distance(a, b, epsilon=epsilon, policy=policy)
