"""Numerical helpers shared by the boundary element code."""

from __future__ import annotations

import cmath
import itertools
import math
import os
import re
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Hashable, Iterable, Sequence

import numpy as np
from scipy.special import hankel1

__all__ = [
    "Direction",
    "cexp",
    "plane_wave",
    "max_vector_index",
    "infty_error",
    "p_error",
    "hankel0_1",
    "conjugate",
    "stretch",
    "compress",
    "intersect",
    "get_env_bool",
    "get_env_int",
    "square_diagonal",
    "sqrt_diagonal",
    "invert_diagonal",
    "transpose",
    "product",
    "distance",
    "now",
    "time_difference",
    "find_index",
    "basis_vector",
    "l2_norm",
    "join",
    "remove",
    "plot_function",
    "tensorize",
    "reduce_matrices",
    "affine_combination",
    "linear_combination",
    "vector_norm",
]

Interval = tuple[float, float]
Support = list[tuple[float, Any]]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Direction(Enum):
    """Side from which a point lying on a partition node is approached."""

    LEFT = "left"
    RIGHT = "right"


def cexp(t: complex | float) -> complex:
    """Return exp(t) for a complex argument and exp(i*t) for a real one."""
    if isinstance(t, complex):
        return cmath.exp(t)
    return complex(math.cos(t), math.sin(t))


def plane_wave(angle: float, wavenumber: float) -> Callable[[float, float], complex]:
    """Return the plane wave (x, y) -> exp(i k (sin(a) x - cos(a) y))."""
    sin_a = math.sin(angle)
    cos_a = math.cos(angle)

    def wave(x: float, y: float) -> complex:
        return cexp(float(wavenumber * (sin_a * x - cos_a * y)))

    return wave


def max_vector_index(vec: Iterable[complex]) -> int:
    """Index of the first entry of largest modulus; 0 if all entries vanish."""
    index = 0
    largest = 0.0
    for position, value in enumerate(vec):
        magnitude = abs(value)
        if largest < magnitude:
            largest = magnitude
            index = position
    return index


def _as_matrix(matrix: Any) -> np.ndarray:
    array = np.asarray(matrix, dtype=complex)
    if array.ndim != 2:
        raise ValueError("expected a two-dimensional matrix")
    return array


def infty_error(original: Any, approximation: Any, relative: bool = False) -> float:
    """Largest entrywise (optionally relative) difference between two matrices."""
    orig = _as_matrix(original)
    approx = _as_matrix(approximation)
    if orig.shape != approx.shape:
        raise ValueError("matrices must have the same shape")
    if orig.size == 0:
        return 0.0
    diff = np.abs(orig - approx)
    if relative:
        with np.errstate(divide="ignore", invalid="ignore"):
            diff = diff / np.abs(orig)
    # Entries yielding NaN never win the comparison, as in a plain "max < value" scan.
    valid = diff[~np.isnan(diff)]
    return max(0.0, float(valid.max())) if valid.size else 0.0


def p_error(original: Any, approximation: Any, relative: bool = False) -> float:
    """Frobenius norm of the difference, optionally relative to the original."""
    orig = _as_matrix(original)
    approx = _as_matrix(approximation)
    error = float(np.linalg.norm(orig - approx))
    return error / float(np.linalg.norm(orig)) if relative else error


def hankel0_1(z: float) -> complex:
    """Hankel function of the first kind and order zero."""
    return complex(hankel1(0, z))


def conjugate(vec: Any) -> np.ndarray:
    """Entrywise complex conjugate of a vector."""
    return np.conj(np.asarray(vec, dtype=complex))


def stretch(matrix: Any) -> np.ndarray:
    """Stack the columns of a matrix into one vector."""
    return _as_matrix(matrix).flatten(order="F")


def compress(vector: Any) -> np.ndarray:
    """Inverse of :func:`stretch` for square matrices."""
    values = np.asarray(vector, dtype=complex).ravel()
    side = math.isqrt(values.size)
    if side * side != values.size:
        raise ValueError("vector length is not a perfect square")
    return values.reshape((side, side), order="F")


def intersect(sup1: Interval, sup2: Interval) -> Interval:
    """Intersection of two intervals; empty when the first end exceeds the second."""
    return (max(sup1[0], sup2[0]), min(sup1[1], sup2[1]))


def get_env_bool(name: str) -> bool:
    """True only if the environment variable is set to the string 'true'."""
    return os.environ.get(name) == "true"


def get_env_int(name: str) -> int:
    """Integer value of an environment variable, or -1 when it is unset."""
    value = os.environ.get(name)
    if value is None:
        return -1
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"environment variable {name} is not an integer: {value!r}")
    return int(match.group(1))


def _square(matrix: Any) -> np.ndarray:
    array = _as_matrix(matrix).copy()
    if array.shape[0] != array.shape[1]:
        raise ValueError("matrix must be square")
    return array


def _map_nonzero_diagonal(diag: Any, operation: Callable[[np.ndarray], np.ndarray]) -> np.ndarray:
    result = _square(diag)
    entries = np.diagonal(result).copy()
    mask = np.abs(entries) > 0
    entries[mask] = operation(entries[mask])
    np.fill_diagonal(result, entries)
    return result


def square_diagonal(diag: Any) -> np.ndarray:
    """Copy of a square matrix with its non-zero diagonal entries squared."""
    return _map_nonzero_diagonal(diag, lambda d: d * d)


def sqrt_diagonal(diag: Any) -> np.ndarray:
    """Copy of a square matrix with square roots of its non-zero diagonal entries."""
    return _map_nonzero_diagonal(diag, np.sqrt)


def invert_diagonal(diag: Any) -> np.ndarray:
    """Copy of a square matrix with its non-zero diagonal entries inverted."""
    return _map_nonzero_diagonal(diag, lambda d: 1.0 / d)


def transpose(matrix: Any) -> np.ndarray:
    """Plain (non-conjugating) transpose."""
    return _as_matrix(matrix).T.copy()


def product(matrix1: Any, matrix2: Any) -> np.ndarray:
    """Matrix product of two compatible matrices."""
    left = _as_matrix(matrix1)
    right = _as_matrix(matrix2)
    if left.shape[1] != right.shape[0]:
        raise ValueError("inner matrix dimensions do not agree")
    return left @ right


def distance(sup1: Interval, sup2: Interval) -> float:
    """Gap between two intervals, zero if they overlap or touch."""
    first, second = intersect(sup1, sup2)
    if first <= second:
        return 0.0
    return first - second


def now() -> datetime:
    """Current wall-clock time."""
    return datetime.now()


def time_difference(time1: datetime, time2: datetime) -> int:
    """Whole milliseconds elapsed from time1 to time2."""
    return int((time2 - time1) / timedelta(milliseconds=1))


def find_index(partition: Sequence[float], point: float, direction: Direction) -> int:
    """Index of the partition interval containing point.

    A point on an interior node is placed in the interval to its left or right
    according to direction.
    """
    if not partition:
        raise ValueError("partition must not be empty")
    last = len(partition) - 1
    lower, higher = 0, last
    while lower + 1 < higher:
        middle = (lower + higher) // 2
        node = partition[middle]
        if node < point:
            lower = middle
        elif node > point:
            higher = middle
        elif direction is Direction.LEFT:
            return middle - 1 if middle > 0 else middle
        else:
            return middle if middle < last else middle - 1
    return lower


def basis_vector(i: int, size: int) -> list[complex]:
    """Unit vector of the given size with a one at position i."""
    if not 0 <= i < size:
        raise IndexError("basis index out of range")
    result = [0j] * size
    result[i] = 1 + 0j
    return result


def l2_norm(function: Callable[[float], complex]) -> float:
    """Approximate L2 norm on [0, 1] from the real part of f squared."""
    points = 2000
    total = sum(
        (function(j / points) * function(j / points)).real / (points - 1)
        for j in range(1, points)
    )
    return math.sqrt(total) if total >= 0 else math.nan


def _keys(support: Iterable[tuple[Hashable, Any]]) -> set:
    seen: set = set()
    for key, _ in support:
        if key in seen:
            raise ValueError(f"duplicate support point {key!r}")
        seen.add(key)
    return seen


def join(sup1: Support, sup2: Support) -> Support:
    """Union of two supports keyed by their first element, keeping first occurrences."""
    included = _keys(sup1)
    result = list(sup1)
    for item in sup2:
        if item[0] not in included:
            included.add(item[0])
            result.append(item)
    return result


def remove(sup1: Support, sup2: Support) -> Support:
    """Entries of sup2 whose keys do not appear in sup1."""
    excluded = _keys(sup1)
    return [item for item in sup2 if item[0] not in excluded]


def plot_function(file_name: str | os.PathLike, function: Callable[[float], complex]) -> Path:
    """Write 'position real imag' samples of a function on [0, 1) to file_name.txt."""
    points = 200
    path = Path(f"{os.fspath(file_name)}.txt")
    with path.open("w") as handle:
        for j in range(points):
            position = j / points
            value = complex(function(position))
            handle.write(f"{position:g} {value.real:g} {value.imag:g}\n")
    return path


def tensorize(points: Sequence[Sequence[float]]) -> list[list[float]]:
    """Tensor grid of the given coordinate lists, the first coordinate varying fastest."""
    return [list(reversed(combo)) for combo in itertools.product(*reversed(points))]


def reduce_matrices(full_matrices: Iterable[Any], reduced_basis: Any) -> list[np.ndarray]:
    """Project each matrix onto a reduced basis: B^H A B."""
    basis = _as_matrix(reduced_basis)
    adjoint = basis.conj().T
    return [product(product(adjoint, matrix), basis) for matrix in full_matrices]


def affine_combination(vec: Sequence[Any], point: Sequence[Any]) -> Any:
    """vec[0] + sum(point[i] * vec[i + 1])."""
    if len(vec) != len(point) + 1:
        raise ValueError("need exactly one more term than coordinates")
    result = vec[0]
    for coefficient, term in zip(point, vec[1:]):
        result = result + coefficient * term
    return result


def linear_combination(vec: Sequence[Any], point: Sequence[Any]) -> Any:
    """sum(point[i] * vec[i])."""
    if len(vec) != len(point) or not vec:
        raise ValueError("terms and coefficients must be non-empty and of equal length")
    result = vec[0] * point[0]
    for coefficient, term in zip(point[1:], vec[1:]):
        result = result + coefficient * term
    return result


def vector_norm(vec: Sequence[Any]) -> float:
    """Euclidean norm of a vector."""
    if not vec:
        raise ValueError("vector must not be empty")
    return math.sqrt(sum(abs(value * value) for value in vec))