"""Descriptive statistics over a sequence of numbers.

Conventions follow jstat: `variance` is the sample variance (n - 1), while
`covariance` divides by n, and `corrcoeff` mixes the two.
"""
import math
from typing import Sequence, Union

import numpy as np


def _as_array(values: Sequence[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError("values must be a non-empty 1-D sequence")
    return arr


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def total(values: Sequence[float]) -> float:
    return float(np.sum(_as_array(values)))


def minimum(values: Sequence[float]) -> float:
    return float(np.min(_as_array(values)))


def maximum(values: Sequence[float]) -> float:
    return float(np.max(_as_array(values)))


def mean(values: Sequence[float]) -> float:
    return float(np.mean(_as_array(values)))


def median(values: Sequence[float]) -> float:
    return float(np.median(_as_array(values)))


def mode(values: Sequence[float]) -> Union[float, bool]:
    """Most frequent value, or False when more than one value shares the top count."""
    uniq, counts = np.unique(_as_array(values), return_counts=True)
    top = counts == counts.max()
    if np.count_nonzero(top) > 1:
        return False
    return float(uniq[top][0])


def value_range(values: Sequence[float]) -> float:
    arr = _as_array(values)
    return float(np.max(arr) - np.min(arr))


def variance(values: Sequence[float]) -> float:
    arr = _as_array(values)
    if arr.size < 2:
        return math.nan
    return float(np.var(arr, ddof=1))


def stdev(values: Sequence[float]) -> float:
    return math.sqrt(variance(values))


def meandev(values: Sequence[float]) -> float:
    arr = _as_array(values)
    return float(np.mean(np.abs(arr - arr.mean())))


def meddev(values: Sequence[float]) -> float:
    arr = _as_array(values)
    return float(np.mean(np.abs(arr - np.median(arr))))


def quartiles(values: Sequence[float]) -> list[float]:
    arr = np.sort(_as_array(values))
    n = arr.size
    positions = (_round_half_up(n / 4), _round_half_up(n / 2), _round_half_up(n * 3 / 4))
    return [float(arr[max(pos - 1, 0)]) for pos in positions]


def covariance(xs: Sequence[float], ys: Sequence[float]) -> float:
    a, b = _as_array(xs), _as_array(ys)
    if a.size != b.size:
        raise ValueError("covariance needs sequences of equal length")
    return float(np.mean((a - a.mean()) * (b - b.mean())))


def corrcoeff(xs: Sequence[float], ys: Sequence[float]) -> float:
    with np.errstate(all="ignore"):
        return float(np.float64(covariance(xs, ys)) / stdev(xs) / stdev(ys))


def describe(values: Sequence[float]) -> dict:
    return {
        "n": int(_as_array(values).size),
        "sum": total(values),
        "min": minimum(values),
        "max": maximum(values),
        "mean": mean(values),
        "median": median(values),
        "mode": mode(values),
        "range": value_range(values),
        "variance": variance(values),
        "stdev": stdev(values),
        "meandev": meandev(values),
        "meddev": meddev(values),
        "quartiles": quartiles(values),
    }
