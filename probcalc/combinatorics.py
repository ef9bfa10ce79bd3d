"""Counting functions built on `factorial`.

Neither function guards its arguments: k > n or negative inputs reach
`factorial` and come back as nan or inf.
"""
import numpy as np

from .special import factorial, ieee_float


@ieee_float
def combination(n: float, k: float) -> float:
    return np.float64(factorial(n)) / factorial(k) / factorial(n - k)


@ieee_float
def permutation(n: float, r: float) -> float:
    return np.float64(factorial(n)) / factorial(n - r)
