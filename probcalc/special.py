"""Factorial and gamma evaluation.

All arithmetic runs on numpy float64 scalars with floating-point warnings
silenced, so domain violations come back as nan/inf instead of raising.
"""
import functools

import numpy as np

LN_SQRT_2PI = 0.5 * np.log(2 * np.pi)

# largest n with a finite n! in double precision
MAX_FACTORIAL_ARG = 170

# asymptotic series region and its correction terms in w = 1/x^2 (highest order first)
SERIES_SHIFT = 8
SERIES_COEFFS = (
    -3617 / 122400,
    7 / 1092,
    -691 / 360360,
    5 / 5940,
    -1 / 1680,
    1 / 1260,
    -1 / 360,
    1 / 12,
)


def ieee_float(func):
    """Evaluate `func` with IEEE-754 semantics and return a plain float.

    The discrete-rejection sentinel ``False`` is passed through untouched.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(all="ignore"):
            result = func(*args, **kwargs)
        if result is False:
            return result
        return float(result)
    return wrapper


def is_integer(x) -> bool:
    with np.errstate(invalid="ignore"):
        return bool(x == np.floor(x))


@ieee_float
def factorial(n: float) -> float:
    n = np.float64(n)
    if np.isnan(n) or n < 0:
        return np.nan
    if np.isinf(n):
        return np.inf
    if not is_integer(n):
        return gamma(n + 1)
    if n > MAX_FACTORIAL_ARG:
        return np.inf
    fval = np.float64(1.0)
    while n > 0:
        fval *= n
        n -= 1
    return fval


@ieee_float
def gamma(x: float) -> float:
    """Gamma function.

    Integer arguments are routed through `factorial` so they are exact (and
    nan at the poles x <= 0). Everything else is shifted up with
    Gamma(x) = Gamma(x + 1) / x until x >= 8 and evaluated with Stirling's
    series. A negative shift product (x in (-1, 0), (-3, -2), ...) gives nan.
    """
    x = np.float64(x)
    if np.isnan(x):
        return np.nan
    if np.isinf(x):
        return np.inf if x > 0 else np.nan
    if is_integer(x):
        return factorial(x - 1)

    v = np.float64(1.0)
    while x < SERIES_SHIFT:
        v *= x
        x += 1

    w = 1 / (x * x)
    series = np.float64(0.0)
    for coeff in SERIES_COEFFS:
        series = series * w + coeff

    # v < 0 after an odd number of negative factors; log(v) is then nan
    lngam = series / x + LN_SQRT_2PI - np.log(v) - x + (x - 0.5) * np.log(x)
    return np.exp(lngam)
