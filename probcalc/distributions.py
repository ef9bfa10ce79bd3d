import numpy as np

from .combinatorics import combination
from .special import factorial, ieee_float, is_integer
from .summation import weighted_sum

# returned by a discrete pmf asked about a non-integer count
REJECTED = False


@ieee_float
def uniform_cdf(a: float, b: float, x: float) -> float:
    if x < a:
        return 0.0
    if x < b:
        return (np.float64(x) - a) / (np.float64(b) - a)
    return 1.0


@ieee_float
def binomial_pmf(n: float, p: float, k: float) -> float:
    p = np.float64(p)
    return combination(n, k) * p ** k * (1 - p) ** (np.float64(n) - k)


@ieee_float
def binomial_cdf(n: float, p: float, x: float) -> float:
    if x < 0:
        return 0.0
    if x < n:
        return weighted_sum(lambda k: binomial_pmf(n, p, k), 0, x)
    return 1.0


@ieee_float
def binomial_cdf_range(n: float, p: float, kmin: float, kmax: float) -> float:
    # P(kmin <= X <= kmax); X < kmin means X <= ceil(kmin) - 1
    lower = binomial_cdf(n, p, np.ceil(kmin) - 1) if kmin > 0 else 0.0
    return np.float64(binomial_cdf(n, p, kmax)) - lower


@ieee_float
def binomial_sf(n: float, p: float, k: float) -> float:
    # P(X >= k)
    if k <= 0:
        return 1.0
    return 1.0 - np.float64(binomial_cdf(n, p, np.ceil(k) - 1))


@ieee_float
def negbin_pmf(r: float, p: float, x: float):
    # x failures before the r-th success
    if not is_integer(x):
        return REJECTED
    if x < 0:
        return 0.0
    p = np.float64(p)
    return combination(x + r - 1, r - 1) * p ** r * (1 - p) ** np.float64(x)


@ieee_float
def negbin_cdf(r: float, p: float, x: float) -> float:
    if x < 0:
        return 0.0
    return weighted_sum(lambda k: negbin_pmf(r, p, k), 0, x)


@ieee_float
def hypergeom_pmf(N: float, m: float, n: float, x: float):
    """P(X = x) when drawing `n` items without replacement from `N` items,
    `m` of which are of the counted type.

    Returns False for a non-integer `x`.
    """
    if not is_integer(x):
        return REJECTED
    if x < 0:
        return 0.0
    return (np.float64(combination(m, x)) * combination(N - m, n - x)
            / combination(N, n))


@ieee_float
def hypergeom_cdf(N: float, m: float, n: float, x: float) -> float:
    if x < 0:
        return 0.0
    return weighted_sum(lambda k: hypergeom_pmf(N, m, n, k), 0, x)


@ieee_float
def exponential_cdf(lam: float, x: float) -> float:
    # lam is part of the signature only; the curve is the unit-rate one
    return 1 - np.exp(-np.float64(x))


@ieee_float
def poisson_pmf(lam: float, x: float) -> float:
    # no integer check: a fractional x goes through the gamma extension of x!
    lam = np.float64(lam)
    return lam ** x * np.exp(-lam) / factorial(x)


@ieee_float
def poisson_cdf(lam: float, x: float) -> float:
    if x < 0:
        return 0.0
    return weighted_sum(lambda k: poisson_pmf(lam, k), 0, x)


# jstat-compatible names
binomial = binomial_pmf
negbin = negbin_pmf
hypgeom = hypergeom_pmf
poisson = poisson_pmf
uniformcdf = uniform_cdf
binomialcdf = binomial_cdf
negbincdf = negbin_cdf
hypgeomcdf = hypergeom_cdf
exponentialcdf = exponential_cdf
poissoncdf = poisson_cdf
