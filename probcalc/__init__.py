"""Special functions, combinatorics and discrete distributions.

Everything numeric is importable from the package root, including the
descriptive statistics helpers.
"""
__version__ = "0.3"

from .special import factorial, gamma, is_integer
from .combinatorics import combination, permutation
from .summation import weighted_sum, sum_func
from .distributions import (
    REJECTED,
    uniform_cdf, binomial_pmf, binomial_cdf, binomial_cdf_range, binomial_sf,
    negbin_pmf, negbin_cdf, hypergeom_pmf, hypergeom_cdf,
    exponential_cdf, poisson_pmf, poisson_cdf,
    binomial, negbin, hypgeom, poisson,
    uniformcdf, binomialcdf, negbincdf, hypgeomcdf, exponentialcdf, poissoncdf,
)
from .outcomes import Outcome, Result, tag, evaluate
from .descriptive import (
    total, minimum, maximum, mean, median, mode, value_range,
    variance, stdev, meandev, meddev, quartiles, covariance, corrcoeff,
    describe,
)
