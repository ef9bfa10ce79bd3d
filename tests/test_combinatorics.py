import math

import pytest

from probcalc.combinatorics import combination, permutation


def test_known_values():
    assert combination(10, 4) == 210
    assert permutation(10, 4) == 5040
    assert combination(5, 0) == 1
    assert permutation(5, 5) == 120


@pytest.mark.parametrize("n", range(0, 21))
def test_combination_symmetry(n):
    for k in range(n + 1):
        assert combination(n, k) == pytest.approx(combination(n, n - k), rel=1e-12)


def test_combination_matches_exact_count():
    for n in range(0, 25):
        for k in range(n + 1):
            assert combination(n, k) == pytest.approx(math.comb(n, k), rel=1e-12)


@pytest.mark.parametrize("n,k", [(5, 7), (-1, 2), (4, -1)])
def test_combination_out_of_domain_is_nan(n, k):
    assert math.isnan(combination(n, k))


def test_permutation_out_of_domain_is_nan():
    assert math.isnan(permutation(3, 5))


def test_combination_extends_through_gamma():
    # Gamma(5.5) / (2! * Gamma(3.5)) = 4.5 * 3.5 / 2
    assert combination(4.5, 2) == pytest.approx(7.875, rel=1e-10)
