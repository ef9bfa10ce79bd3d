import math

from probcalc import factorial, gamma, negbin_pmf, poisson_cdf
from probcalc.outcomes import Outcome, Result, evaluate, tag


def test_tag_value():
    res = tag(0.5)
    assert res == Result(Outcome.VALUE, 0.5)
    assert res.ok


def test_tag_zero_is_a_value_not_a_rejection():
    assert tag(0.0).outcome is Outcome.VALUE
    assert tag(0).outcome is Outcome.VALUE


def test_tag_nan_and_false_are_distinct():
    assert tag(math.nan).outcome is Outcome.DOMAIN_ERROR
    assert tag(False).outcome is Outcome.REJECTED
    assert not tag(False).ok


def test_evaluate():
    assert evaluate(factorial, 5) == Result(Outcome.VALUE, 120.0)
    assert evaluate(factorial, -1).outcome is Outcome.DOMAIN_ERROR
    assert evaluate(negbin_pmf, 2, 0.5, 1.5).outcome is Outcome.REJECTED
    assert evaluate(poisson_cdf, 2, -1).value == 0


def test_as_dict():
    assert evaluate(factorial, 3).as_dict() == {"outcome": "value", "value": 6.0}
    assert evaluate(factorial, -3).as_dict() == {"outcome": "domain-error", "value": None}
    assert tag(False).as_dict() == {"outcome": "rejected", "value": None}
    assert evaluate(gamma, 200.5).as_dict() == {"outcome": "value", "value": "inf"}
    assert tag(-math.inf).as_dict()["value"] == "-inf"
