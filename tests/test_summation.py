from probcalc.summation import weighted_sum, sum_func


def test_sum_of_identity():
    assert weighted_sum(lambda i: i, 0, 10) == 55


def test_sum_of_squares():
    assert weighted_sum(lambda i: i * i, 1, 4) == 30


def test_single_term():
    assert weighted_sum(lambda i: 2.5, 3, 3) == 2.5


def test_empty_range_is_zero():
    assert weighted_sum(lambda i: 1 / 0, 5, 4) == 0


def test_real_upper_bound_rounds_down():
    seen = []
    weighted_sum(lambda i: seen.append(i) or 0, 0, 2.5)
    assert seen == [0, 1, 2]


def test_alias():
    assert sum_func is weighted_sum
