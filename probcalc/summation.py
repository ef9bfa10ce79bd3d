from typing import Callable


def weighted_sum(func: Callable[[float], float], a: float, b: float) -> float:
    """Sum func(i) for i = a, a + 1, ... while i <= b.

    `b` may be real, in which case the last term is at floor(b) (for integer
    `a`). An empty range sums to 0.
    """
    total = 0.0
    while a <= b:
        total += func(a)
        a += 1
    return total


sum_func = weighted_sum
