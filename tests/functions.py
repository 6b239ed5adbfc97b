import math
from typing import Sequence

from pytest import approx


def assert_triples_close(t1: Sequence[float], t2: Sequence[float], abs_tol=1e-6):
    """
    Asserts that two 3-tuples (ECEF, ENU or geodetic) are component-wise equal within an
    absolute tolerance.

    Args:
        t1: The first triple
        t2: The second triple
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-6 (one micrometer for cartesian triples).
    """
    assert len(t1) == len(t2) == 3
    try:
        for v1, v2 in zip(t1, t2):
            assert v1 == approx(v2, abs=abs_tol)
    except AssertionError as e:
        print(tuple(t1))
        print(tuple(t2))
        raise e


def norm(vector: Sequence[float]) -> float:
    return math.sqrt(sum(v * v for v in vector))
