"""Evaluation of polynomials at integer points."""

from polycalc.polynomials import Polynomial
from polycalc.common import typechecked

def int_pow(base, exp):
    """base**exp by repeated multiplication; exp must be non-negative."""
    if exp < 0:
        raise ValueError("negative exponent {}".format(exp))
    result = 1
    for i in range(exp):
        result *= base
    return result

@typechecked
def evaluate(p : Polynomial, x : int) -> int:
    result = 0
    for t in p:
        result += t.coefficient * int_pow(x, t.exponent)
    return result

def degree(p : Polynomial) -> int:
    return p.degree()
