"""Addition, subtraction and multiplication of polynomials.

Every operation leaves its operands untouched and returns a new Polynomial.
Addition and subtraction walk both operands in lock-step, relying on the
descending order of their exponents.
"""

from polycalc.polynomials import Polynomial
from polycalc.common import typechecked

def _merge(a, b, sign):
    """Compute a + sign*b with a single pass over both term lists."""
    res = Polynomial()
    ta = a.terms
    tb = b.terms
    i = j = 0
    while i < len(ta) and j < len(tb):
        if ta[i].exponent == tb[j].exponent:
            res.insert(ta[i].coefficient + sign * tb[j].coefficient, ta[i].exponent)
            i += 1
            j += 1
        elif ta[i].exponent > tb[j].exponent:
            res.insert(ta[i].coefficient, ta[i].exponent)
            i += 1
        else:
            res.insert(sign * tb[j].coefficient, tb[j].exponent)
            j += 1
    for t in ta[i:]:
        res.insert(t.coefficient, t.exponent)
    for t in tb[j:]:
        res.insert(sign * t.coefficient, t.exponent)
    return res

@typechecked
def add(a : Polynomial, b : Polynomial) -> Polynomial:
    return _merge(a, b, 1)

@typechecked
def subtract(a : Polynomial, b : Polynomial) -> Polynomial:
    """Compute a - b."""
    return _merge(a, b, -1)

@typechecked
def multiply(a : Polynomial, b : Polynomial) -> Polynomial:
    """Multiply every term of a by every term of b.

    Products with equal exponents are combined by `Polynomial.insert`, so
    this costs O(|a|*|b|) inserts of up to O(|result|) each.
    """
    res = Polynomial()
    for t1 in a:
        for t2 in b:
            res.insert(t1.coefficient * t2.coefficient, t1.exponent + t2.exponent)
    return res
