"""Class for representing integer polynomials of one variable.

A Polynomial is a sequence of Terms kept in canonical form:
 - exponents strictly decrease from the first term to the last
 - no term has coefficient 0
 - the empty sequence is the zero polynomial

The only way to add terms is `insert`, which preserves all three properties.
"""

from collections import namedtuple

Term = namedtuple("Term", ["coefficient", "exponent"])

class Polynomial(object):
    __slots__ = ("_terms",)

    def __init__(self, terms=()):
        self._terms = []
        for coef, expo in terms:
            self.insert(coef, expo)

    def insert(self, coef, expo):
        """Add the term coef*x^expo, merging with any term of equal exponent.

        A coefficient of zero is ignored.  If merging cancels an existing
        term, that term is removed.
        """
        if expo < 0:
            raise ValueError("negative exponent {}".format(expo))
        if coef == 0:
            return
        terms = self._terms

        # new minimum exponent (also covers the empty polynomial)
        if not terms or expo < terms[-1].exponent:
            terms.append(Term(coef, expo))
            return

        i = 0
        while terms[i].exponent > expo:
            i += 1

        if terms[i].exponent == expo:
            total = terms[i].coefficient + coef
            if total == 0:
                del terms[i]
            else:
                terms[i] = Term(total, expo)
        else:
            terms.insert(i, Term(coef, expo))

    def clear(self):
        self._terms = []

    def degree(self):
        """The largest exponent, or -1 for the zero polynomial."""
        if not self._terms:
            return -1
        return self._terms[0].exponent

    def coefficient(self, expo):
        for t in self._terms:
            if t.exponent == expo:
                return t.coefficient
            if t.exponent < expo:
                break
        return 0

    @property
    def terms(self):
        return tuple(self._terms)

    def copy(self):
        p = Polynomial()
        p._terms = list(self._terms)
        return p

    def __iter__(self):
        return iter(tuple(self._terms))

    def __len__(self):
        return len(self._terms)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None

    def __str__(self):
        if not self._terms:
            return "0"
        return " ".join(
            "{}{}x^{}".format("+" if t.coefficient > 0 else "", t.coefficient, t.exponent)
            for t in self._terms)

    def __repr__(self):
        return "Polynomial({!r})".format([tuple(t) for t in self._terms])
