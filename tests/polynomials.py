import unittest

from polycalc.polynomials import Polynomial, Term

def assert_canonical(p):
    exponents = [t.exponent for t in p]
    assert all(e1 > e2 for e1, e2 in zip(exponents, exponents[1:])), repr(p)
    assert all(t.coefficient != 0 for t in p), repr(p)

class TestPolynomials(unittest.TestCase):

    def test_empty(self):
        p = Polynomial()
        self.assertEqual(len(p), 0)
        self.assertEqual(str(p), "0")
        self.assertEqual(p.degree(), -1)
        assert not p

    def test_insert_front_middle_end(self):
        p = Polynomial()
        p.insert(3, 2)
        p.insert(5, 7)
        p.insert(-1, 0)
        p.insert(4, 4)
        self.assertEqual(p.terms, (Term(5, 7), Term(4, 4), Term(3, 2), Term(-1, 0)))
        assert_canonical(p)

    def test_insert_zero_is_noop(self):
        p = Polynomial([(2, 3), (1, 1)])
        before = p.terms
        p.insert(0, 3)
        p.insert(0, 2)
        p.insert(0, 9)
        self.assertEqual(p.terms, before)

    def test_merge_at_head(self):
        p = Polynomial([(2, 3), (1, 1)])
        p.insert(5, 3)
        self.assertEqual(str(p), "+7x^3 +1x^1")
        p.insert(-7, 3)
        self.assertEqual(str(p), "+1x^1")
        self.assertEqual(p.degree(), 1)

    def test_merge_in_middle(self):
        p = Polynomial([(2, 3), (1, 2), (1, 0)])
        p.insert(4, 2)
        self.assertEqual(str(p), "+2x^3 +5x^2 +1x^0")
        p.insert(-5, 2)
        self.assertEqual(str(p), "+2x^3 +1x^0")
        assert_canonical(p)

    def test_cancel_last_term(self):
        p = Polynomial([(6, 0)])
        p.insert(-6, 0)
        self.assertEqual(len(p), 0)
        self.assertEqual(str(p), "0")

    def test_negative_exponent(self):
        p = Polynomial()
        with self.assertRaises(ValueError):
            p.insert(1, -1)

    def test_canonical_string(self):
        p = Polynomial([(8, 0), (-6, 1), (2, 2), (4, 3)])
        self.assertEqual(str(p), "+4x^3 +2x^2 -6x^1 +8x^0")

    def test_clear(self):
        p = Polynomial([(1, 1), (1, 0)])
        p.clear()
        self.assertEqual(p, Polynomial())
        p.clear()
        self.assertEqual(str(p), "0")

    def test_equality(self):
        self.assertEqual(Polynomial([(1, 2), (3, 0)]), Polynomial([(3, 0), (1, 2)]))
        self.assertNotEqual(Polynomial([(1, 2)]), Polynomial([(1, 2), (3, 0)]))
        self.assertNotEqual(Polynomial([(1, 2)]), Polynomial([(2, 2)]))
        self.assertNotEqual(Polynomial([(1, 2)]), Polynomial([(1, 1)]))
        self.assertEqual(Polynomial(), Polynomial())

    def test_copy_does_not_alias(self):
        p = Polynomial([(1, 1)])
        q = p.copy()
        q.insert(1, 0)
        self.assertEqual(str(p), "+1x^1")
        self.assertEqual(str(q), "+1x^1 +1x^0")

    def test_coefficient(self):
        p = Polynomial([(4, 3), (-6, 1)])
        self.assertEqual(p.coefficient(3), 4)
        self.assertEqual(p.coefficient(1), -6)
        self.assertEqual(p.coefficient(2), 0)
        self.assertEqual(p.coefficient(0), 0)

    def test_invariant_after_many_inserts(self):
        p = Polynomial()
        for i in range(40):
            p.insert((i % 7) - 3, (i * 5) % 11)
            assert_canonical(p)

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Polynomial())
