"""The calculator session: two stored expressions and the latest result.

PolyCalculator owns three polynomials:
 - exp1, exp2: the operands, replaced by `set_expressions` and `read`
 - result: cleared and rebuilt by every arithmetic operation

Failures are reported with exceptions (ParseError, InvalidSelector,
ReadError); after any failure the stored expressions are empty, never
half-loaded.
"""

from polycalc import arithmetic
from polycalc import evaluation
from polycalc.common import read_lines
from polycalc.logging import operation, event
from polycalc.parse import ParseError, parse_into
from polycalc.polynomials import Polynomial

class InvalidSelector(Exception):
    pass

class ReadError(Exception):
    pass

class PolyCalculator(object):

    def __init__(self):
        self.exp1 = Polynomial()
        self.exp2 = Polynomial()
        self.result = Polynomial()

    def expression(self, exp_id):
        """The stored expression named by exp_id (1 or 2)."""
        if exp_id == 1:
            return self.exp1
        if exp_id == 2:
            return self.exp2
        raise InvalidSelector("invalid expression id {}".format(exp_id))

    def set_expressions(self, text1, text2):
        """Replace both expressions with freshly parsed text."""
        self._load(text1, text2, where="")

    def read(self, path):
        """Load Exp1 and Exp2 from the first two lines of a file."""
        with operation("read", path=path):
            self.exp1.clear()
            self.exp2.clear()
            try:
                lines = read_lines(path, 2)
            except OSError as e:
                event("open failed: {}".format(e))
                raise ReadError("cannot open file \"{}\"".format(path)) from e
            except UnicodeDecodeError as e:
                event("decode failed: {}".format(e))
                raise ReadError("file \"{}\" is not a text file".format(path)) from e
            if len(lines) < 2:
                raise ReadError("file does not contain Exp{}".format(len(lines) + 1))
            self._load(lines[0], lines[1], where=" in file")

    def _load(self, text1, text2, where):
        self.exp1.clear()
        self.exp2.clear()
        for exp_id, text in ((1, text1), (2, text2)):
            try:
                parse_into(text, self.expression(exp_id))
            except ParseError as e:
                self.exp1.clear()
                self.exp2.clear()
                raise ParseError("invalid expression for Exp{}{}".format(exp_id, where)) from e

    def display(self):
        return "Exp1: {}\nExp2: {}".format(self.exp1, self.exp2)

    def _compute(self, name, op):
        with operation(name, exp1=self.exp1, exp2=self.exp2):
            self.result.clear()
            for t in op(self.exp1, self.exp2):
                self.result.insert(t.coefficient, t.exponent)
            event("result = {}".format(self.result))
        return str(self.result)

    def add(self):
        """Result := Exp1 + Exp2."""
        return self._compute("add", arithmetic.add)

    def sub(self):
        """Result := Exp1 - Exp2."""
        return self._compute("sub", arithmetic.subtract)

    def mul(self):
        """Result := Exp1 * Exp2."""
        return self._compute("mul", arithmetic.multiply)

    def evaluate(self, exp_id, x):
        """Returns the expression's canonical text and its value at x."""
        p = self.expression(exp_id)
        with operation("evaluate", exp_id=exp_id, x=x):
            return (str(p), evaluation.evaluate(p, x))

    def get_degree(self, exp_id):
        return evaluation.degree(self.expression(exp_id))

    def is_equal(self):
        return self.exp1 == self.exp2
