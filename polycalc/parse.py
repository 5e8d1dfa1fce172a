"""Parser for polynomial expressions.

Expressions are sums of terms written `Cx^E`, for example

    4x^3 +2x^2 -6x^1 +8x^0

The first term may omit its sign; every later term needs one.  Spaces may
appear between any two tokens.

The important functions are:
 - tokenize:         str -> token stream
 - parse_polynomial: str -> Polynomial
 - parse_into:       str, Polynomial -> None (fills the given polynomial)
"""

# 3rd party
from ply import lex, yacc

# ours
from polycalc.polynomials import Polynomial
from polycalc.logging import operation, event

class ParseError(Exception):
    pass

# Lexer ########################################################################

tokens = ("NUM", "X", "CARET", "PLUS", "MINUS")

def make_lexer():

    # ply discovers token rules by looking at the in-scope variables: plain
    # strings are regexes, functions carry their regex as a docstring.
    t_PLUS = r"\+"
    t_MINUS = r"-"
    t_CARET = r"\^"
    t_X = r"x"

    def t_NUM(t):
        r"[0-9]+"
        t.value = int(t.value)
        return t

    t_ignore = " "

    def t_error(t):
        raise ParseError("illegal character {} at position {}".format(repr(t.value[0]), t.lexpos))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

def make_parser():
    start = "expr"

    def p_expr(p):
        """expr : term
                | PLUS term
                | MINUS term
                | expr PLUS term
                | expr MINUS term"""
        if len(p) == 2:
            p[0] = [p[1]]
        elif len(p) == 3:
            p[0] = [_signed(p[1], p[2])]
        else:
            p[0] = p[1] + [_signed(p[2], p[3])]

    def p_term(p):
        """term : NUM X CARET NUM"""
        p[0] = (p[1], p[4])

    def p_error(p):
        if p is None:
            raise ParseError("unexpected end of expression")
        raise ParseError("unexpected {} at position {}".format(repr(p.value), p.lexpos))

    return yacc.yacc(debug=False, write_tables=False)

def _signed(sign, term):
    coef, expo = term
    return (-coef if sign == "-" else coef, expo)

_parser = make_parser()

def parse_polynomial(s) -> Polynomial:
    """Parse a string as a polynomial.

    Raises ParseError if the text is not a well-formed expression, or if all
    of its terms cancel out: an expression must contribute at least one term.
    """
    with operation("parse", text=s):
        terms = _parser.parse(s, lexer=_lexer.clone())
        res = Polynomial(terms)
        event("parsed {} term(s) into {}".format(len(terms), res))
        if not res:
            raise ParseError("expression {} has no non-zero terms".format(repr(s)))
        return res

def parse_into(s, target : Polynomial):
    """Parse a string into an existing polynomial.

    The target is cleared first and stays empty if parsing fails.
    """
    target.clear()
    for coef, expo in parse_polynomial(s):
        target.insert(coef, expo)
