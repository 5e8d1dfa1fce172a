"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - No: a falsy result that carries a reason
 - @typechecked: decorator to perform runtime typechecking
 - read_lines: read the first few lines of a text file
"""

# builtins
from functools import wraps
import inspect

def check_type(value, ty, value_name="value"):
    """
    Verify that the given value has the given type.
        value      - the value to check
        ty         - a class, or None to do no checking (for example, if the
                     Python formal variable does not have a type annotation)
        value_name - the variable that holds `value`; printed in diagnostic
                     messages
    """
    if ty is not None:
        assert isinstance(value, ty), "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """
    Use the @typechecked decorator on a function to perform run-time typechecking.
    The docstring for `check_type` describes how type annotations should look.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

class No(object):
    """A falsy object with a message.

    This is useful if you want to return False with an associated reason."""
    def __init__(self, msg):
        self.msg = msg
    def __bool__(self):
        return False
    def __str__(self):
        return "no: {}".format(self.msg)
    def __repr__(self):
        return "No({!r})".format(self.msg)

def read_lines(filename, count):
    """Returns up to `count` lines from the start of the file.

    The file must be UTF-8 text.  Line terminators are removed, including
    the carriage return of files written with Windows line endings.  The
    result is shorter than `count` if the file runs out of lines first.
    """
    lines = []
    with open(filename, "r", encoding="utf-8") as f:
        for line in f:
            if len(lines) == count:
                break
            lines.append(line.rstrip("\r\n"))
    return lines

def capitalize(s):
    """Return a new string like s, but with the first letter capitalized."""
    return (s[0].upper() + s[1:]) if s else s
