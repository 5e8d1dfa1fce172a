import os
import shutil
import tempfile
import unittest

from polycalc.common import No, typechecked, read_lines, capitalize

class TestCommon(unittest.TestCase):

    def test_no(self):
        n = No("bad thing")
        assert not n
        self.assertEqual(n.msg, "bad thing")
        self.assertEqual(str(n), "no: bad thing")

    def test_typechecked(self):
        @typechecked
        def f(x : int, y) -> str:
            return str(x) + y
        self.assertEqual(f(1, "a"), "1a")
        self.assertEqual(f(x=2, y="b"), "2b")
        with self.assertRaises(AssertionError):
            f("1", "a")

        @typechecked
        def g(x : int) -> int:
            return str(x)
        with self.assertRaises(AssertionError):
            g(1)

    def test_capitalize(self):
        self.assertEqual(capitalize("invalid expression for Exp1"), "Invalid expression for Exp1")
        self.assertEqual(capitalize(""), "")

    def test_read_lines(self):
        d = tempfile.mkdtemp()
        try:
            path = os.path.join(d, "f.txt")
            with open(path, "w", newline="") as f:
                f.write("one\r\ntwo\nthree\n")
            self.assertEqual(read_lines(path, 2), ["one", "two"])
            self.assertEqual(read_lines(path, 5), ["one", "two", "three"])
            with self.assertRaises(OSError):
                read_lines(os.path.join(d, "missing"), 2)
            with open(path, "wb") as f:
                f.write(b"\xff\xfe1x^1\n")
            with self.assertRaises(UnicodeDecodeError):
                read_lines(path, 2)
        finally:
            shutil.rmtree(d)
