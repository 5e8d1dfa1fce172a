#!/usr/bin/env python

"""
Main entry point for the polynomial calculator. Run with --help for options.

The calculator reads one command per line:

    <command>[ <param1>[,<param2>]]

Every command produces either output text or a `No` carrying an error
message; neither stops the loop.
"""

import re
import sys
import argparse

from polycalc import opts
from polycalc import logging
from polycalc.calculator import PolyCalculator, InvalidSelector, ReadError
from polycalc.common import No, capitalize
from polycalc.parse import ParseError

prompt = opts.Option("prompt", str, ">", metavar="TEXT", description="Text printed before each command")
profile = opts.Option("profile", str, "", metavar="PATH", description="On exit, write the time spent in each operation to PATH")

COMMANDS = [
    ("display", "Display the Polynomials"),
    ("input", "Input Polynomial expressions from keyboard"),
    ("add", "Add the Polynomials (Exp1 + Exp2)"),
    ("sub", "Subtract the Polynomials (Exp1 - Exp2)"),
    ("mul", "Multiply the polynomials (Exp1 * Exp2)"),
    ("evaluate <ExpID,int>", "Evaluate a polynomial for a specific value of x"),
    ("getDegree <ExpID>", "Returns the degree of a given polynomial."),
    ("equal", "Check whether Exp1 and Exp2 are equal"),
    ("read <file_name>", "Load Exp1 and Exp2 from the first two lines of <file>"),
    ("help", "Display the list of available commands"),
    ("exit", "Exit the Program"),
]

def list_commands():
    lines = ["List of available Commands:"]
    for usage, description in COMMANDS:
        lines.append("{:<21}: {}".format(usage, description))
    return "\n".join(lines)

def split_command(line):
    """Split a command line into (command, param1, param2).

    The command ends at the first space and the first parameter at the
    first comma.  Missing parameters are empty strings.
    """
    command, _, rest = line.partition(" ")
    param1, _, param2 = rest.partition(",")
    return command, param1.strip(), param2.strip()

def parse_int(text):
    """Returns the integer written in text, or a No explaining the problem."""
    if re.fullmatch(r"[+-]?[0-9]+", text) is None:
        return No("Error: invalid integer {}".format(repr(text)))
    return int(text)

class Shell(object):
    """The read-dispatch-print loop around a PolyCalculator."""

    def __init__(self, calc=None, stdin=None, stdout=None):
        self.calc = calc if calc is not None else PolyCalculator()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.handlers = {
            "display":   self.do_display,
            "input":     self.do_input,
            "add":       self.do_add,
            "sub":       self.do_sub,
            "mul":       self.do_mul,
            "evaluate":  self.do_evaluate,
            "getDegree": self.do_get_degree,
            "equal":     self.do_equal,
            "read":      self.do_read,
            "help":      self.do_help,
        }

    def write(self, text):
        self.stdout.write(text)
        self.stdout.write("\n")

    def readline(self, prompt_text):
        """Prompt for one line; returns None at end of input."""
        self.stdout.write(prompt_text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def report(self, res):
        self.write(res.msg if isinstance(res, No) else res)

    def execute(self, command, param1="", param2=""):
        handler = self.handlers.get(command)
        if handler is None:
            return No("Invalid Command!!")
        return handler(param1, param2)

    def loop(self):
        self.write(list_commands())
        while True:
            line = self.readline(prompt.value)
            if line is None:
                break
            command, param1, param2 = split_command(line)
            if command in ("exit", "quit"):
                break
            self.report(self.execute(command, param1, param2))

    def do_display(self, param1, param2):
        return self.calc.display()

    def do_input(self, param1, param2):
        text1 = self.readline("Enter Exp1: ") or ""
        text2 = self.readline("Enter Exp2: ") or ""
        try:
            self.calc.set_expressions(text1, text2)
        except ParseError as e:
            return No(capitalize(str(e)))
        return self.calc.display()

    def do_add(self, param1, param2):
        return "Exp1 + Exp2 = {}".format(self.calc.add())

    def do_sub(self, param1, param2):
        return "Exp1 - Exp2 = {}".format(self.calc.sub())

    def do_mul(self, param1, param2):
        return "Exp1 * Exp2 = {}".format(self.calc.mul())

    def do_evaluate(self, param1, param2):
        exp_id = parse_int(param1)
        if isinstance(exp_id, No):
            return exp_id
        x = parse_int(param2)
        if isinstance(x, No):
            return x
        try:
            text, value = self.calc.evaluate(exp_id, x)
        except InvalidSelector:
            return No("Error: Invalid ID")
        return "p(x) = {}\np({}) = {}".format(text, x, value)

    def do_get_degree(self, param1, param2):
        exp_id = parse_int(param1)
        if isinstance(exp_id, No):
            return exp_id
        try:
            deg = self.calc.get_degree(exp_id)
        except InvalidSelector:
            return No("Error: Invalid ID")
        return "The degree of Exp{} is: {}".format(exp_id, deg)

    def do_equal(self, param1, param2):
        return "Equal" if self.calc.is_equal() else "Not equal"

    def do_read(self, param1, param2):
        try:
            self.calc.read(param1)
        except (ReadError, ParseError) as e:
            return No("Error: {}".format(e))
        return self.calc.display()

    def do_help(self, param1, param2):
        return list_commands()

def run(argv=None):
    """Entry point for the polycalc executable.

    This procedure reads sys.argv (or argv, if given) and runs the command
    loop on standard input.
    """

    parser = argparse.ArgumentParser(description='Polynomial calculator.')
    parser.add_argument("file", nargs="?", default=None, help="Load Exp1 and Exp2 from the first two lines of this file before starting")
    opts.setup(parser)
    args = parser.parse_args(argv)
    opts.read(args)

    shell = Shell()
    try:
        if args.file is not None:
            shell.report(shell.execute("read", args.file))
        shell.loop()
    finally:
        if profile.value:
            logging.dump_profile(profile.value)

if __name__ == "__main__":
    run()
