"""Log and time the calculator's operations.

Every session operation (parse, read, add, sub, mul, evaluate) runs inside
`operation(...)`.  With --verbose each operation prints a line when it
starts and when it finishes, and `event` messages are indented beneath it.
`dump_profile` writes how many times each operation ran and the total time
spent in it.
"""

from collections import Counter, defaultdict
from contextlib import contextmanager
import time

from polycalc.opts import Option

verbose = Option("verbose", bool, False, description="Print each operation the calculator performs")

_active = []
_calls = Counter()
_seconds = defaultdict(float)

def log(message):
    if verbose.value:
        print("  " * len(_active) + message)

def event(message):
    log(message)

@contextmanager
def operation(name, **details):
    if details:
        log("{} [{}]".format(name, ", ".join("{}={}".format(k, v) for k, v in details.items())))
    else:
        log(name)
    start = time.perf_counter()
    _active.append(name)
    try:
        yield
    finally:
        _active.pop()
        elapsed = time.perf_counter() - start
        _calls[name] += 1
        _seconds[name] += elapsed
        log("{} done in {:.3f} ms".format(name, elapsed * 1000))

def profile_lines():
    lines = ["{:<10} {:>6} {:>12}".format("operation", "calls", "seconds")]
    for name in sorted(_seconds, key=_seconds.get, reverse=True):
        lines.append("{:<10} {:>6} {:>12.6f}".format(name, _calls[name], _seconds[name]))
    return lines

def dump_profile(path):
    with open(path, "w") as f:
        for line in profile_lines():
            f.write(line + "\n")
