"""Command-line settings declared next to the code that reads them.

A module creates an Option when it is imported.  `setup` turns every
declared Option into a `--name` flag on the shell's argument parser, and
`read` copies the parsed values back into the Options.
"""

from collections import OrderedDict

# Declared options, by name, in declaration order.
_OPTS = OrderedDict()

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str)
        assert type is not bool or default is False, "boolean options are off by default"
        assert name not in _OPTS, "option {} declared twice".format(name)
        self.name = name
        self.type = type
        self.default = default
        self.description = description
        self.metavar = metavar
        self.value = default
        _OPTS[name] = self

    def __bool__(self):
        raise TypeError("option {} used as a boolean; read `.value` instead".format(self.name))

    def add_to(self, group):
        if self.type is bool:
            group.add_argument("--" + self.name, action="store_true", help=self.description)
        else:
            group.add_argument("--" + self.name, metavar=self.metavar, default=self.default,
                help="{} (default={!r})".format(self.description, self.default))

def setup(parser):
    group = parser.add_argument_group("calculator options")
    for o in _OPTS.values():
        o.add_to(group)

def read(args):
    for o in _OPTS.values():
        o.value = getattr(args, o.name.replace("-", "_"))

def snapshot():
    return { name : o.value for name, o in _OPTS.items() }

def restore(snap):
    for name, value in snap.items():
        _OPTS[name].value = value
