# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["diff"]
HELP_MESSAGE_VERBOSE = ("Usage: nbalign [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, COMMANDS{%s}\n\n"
                       "Examples: nbalign --version\n"
                       "          nbalign diff -h\n"
                       "          nbalign diff before.ipynb after.ipynb\n" % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "diff":
        from nbalign.nbdiffapp import main
    elif cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        print(HELP_MESSAGE_VERBOSE)
        sys.exit(0)
    else:
        sys.exit("Unrecognized command '%s'.\n\n%s" %
                 (cmd, HELP_MESSAGE_VERBOSE))

    return main(args)


if __name__ == "__main__":
    sys.exit(main_dispatch())
