# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .diff_format import to_json
from .diffing.notebooks import diff_notebooks
from .diffing.textdiff import text_differ
from .log import info
from .prettyprint import pretty_print_notebook_diff
from .utils import (
    EXPLICIT_MISSING_FILE, read_notebook, setup_std_streams, display_name,
)


_description = "Compare two Jupyter notebooks cell by cell."


def main_diff(args):
    """Main handler of diff CLI"""
    left = args.left
    right = args.right
    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (left, right):
        if (isinstance(fn, str) and not os.path.exists(fn) and
                fn != EXPLICIT_MISSING_FILE):
            print("Missing file {}".format(fn))
            return 1
    # Both files cannot be missing
    assert not (left == EXPLICIT_MISSING_FILE and right == EXPLICIT_MISSING_FILE), (
        'cannot diff %r against %r' % (left, right))

    a = read_notebook(left)
    b = read_notebook(right)

    result = diff_notebooks(a, b, text_diff=text_differ(args.granularity))

    output = getattr(args, 'out', None)
    if output:
        with open(output, "w") as df:
            json.dump(to_json(result), df, indent=2, separators=(",", ": "))
        info("Wrote diff of %d cells to %s", len(result.diffs), output)
    else:
        # Some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        left_label = args.left_label or display_name(left)
        right_label = args.right_label or display_name(right)
        pretty_print_notebook_diff(left_label, right_label, result, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the nbalign-diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "left", help="the original notebook filename.")
    parser.add_argument(
        "right", help="the modified notebook filename.")

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file as JSON. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser('nbalign-diff').parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
