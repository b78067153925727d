# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .diffing.textdiff import GRANULARITIES
from .log import init_logging, set_nbalign_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_nbalign_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_nbalign_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all nbalign commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    parser.add_argument(
        '-g', '--granularity',
        default='lines',
        choices=GRANULARITIES,
        help="diff cell sources line by line or word by word.")


def add_prettyprint_args(parser):
    """Adds a set of arguments for commands that pretty print diffs.
    """
    parser.add_argument(
        '-y', '--side-by-side',
        dest='side_by_side',
        action='store_true',
        default=False,
        help="print source changes as two synchronized columns.")
    parser.add_argument(
        '-u', '--show-unchanged',
        dest='show_unchanged',
        action='store_true',
        default=False,
        help="also print cells that did not change.")
    parser.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        default=True,
        help="do not use ANSI colors in the output.")
    parser.add_argument(
        '-w', '--width',
        type=int,
        default=0,
        help="total width of side-by-side output, 0 uses the terminal width.")
    parser.add_argument(
        '--left-label',
        default=None,
        help="label of the left side, defaults to its filename.")
    parser.add_argument(
        '--right-label',
        default=None,
        help="label of the right side, defaults to its filename.")


def prettyprint_config_from_args(args, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        side_by_side=getattr(args, 'side_by_side', False),
        show_unchanged=getattr(args, 'show_unchanged', False),
        use_color=getattr(args, 'color', True),
        width=getattr(args, 'width', 0),
        **kwargs
    )
