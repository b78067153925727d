# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import shutil
import sys

import colorama

from .diff_format import DiffStatus, SegmentKind, RowKind
from .diffing.fingerprint import join_source, output_text
from .rowpairing import project_rows, split_lines


# Indentation offset in pretty-print
IND = "  "

# Separator between the two columns of side-by-side output
COLUMN_SEP = " | "

DEFAULT_LEFT_LABEL = "Original"
DEFAULT_RIGHT_LABEL = "Modified"


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            side_by_side=False,
            show_unchanged=False,
            use_color=True,
            width=0,
            ):
        self.out = out
        self.side_by_side = side_by_side
        self.show_unchanged = show_unchanged
        self.use_color = use_color
        self.width = width

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

    def total_width(self):
        if self.width and self.width > 0:
            return self.width
        return shutil.get_terminal_size().columns


DefaultConfig = PrettyPrintConfig()


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          nested: value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        if isinstance(v, dict):
            config.out.write("%s%s:\n" % (prefix, k))
            pretty_print_dict(v, (), prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, k, v))


def format_summary(stats):
    "Summarize the non-zero status counts, e.g. '1 added, 2 unchanged'."
    parts = ["%d %s" % (getattr(stats, s), s)
             for s in DiffStatus.ALL if getattr(stats, s)]
    return ", ".join(parts) if parts else "no cells"


def _marker(kind, config):
    if kind in (SegmentKind.ADDED, RowKind.ADDED):
        return config.ADD
    if kind in (SegmentKind.REMOVED, RowKind.REMOVED):
        return config.REMOVE
    return config.KEEP


def pretty_print_lines(text, marker, prefix="", config=DefaultConfig):
    if not text:
        return
    for line in split_lines(text):
        config.out.write("%s%s%s%s\n" % (prefix, marker, line, config.RESET))


def pretty_print_segments(segments, prefix="", config=DefaultConfig):
    "Print a change segment list as a unified listing."
    for segment in segments:
        pretty_print_lines(segment.text, _marker(segment.kind, config), prefix, config)


def _format_side(side, colwidth, config):
    # Markers are three characters wide without the color codes
    textwidth = max(colwidth - 3, 0)
    if side is None:
        return " " * colwidth, ""
    text = side.text.expandtabs()[:textwidth].ljust(textwidth)
    return _marker(side.kind, config) + text, config.RESET


def pretty_print_rows(rows, prefix="", config=DefaultConfig):
    "Print paired rows as two columns."
    avail = config.total_width() - len(prefix) - len(COLUMN_SEP)
    colwidth = max(avail // 2, 4)
    for row in rows:
        left, lreset = _format_side(row.left, colwidth, config)
        right, rreset = _format_side(row.right, colwidth, config)
        line = prefix + left + lreset + COLUMN_SEP + right + rreset
        config.out.write(line.rstrip() + "\n")


def pretty_print_changes(segments, prefix="", config=DefaultConfig):
    if config.side_by_side:
        pretty_print_rows(project_rows(segments), prefix, config)
    else:
        pretty_print_segments(segments, prefix, config)


def _index_label(index):
    return "-" if index < 0 else str(index)


def pretty_print_output_diff(n, od, prefix="", config=DefaultConfig):
    output = od.right_output if od.right_output is not None else od.left_output
    config.out.write("%s%soutput %d %s (%s):%s\n" % (
        prefix, config.INFO, n, od.status, output["output_type"], config.RESET))
    prefix = prefix + IND
    if od.status == DiffStatus.ADDED:
        pretty_print_lines(output_text(od.right_output), config.ADD, prefix, config)
    elif od.status == DiffStatus.REMOVED:
        pretty_print_lines(output_text(od.left_output), config.REMOVE, prefix, config)
    elif od.status == DiffStatus.MODIFIED:
        pretty_print_changes(od.text_changes, prefix, config)


def pretty_print_cell_diff(d, config=DefaultConfig):
    config.out.write("%s%s cell %s:%s (%s)%s\n" % (
        config.INFO, d.status, _index_label(d.left_index),
        _index_label(d.right_index), d.cell_type, config.RESET))
    prefix = IND
    if d.status == DiffStatus.ADDED:
        pretty_print_lines(join_source(d.right_cell.get("source")), config.ADD, prefix, config)
    elif d.status == DiffStatus.REMOVED:
        pretty_print_lines(join_source(d.left_cell.get("source")), config.REMOVE, prefix, config)
    elif d.content_changes:
        pretty_print_changes(d.content_changes, prefix, config)
    elif d.status == DiffStatus.UNCHANGED:
        pretty_print_lines(join_source(d.left_cell.get("source")), config.KEEP, prefix, config)

    for n, od in enumerate(d.output_changes):
        if od.status != DiffStatus.UNCHANGED:
            pretty_print_output_diff(n, od, prefix, config)


notebook_diff_header = """\
nbalign-diff {left} {right}
--- {left}
+++ {right}
"""


def pretty_print_notebook_diff(left_label, right_label, result, config=DefaultConfig):
    """Pretty-print a notebook diff

    Parameters
    ----------

    left_label: str
        Name shown for the left notebook
    right_label: str
        Name shown for the right notebook
    result: DiffResult
        The cell diffs and their statistics
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    config.out.write(notebook_diff_header.format(
        left=left_label or DEFAULT_LEFT_LABEL,
        right=right_label or DEFAULT_RIGHT_LABEL))
    config.out.write("%s%s%s\n" % (config.INFO, format_summary(result.stats), config.RESET))
    for d in result.diffs:
        if d.status == DiffStatus.UNCHANGED and not config.show_unchanged:
            continue
        pretty_print_cell_diff(d, config)
