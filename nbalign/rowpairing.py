# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Projection of change segments onto two synchronized display columns."""

from .diff_format import SegmentKind, RowKind, RowSide, PairedRow
from .log import RowPairingError, error

__all__ = ["split_lines", "split_columns", "project_rows"]


def split_lines(text):
    """Split text into display lines at "\\n" only.

    Carriage returns and other control characters stay part of their
    line. A single trailing newline does not start another line.
    """
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def split_columns(segments):
    """Split change segments into the lines of the left and right columns.

    Equal lines appear in both columns, as context.
    """
    left = []
    right = []
    for segment in segments:
        lines = split_lines(segment.text)
        if segment.kind == SegmentKind.ADDED:
            right.extend(RowSide(line, RowKind.ADDED) for line in lines)
        elif segment.kind == SegmentKind.REMOVED:
            left.extend(RowSide(line, RowKind.REMOVED) for line in lines)
        else:
            left.extend(RowSide(line, RowKind.CONTEXT) for line in lines)
            right.extend(RowSide(line, RowKind.CONTEXT) for line in lines)
    return left, right


def project_rows(segments):
    """Pair up the lines of a change segment list into display rows.

    Context lines are paired with each other, which keeps the two columns
    in sync. Removed lines get a row of their own with an empty right
    side, added lines a row with an empty left side. Rows keep the
    top-to-bottom order of the segments.
    """
    left, right = split_columns(segments)
    nl = len(left)
    nr = len(right)
    rows = []
    li = ri = 0

    # Every iteration consumes at least one line
    for _ in range(nl + nr):
        if li >= nl and ri >= nr:
            break
        lside = left[li] if li < nl else None
        rside = right[ri] if ri < nr else None

        if (lside is not None and rside is not None and
                lside.kind == RowKind.CONTEXT and rside.kind == RowKind.CONTEXT):
            rows.append(PairedRow(lside, rside))
            li += 1
            ri += 1
        elif lside is not None and lside.kind == RowKind.REMOVED:
            rows.append(PairedRow(lside, None))
            li += 1
        elif rside is not None and rside.kind == RowKind.ADDED:
            rows.append(PairedRow(None, rside))
            ri += 1
        else:
            # Context left over on only one side
            rows.append(PairedRow(lside, rside))
            if lside is not None:
                li += 1
            if rside is not None:
                ri += 1

    if li != nl or ri != nr:
        error("Row pairing consumed %d/%d left and %d/%d right lines",
              li, nl, ri, nr)
        raise RowPairingError(
            "Row pairing stopped before consuming all lines "
            "(left %d of %d, right %d of %d)" % (li, nl, ri, nr))
    return rows
