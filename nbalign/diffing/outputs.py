# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Alignment of the output lists of a matched pair of cells."""

from ..diff_format import OutputDiff, DiffStatus, NO_INDEX
from .fingerprint import output_fingerprint, output_text
from .textdiff import diff_lines

__all__ = ["align_outputs"]


def _first_unmatched(candidates, matched, predicate):
    for j, candidate in enumerate(candidates):
        if j not in matched and predicate(j, candidate):
            return j
    return None


def align_outputs(left_outputs, right_outputs, text_diff=diff_lines):
    """Align two output lists and classify every output.

    Each left output is paired with the first unmatched right output of
    identical fingerprint, anywhere in the list. Failing that it is paired
    with the first unmatched right output of the same output type and
    reported as modified. Otherwise it is removed. Right outputs left over
    at the end are added, in their original order.
    """
    left_outputs = left_outputs or ()
    right_outputs = right_outputs or ()
    right_fps = [output_fingerprint(o) for o in right_outputs]
    matched = set()
    diffs = []

    for i, lo in enumerate(left_outputs):
        lfp = output_fingerprint(lo)
        j = _first_unmatched(right_fps, matched, lambda j, fp: fp == lfp)
        if j is not None:
            matched.add(j)
            diffs.append(OutputDiff(
                DiffStatus.UNCHANGED, lo, right_outputs[j], i, j))
            continue

        ot = lo["output_type"]
        j = _first_unmatched(
            right_outputs, matched, lambda j, ro: ro["output_type"] == ot)
        if j is not None:
            matched.add(j)
            ro = right_outputs[j]
            diffs.append(OutputDiff(
                DiffStatus.MODIFIED, lo, ro, i, j,
                text_diff(output_text(lo), output_text(ro))))
        else:
            diffs.append(OutputDiff(
                DiffStatus.REMOVED, lo, None, i, NO_INDEX))

    for j, ro in enumerate(right_outputs):
        if j not in matched:
            diffs.append(OutputDiff(DiffStatus.ADDED, None, ro, NO_INDEX, j))

    return diffs
