# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Alignment of the cell lists of two notebooks.

The alignment is a single greedy forward pass. When the cells under the
two cursors differ, the side whose next occurrence of the other cell is
nearer decides whether the gap is read as inserted or deleted cells.
This is not a minimal edit script, and cells whose trimmed text happens
to coincide are paired even if they are unrelated.
"""

from ..diff_format import CellDiff, DiffStatus, NO_INDEX
from ..log import debug
from .fingerprint import cell_fingerprint, join_source
from .outputs import align_outputs
from .textdiff import diff_lines

__all__ = ["align_cells"]


def _find_forward(fingerprints, start, fp):
    """Distance from start to the first index after start holding fp.

    Returns None if there is no such index.
    """
    for k in range(start + 1, len(fingerprints)):
        if fingerprints[k] == fp:
            return k - start
    return None


def _outputs(cell):
    return cell.get("outputs") or ()


def _added(cell, j):
    return CellDiff(
        DiffStatus.ADDED, None, cell, NO_INDEX, j,
        output_changes=align_outputs((), _outputs(cell)))


def _removed(cell, i):
    return CellDiff(
        DiffStatus.REMOVED, cell, None, i, NO_INDEX,
        output_changes=align_outputs(_outputs(cell), ()))


def align_cells(left_cells, right_cells, text_diff=diff_lines):
    """Align two cell lists and classify every position.

    Every left index and every right index appears in exactly one of the
    returned CellDiffs. Removed cells are reported at their left position,
    added cells at their right position.

    text_diff is used to diff the sources of cells paired as modified.
    """
    left_fps = [cell_fingerprint(c) for c in left_cells]
    right_fps = [cell_fingerprint(c) for c in right_cells]
    nl = len(left_cells)
    nr = len(right_cells)
    diffs = []
    i = j = 0

    while i < nl or j < nr:
        if i >= nl:
            diffs.extend(_added(right_cells[k], k) for k in range(j, nr))
            j = nr
            continue
        if j >= nr:
            diffs.extend(_removed(left_cells[k], k) for k in range(i, nl))
            i = nl
            continue

        lcell = left_cells[i]
        rcell = right_cells[j]

        if left_fps[i] == right_fps[j]:
            output_changes = align_outputs(_outputs(lcell), _outputs(rcell))
            if any(o.status != DiffStatus.UNCHANGED for o in output_changes):
                status = DiffStatus.MODIFIED
            else:
                status = DiffStatus.UNCHANGED
            diffs.append(CellDiff(
                status, lcell, rcell, i, j, output_changes=output_changes))
            i += 1
            j += 1
            continue

        # Distance to where each cursor's cell reappears on the other side
        d_right = _find_forward(right_fps, j, left_fps[i])
        d_left = _find_forward(left_fps, i, right_fps[j])

        if d_right is None and d_left is None:
            diffs.append(CellDiff(
                DiffStatus.MODIFIED, lcell, rcell, i, j,
                content_changes=text_diff(
                    join_source(lcell.get("source")),
                    join_source(rcell.get("source"))),
                output_changes=align_outputs(_outputs(lcell), _outputs(rcell))))
            i += 1
            j += 1
        elif d_right is not None and (d_left is None or d_right <= d_left):
            # Ties read the gap as insertions
            diffs.extend(_added(right_cells[k], k) for k in range(j, j + d_right))
            j += d_right
        else:
            diffs.append(_removed(lcell, i))
            i += 1

    debug("Aligned %d left and %d right cells into %d entries", nl, nr, len(diffs))
    return diffs
