# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Tools for diffing notebooks.

The notebooks are expected as parsed nbformat v4 structures (dicts
with a "cells" list). Up- and down-conversion is handled by nbformat.
"""

import json

import nbformat

from ..diff_format import DiffResult, DiffStats, DiffStatus
from ..log import NotebookFormatError, warning
from .cells import align_cells
from .textdiff import diff_lines

__all__ = ["diff_notebooks", "compute_stats", "parse_notebook", "compute_notebook_diff"]


def compute_stats(diffs):
    "Count the cell diffs per status."
    counts = dict.fromkeys(DiffStatus.ALL, 0)
    for d in diffs:
        counts[d.status] += 1
    return DiffStats(**counts)


def _cells(nb, name):
    if not isinstance(nb, dict):
        raise NotebookFormatError("Expected %s notebook to be a dict, got %r" % (name, nb))
    cells = nb.get("cells")
    if not isinstance(cells, list):
        raise NotebookFormatError("The %s notebook has no cells list" % name)
    return cells


def diff_notebooks(a, b, text_diff=diff_lines):
    """Compute the cell level diff of two notebooks.

    Returns a DiffResult holding the list of CellDiffs and the count of
    each status.
    """
    diffs = align_cells(_cells(a, "left"), _cells(b, "right"), text_diff=text_diff)
    return DiffResult(diffs, compute_stats(diffs))


def parse_notebook(content):
    """Parse notebook JSON text.

    Returns None when the text is not JSON or has no cells list.
    """
    try:
        nb = json.loads(content)
    except ValueError as e:
        warning("Failed to parse notebook: %s", e)
        return None
    if not isinstance(nb, dict) or not isinstance(nb.get("cells"), list):
        warning("Failed to parse notebook: no cells list found")
        return None
    return nbformat.from_dict(nb)


def compute_notebook_diff(left_content, right_content, text_diff=diff_lines):
    """Diff two notebooks given as JSON text.

    Returns None if either side failed to parse.
    """
    a = parse_notebook(left_content)
    b = parse_notebook(right_content)
    if a is None or b is None:
        return None
    return diff_notebooks(a, b, text_diff=text_diff)
