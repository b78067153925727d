# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import align_cells, align_outputs, diff_notebooks, compute_notebook_diff
from .navigation import ChangeNavigator
from .rowpairing import project_rows


__all__ = [
    "__version__",
    "align_cells", "align_outputs",
    "diff_notebooks", "compute_notebook_diff",
    "ChangeNavigator",
    "project_rows",
    ]
