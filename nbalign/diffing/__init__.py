# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .cells import align_cells
from .outputs import align_outputs
from .notebooks import diff_notebooks, compute_notebook_diff

__all__ = ["align_cells", "align_outputs", "diff_notebooks", "compute_notebook_diff"]
