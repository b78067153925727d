# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Stepping through the changed cells of a notebook diff."""

from .diff_format import DiffStatus, NO_INDEX
from .diffing.notebooks import compute_stats

__all__ = ["change_indices", "ChangeNavigator"]


def change_indices(diffs):
    "Indices of all cell diffs that are not unchanged, in order."
    return tuple(k for k, d in enumerate(diffs) if d.status != DiffStatus.UNCHANGED)


class ChangeNavigator(object):
    """Cursor over the changed entries of a list of CellDiffs.

    The cursor is a position in the list of changed indices. Moving past
    either end is clamped, there is no wraparound.
    """

    def __init__(self, diffs, active=0):
        self.diffs = tuple(diffs)
        self.stats = compute_stats(self.diffs)
        self.changes = change_indices(self.diffs)
        self.active = self._clamp(active)

    def __len__(self):
        return len(self.changes)

    def _clamp(self, position):
        if not self.changes:
            return 0
        return max(0, min(len(self.changes) - 1, position))

    @property
    def current(self):
        "Diff index of the active change, or -1 if there are no changes."
        if not self.changes:
            return NO_INDEX
        return self.changes[self.active]

    def next(self):
        self.active = self._clamp(self.active + 1)
        return self.current

    def previous(self):
        self.active = self._clamp(self.active - 1)
        return self.current

    def position_of(self, diff_index):
        "Position of a diff index in the change list, or -1."
        try:
            return self.changes.index(diff_index)
        except ValueError:
            return NO_INDEX

    def select(self, diff_index):
        """Make the change at diff_index active.

        Unchanged or out of range indices leave the cursor where it is.
        Returns the new position in the change list, or -1.
        """
        position = self.position_of(diff_index)
        if position != NO_INDEX:
            self.active = position
        return position
