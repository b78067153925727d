# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Value types produced by the notebook diff engine.

All records are immutable namedtuples. They are created fresh for every
comparison and carry no identity between calls.
"""

from collections import namedtuple

from .log import NotebookFormatError


class DiffStatus:
    "Collection of valid values for the status field of cell and output diffs."
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"

    ALL = (ADDED, REMOVED, MODIFIED, UNCHANGED)


class SegmentKind:
    "Collection of valid values for the kind field of change segments."
    ADDED = "added"
    REMOVED = "removed"
    EQUAL = "equal"

    ALL = (ADDED, REMOVED, EQUAL)


class RowKind:
    "Kinds a single side of a paired row can have."
    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"


# Marker index for the side a record is absent from
NO_INDEX = -1


_ChangeSegment = namedtuple("ChangeSegment", ("text", "kind"))


class ChangeSegment(_ChangeSegment):
    """A typed span of text produced by a text differ."""
    __slots__ = ()

    def __new__(cls, text, kind):
        if kind not in SegmentKind.ALL:
            raise NotebookFormatError("Invalid change segment kind %r" % (kind,))
        return super(ChangeSegment, cls).__new__(cls, text, kind)


_CellDiff = namedtuple("CellDiff", (
    "status",
    "left_cell",
    "right_cell",
    "left_index",
    "right_index",
    "content_changes",
    "output_changes",
))


class CellDiff(_CellDiff):
    """The classification of one aligned position in the cell list."""
    __slots__ = ()

    def __new__(cls, status, left_cell, right_cell, left_index, right_index,
                content_changes=(), output_changes=()):
        _check_sides(status, left_cell, right_cell)
        return super(CellDiff, cls).__new__(
            cls, status, left_cell, right_cell, left_index, right_index,
            tuple(content_changes), tuple(output_changes))

    @property
    def cell_type(self):
        cell = self.right_cell if self.right_cell is not None else self.left_cell
        return cell["cell_type"]


_OutputDiff = namedtuple("OutputDiff", (
    "status",
    "left_output",
    "right_output",
    "left_index",
    "right_index",
    "text_changes",
))


class OutputDiff(_OutputDiff):
    """The classification of one output within a matched pair of cells."""
    __slots__ = ()

    def __new__(cls, status, left_output, right_output, left_index, right_index,
                text_changes=()):
        _check_sides(status, left_output, right_output)
        return super(OutputDiff, cls).__new__(
            cls, status, left_output, right_output, left_index, right_index,
            tuple(text_changes))


def _check_sides(status, left, right):
    if status not in DiffStatus.ALL:
        raise NotebookFormatError("Invalid diff status %r" % (status,))
    if status == DiffStatus.ADDED:
        if left is not None or right is None:
            raise NotebookFormatError("An added entry must only have a right side")
    elif status == DiffStatus.REMOVED:
        if right is not None or left is None:
            raise NotebookFormatError("A removed entry must only have a left side")
    elif left is None or right is None:
        raise NotebookFormatError("A %s entry needs both sides" % status)


DiffStats = namedtuple("DiffStats", DiffStatus.ALL)

DiffResult = namedtuple("DiffResult", ("diffs", "stats"))


RowSide = namedtuple("RowSide", ("text", "kind"))

PairedRow = namedtuple("PairedRow", ("left", "right"))


def source_text(segments, side):
    """Reconstruct the text of one side from a change segment list.

    side is "left" or "right".
    """
    if side == "left":
        skip = SegmentKind.ADDED
    elif side == "right":
        skip = SegmentKind.REMOVED
    else:
        raise ValueError("Invalid side %r" % (side,))
    return "".join(s.text for s in segments if s.kind != skip)


def _segments_to_json(segments):
    return [{"text": s.text, "kind": s.kind} for s in segments]


def to_json(result):
    """Convert a DiffResult into plain dicts and lists.

    Cell and output payloads are left out, the indices refer back into
    the compared notebooks.
    """
    diffs = []
    for d in result.diffs:
        diffs.append({
            "status": d.status,
            "left_index": d.left_index,
            "right_index": d.right_index,
            "content_changes": _segments_to_json(d.content_changes),
            "output_changes": [
                {
                    "status": o.status,
                    "left_index": o.left_index,
                    "right_index": o.right_index,
                    "text_changes": _segments_to_json(o.text_changes),
                }
                for o in d.output_changes
            ],
        })
    return {
        "diffs": diffs,
        "stats": dict(result.stats._asdict()),
    }
