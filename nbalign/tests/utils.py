# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager

import pytest
import nbformat

from nbalign.diff_format import NO_INDEX, source_text


def assert_is_valid_notebook(nb):
    """These are the current assumptions on notebooks in these tests. Loosen on demand."""
    assert nb["nbformat"] == 4
    assert isinstance(nb["metadata"], dict)
    assert isinstance(nb["cells"], list)
    assert all(isinstance(cell, dict) for cell in nb["cells"])


def new_cell(source, cell_type='code', outputs=None):
    if cell_type == 'code':
        return nbformat.v4.new_code_cell(source, outputs=outputs or [])
    elif cell_type == 'markdown':
        return nbformat.v4.new_markdown_cell(source)
    elif cell_type == 'raw':
        return nbformat.v4.new_raw_cell(source)
    raise ValueError(cell_type)


def sources_to_cells(sources, cell_type='code'):
    assert isinstance(sources, list)
    return [new_cell(source, cell_type) for source in sources]


def sources_to_notebook(sources, cell_type='code'):
    nb = nbformat.v4.new_notebook()
    nb.cells.extend(sources_to_cells(sources, cell_type))
    return nb


def stream(text, name='stdout'):
    return nbformat.v4.new_output('stream', name=name, text=text)


def result(text, execution_count=1):
    return nbformat.v4.new_output(
        'execute_result', data={'text/plain': text},
        execution_count=execution_count)


def display(data):
    return nbformat.v4.new_output('display_data', data=data)


def error(ename, evalue, traceback=()):
    return nbformat.v4.new_output(
        'error', ename=ename, evalue=evalue, traceback=list(traceback))


def statuses(diffs):
    return [d.status for d in diffs]


def check_coverage(diffs, nleft, nright):
    "Check that every index of both sides appears exactly once."
    left = [d.left_index for d in diffs if d.left_index != NO_INDEX]
    right = [d.right_index for d in diffs if d.right_index != NO_INDEX]
    assert left == list(range(nleft))
    assert right == list(range(nright))


def check_round_trip(segments, a, b):
    "Check that a change segment list reproduces both of its inputs."
    assert source_text(segments, "left") == a
    assert source_text(segments, "right") == b


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
