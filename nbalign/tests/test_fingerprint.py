# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from nbalign.diffing.fingerprint import (
    cell_fingerprint, output_fingerprint, output_text, join_source,
)

from .utils import new_cell, stream, result, display, error


def test_join_source():
    assert join_source(["a\n", "b"]) == "a\nb"
    assert join_source("a\nb") == "a\nb"
    assert join_source(None) == ""


def test_cell_fingerprint_ignores_surrounding_whitespace():
    a = new_cell("x = 1")
    b = new_cell("\n  x = 1\n\n")
    assert cell_fingerprint(a) == cell_fingerprint(b) == "code:x = 1"


def test_cell_fingerprint_fragments_are_concatenated():
    a = new_cell("x = 1\ny = 2")
    b = new_cell(["x = 1\n", "y = 2"])
    assert cell_fingerprint(a) == cell_fingerprint(b)


def test_cell_fingerprint_depends_on_type():
    assert cell_fingerprint(new_cell("x", "code")) != cell_fingerprint(new_cell("x", "markdown"))
    assert cell_fingerprint(new_cell("x", "raw")) == "raw:x"


def test_cell_fingerprint_inner_whitespace_matters():
    assert cell_fingerprint(new_cell("x = 1")) != cell_fingerprint(new_cell("x  = 1"))


def test_cell_fingerprint_ignores_outputs_and_count():
    a = new_cell("x", outputs=[stream("1\n")])
    b = new_cell("x")
    b.execution_count = 7
    assert cell_fingerprint(a) == cell_fingerprint(b)


def test_output_text_stream():
    assert output_text(stream(["a\n", "b\n"])) == "a\nb\n"


def test_output_text_error():
    e = error("ValueError", "bad", ["line 1", "line 2"])
    assert output_text(e) == "ValueError: bad\nline 1\nline 2"


def test_output_text_prefers_plain_then_html():
    assert output_text(display({"text/plain": "p", "text/html": "<b>h</b>"})) == "p"
    assert output_text(display({"text/html": "<b>h</b>"})) == "<b>h</b>"


def test_output_text_falls_back_to_json():
    data = {"image/png": "iVBORw0KGgo="}
    assert output_text(display(data)) == json.dumps(data, indent=2)


def test_output_fingerprint():
    assert output_fingerprint(result(" 42 ")) == "execute_result:42"
    assert output_fingerprint(stream("42\n")) == "stream:42"
    assert output_fingerprint(stream("42")) != output_fingerprint(result("42"))
