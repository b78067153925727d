# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Content keys used to decide whether two cells or outputs are the same.

A fingerprint only depends on the type and the text of a record, never on
its position. The only leniency is that surrounding whitespace is ignored.
Fingerprints are not unique: unrelated cells with the same text collide.
"""

import json

__all__ = ["cell_fingerprint", "output_fingerprint", "output_text", "join_source"]


def join_source(source):
    "Join a source stored as a list of fragments into a single string."
    if source is None:
        return ""
    if isinstance(source, (list, tuple)):
        return "".join(source)
    return source


def output_text(output):
    """Textual rendering of an output, used for both matching and diffing.

    stream: the stream text
    error: "ename: evalue" followed by the traceback lines
    execute_result/display_data: text/plain, then text/html, then the
    whole mime bundle as indented JSON
    """
    ot = output.get("output_type")
    if ot == "stream":
        return join_source(output.get("text"))
    if ot == "error":
        traceback = output.get("traceback") or []
        return "%s: %s\n%s" % (
            output.get("ename"), output.get("evalue"), "\n".join(traceback))
    data = output.get("data")
    if data:
        if data.get("text/plain"):
            return join_source(data["text/plain"])
        if data.get("text/html"):
            return join_source(data["text/html"])
        return json.dumps(data, indent=2)
    return ""


def cell_fingerprint(cell):
    return "%s:%s" % (cell["cell_type"], join_source(cell.get("source")).strip())


def output_fingerprint(output):
    return "%s:%s" % (output["output_type"], output_text(output).strip())
