# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Line and word level text differs.

Both take two strings and return an ordered list of ChangeSegments.
Joining the removed and equal segments reproduces the first string,
joining the added and equal segments reproduces the second one.
"""

import re
from difflib import SequenceMatcher

from ..diff_format import ChangeSegment, SegmentKind


__all__ = ["diff_lines", "diff_words", "text_differ", "GRANULARITIES"]


GRANULARITIES = ("lines", "words")

# Words, runs of whitespace and runs of punctuation, in that order
_word_tokens = re.compile(r"\w+|\s+|[^\w\s]+", re.UNICODE)

# Lines end at "\n" only, the last line may lack it
_line_tokens = re.compile(r"[^\n]*\n|[^\n]+")


def _split_lines(text):
    return _line_tokens.findall(text)


def _split_words(text):
    return _word_tokens.findall(text)


def opcodes_to_segments(a, b, opcodes):
    "Convert difflib opcodes over token lists to merged change segments."
    segments = []

    def emit(tokens, kind):
        text = "".join(tokens)
        if not text:
            return
        if segments and segments[-1].kind == kind:
            segments[-1] = ChangeSegment(segments[-1].text + text, kind)
        else:
            segments.append(ChangeSegment(text, kind))

    for action, abegin, aend, bbegin, bend in opcodes:
        if action == "equal":
            emit(a[abegin:aend], SegmentKind.EQUAL)
        elif action == "replace":
            emit(a[abegin:aend], SegmentKind.REMOVED)
            emit(b[bbegin:bend], SegmentKind.ADDED)
        elif action == "delete":
            emit(a[abegin:aend], SegmentKind.REMOVED)
        elif action == "insert":
            emit(b[bbegin:bend], SegmentKind.ADDED)
        else:
            raise RuntimeError("Unknown action {}".format(action))
    return segments


def _diff_tokens(a, b):
    s = SequenceMatcher(None, a, b, autojunk=False)
    return opcodes_to_segments(a, b, s.get_opcodes())


def diff_lines(a, b):
    """Diff two strings line by line.

    Line endings stay attached to their lines, so a line that only
    differs by a trailing newline counts as changed. Only "\\n" ends a
    line, carriage returns are ordinary characters.
    """
    if a == b:
        return [ChangeSegment(a, SegmentKind.EQUAL)] if a else []
    return _diff_tokens(_split_lines(a), _split_lines(b))


def diff_words(a, b):
    "Diff two strings word by word, whitespace runs are tokens of their own."
    if a == b:
        return [ChangeSegment(a, SegmentKind.EQUAL)] if a else []
    return _diff_tokens(_split_words(a), _split_words(b))


def text_differ(granularity):
    "Look up the text differ for a granularity name."
    if granularity == "lines":
        return diff_lines
    elif granularity == "words":
        return diff_words
    raise ValueError("Invalid text diff granularity %r, expected one of %r" % (
        granularity, GRANULARITIES))
