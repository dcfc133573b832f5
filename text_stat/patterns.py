from __future__ import annotations

import re
from re import Pattern
from typing import List, Union

from text_stat.errors import InvalidPatternError

PatternLike = Union[str, Pattern[str]]

# Sentence punctuation runs, or a cluster of separator symbols between whitespace.
DEFAULT_EXCLUDE = r"[!?,.:;/\\]+|\s[#$%&*+\-<=>@^_|~\[\](){}\"'`]+\s"
DEFAULT_LINE_SEPARATOR = r"\n|\r"
DEFAULT_SENTENCE_SEPARATOR = r"(?<=[!?.])\s+"

SPACE_RUN_PATTERN = re.compile(r"[ ]+")
WHITESPACE_PATTERN = re.compile(r"\s+")


def compile_pattern(pattern: PatternLike) -> Pattern[str]:
    """Return a compiled pattern, raising InvalidPatternError for bad input."""

    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise TypeError(f"Expected a pattern string or compiled pattern, got {type(pattern).__name__}")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc


def split_text(pattern: PatternLike, text: str) -> List[str]:
    """Split ``text`` on every match of ``pattern``.

    Unlike ``re.split`` the contents of capture groups are never returned,
    only the text between matches.
    """

    compiled = compile_pattern(pattern)
    parts: List[str] = []
    start = 0
    for match in compiled.finditer(text):
        parts.append(text[start : match.start()])
        start = match.end()
    parts.append(text[start:])
    return parts
