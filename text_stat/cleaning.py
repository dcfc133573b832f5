from __future__ import annotations

import logging
from typing import Iterable, List

from text_stat.patterns import DEFAULT_EXCLUDE, SPACE_RUN_PATTERN, PatternLike, compile_pattern

LOGGER = logging.getLogger(__name__)


def _clean_once(text: str, exclude: PatternLike) -> str:
    cleaned = compile_pattern(exclude).sub(" ", text)
    cleaned = SPACE_RUN_PATTERN.sub(" ", cleaned)
    return cleaned.strip()


def clean_text(text: str, exclude: PatternLike = DEFAULT_EXCLUDE) -> str:
    """Replace punctuation and separator runs with single spaces.

    The replacement, space collapsing and stripping are repeated until the
    text settles, because removing one separator cluster can expose another
    (``"a - - b"``). Passes that make the text longer are not repeated, which
    keeps patterns matching the empty string to a single pass.
    """

    cleaned = _clean_once(text, exclude)
    # Every repeated pass either shortens the text or turns a non-space into a space.
    for _ in range(len(cleaned) + 1):
        again = _clean_once(cleaned, exclude)
        if again == cleaned or len(again) > len(cleaned):
            break
        cleaned = again
    return cleaned


def split_words(cleaned: str) -> List[str]:
    # Splitting an empty string yields one empty word; callers rely on that count.
    return cleaned.split(" ")


def words_by_section(sections: Iterable[str], exclude: PatternLike = DEFAULT_EXCLUDE) -> List[List[str]]:
    """Clean each section (line, paragraph or sentence) and split it into words."""

    result = [split_words(clean_text(section, exclude)) for section in sections]
    LOGGER.debug("Split %d sections into words", len(result))
    return result
