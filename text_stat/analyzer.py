from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from text_stat.cleaning import clean_text, split_words, words_by_section
from text_stat.config import TextStatOptions
from text_stat.errors import NoTextSetError
from text_stat.patterns import WHITESPACE_PATTERN, PatternLike, split_text
from text_stat.stats import Number, Selector, reduce_values, str_length, to_lower_case

LOGGER = logging.getLogger(__name__)


class TextAnalyzer:
    """Descriptive statistics for a single document.

    ``set_text`` stores the original text together with its cleaned form;
    every metric is derived from that pair on demand.
    """

    def __init__(self, options: TextStatOptions | None = None) -> None:
        self.options = options or TextStatOptions()
        self._text: Optional[str] = None
        self._clean_text: Optional[str] = None

    @property
    def unicode_case_folding(self) -> bool:
        return self.options.unicode_case_folding

    def set_text(self, text: str, exclude: PatternLike | None = None) -> None:
        """Set the text and clean it with ``exclude`` (or the configured pattern)."""

        pattern = self.options.exclude if exclude is None else exclude
        cleaned = clean_text(text, pattern)
        self._text = text
        self._clean_text = cleaned
        LOGGER.debug("Set text of %d characters (%d after cleaning)", len(text), len(cleaned))

    @property
    def text(self) -> str:
        if self._text is None:
            raise NoTextSetError("No text has been set; call set_text() first.")
        return self._text

    @property
    def clean_text(self) -> str:
        if self._clean_text is None:
            raise NoTextSetError("No text has been set; call set_text() first.")
        return self._clean_text

    def words(self) -> List[str]:
        return split_words(self.clean_text)

    def word_count(self) -> int:
        return len(self.words())

    def lines(self, separator: PatternLike | None = None) -> List[str]:
        pattern = self.options.line_separator if separator is None else separator
        return split_text(pattern, self.text)

    def line_count(self, separator: PatternLike | None = None) -> int:
        return len(self.lines(separator))

    def sentences(self, separator: PatternLike | None = None) -> List[str]:
        pattern = self.options.sentence_separator if separator is None else separator
        return split_text(pattern, self.text)

    def sentence_count(self, separator: PatternLike | None = None) -> int:
        return len(self.sentences(separator))

    def word_positions(self) -> Dict[int, str]:
        """Map the character offset of each word to the word.

        Each word is looked up by value, so every occurrence of a repeated
        word resolves to the offset of its first occurrence and the map
        holds one entry for it.
        """

        text = self.text
        positions: Dict[int, str] = {}
        for word in self.words():
            offset = text.find(word)
            if offset < 0:
                LOGGER.debug("Word %r not found in original text; skipping", word)
                continue
            positions[offset] = word
        return positions

    def length(self, whitespace: bool = True) -> int:
        text = self.text if whitespace else WHITESPACE_PATTERN.sub("", self.text)
        return str_length(text)

    def unique_words(
        self,
        limit: int = 0,
        sorted: bool = False,
        case_sensitive: bool = True,
    ) -> Dict[str, int]:
        """Count how often each word occurs.

        With ``sorted`` the entries are ordered by descending count; words
        with equal counts keep the order in which they first appeared.
        ``limit`` keeps only the first ``limit`` entries.
        """

        all_words = self.words()
        if not case_sensitive:
            all_words = [to_lower_case(word, self.unicode_case_folding) for word in all_words]

        unique: Dict[str, int] = {}
        for word in all_words:
            unique[word] = unique.get(word, 0) + 1

        items = list(unique.items())
        if sorted:
            items.sort(key=lambda item: item[1], reverse=True)
        if limit > 0:
            items = items[:limit]
        return dict(items)

    def unique_word_count(self, case_sensitive: bool = True) -> int:
        return len(self.unique_words(case_sensitive=case_sensitive))

    def unique_word_percentage(self, case_sensitive: bool = True) -> float:
        word_count = self.word_count()
        if word_count == 0:
            raise ZeroDivisionError("Cannot compute unique word percentage of a text without words")
        return self.unique_word_count(case_sensitive) / word_count * 100

    def lengths_by_word(self) -> Dict[str, int]:
        return {word: str_length(word) for word in self.words()}

    def words_at_extreme(self, selector: Union[Selector, str]) -> Dict[str, int]:
        """Return every word whose length equals the shortest or longest length."""

        selector = Selector.coerce(selector)
        if selector is Selector.AVERAGE:
            raise ValueError("words_at_extreme() accepts only 'min' or 'max' selectors.")

        lengths = self.lengths_by_word()
        extreme = reduce_values(selector, lengths.values())
        return {word: length for word, length in lengths.items() if length == extreme}

    def word_length(self, selector: Union[Selector, str]) -> Number:
        return reduce_values(selector, self.lengths_by_word().values())

    def section_length(self, selector: Union[Selector, str], sections: Sequence[str]) -> Number:
        """Shortest, longest or average section length measured in words.

        ``sections`` is typically the output of :meth:`lines` or :meth:`sentences`.
        """

        return section_length(selector, sections)


def section_length(selector: Union[Selector, str], sections: Sequence[str]) -> Number:
    counts = [len(words) for words in words_by_section(sections)]
    return reduce_values(selector, counts)
