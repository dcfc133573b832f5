from __future__ import annotations

from typing import Optional, TypedDict


class WordCount(TypedDict):
    word: str
    count: int


class TextReport(TypedDict):
    """Summary statistics produced for one document."""

    filename: str
    length: int
    length_without_whitespace: int
    word_count: int
    line_count: int
    sentence_count: int
    unique_word_count: int
    unique_word_percentage: Optional[float]
    shortest_word_length: int
    longest_word_length: int
    average_word_length: Optional[float]
    shortest_words: list[str]
    longest_words: list[str]
    shortest_sentence_length: int
    longest_sentence_length: int
    average_sentence_length: Optional[float]
    average_line_length: Optional[float]
    top_words: list[WordCount]
