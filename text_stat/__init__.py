"""Descriptive statistics for blocks of text."""

from .analyzer import TextAnalyzer, section_length
from .cleaning import clean_text, words_by_section
from .config import TextStatOptions, detect_unicode_case_folding, load_options
from .errors import EmptyValuesError, InvalidPatternError, NoTextSetError, TextStatError
from .report import analyze_corpus, build_report, build_term_matrix
from .stats import Selector, average
from .types import TextReport

__all__ = [
    "TextAnalyzer",
    "TextStatOptions",
    "TextReport",
    "Selector",
    "clean_text",
    "words_by_section",
    "section_length",
    "average",
    "detect_unicode_case_folding",
    "load_options",
    "analyze_corpus",
    "build_report",
    "build_term_matrix",
    "TextStatError",
    "InvalidPatternError",
    "NoTextSetError",
    "EmptyValuesError",
]
