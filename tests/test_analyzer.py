from __future__ import annotations

import pytest

from text_stat.analyzer import TextAnalyzer, section_length
from text_stat.config import TextStatOptions
from text_stat.errors import InvalidPatternError, NoTextSetError
from text_stat.stats import Selector


def make_analyzer(text: str, **options: object) -> TextAnalyzer:
    analyzer = TextAnalyzer(TextStatOptions(**options))  # type: ignore[arg-type]
    analyzer.set_text(text)
    return analyzer


def test_metrics_before_set_text_raise() -> None:
    analyzer = TextAnalyzer()
    with pytest.raises(NoTextSetError):
        analyzer.word_count()
    with pytest.raises(NoTextSetError):
        analyzer.lines()
    with pytest.raises(NoTextSetError):
        _ = analyzer.text


def test_set_text_keeps_original_and_clean_text() -> None:
    analyzer = make_analyzer("The cat sat. The dog ran!")
    assert analyzer.text == "The cat sat. The dog ran!"
    assert analyzer.clean_text == "The cat sat The dog ran"

    analyzer.set_text("Another one.")
    assert analyzer.text == "Another one."
    assert analyzer.clean_text == "Another one"


def test_set_text_with_custom_exclude() -> None:
    analyzer = TextAnalyzer()
    analyzer.set_text("a_b_c", exclude="_")
    assert analyzer.words() == ["a", "b", "c"]
    with pytest.raises(InvalidPatternError):
        analyzer.set_text("text", exclude="(")


def test_sentences_and_words_exclude_punctuation() -> None:
    analyzer = make_analyzer("The cat sat. The dog ran!")
    assert analyzer.sentence_count() == 2
    assert analyzer.sentences() == ["The cat sat.", "The dog ran!"]
    words = analyzer.words()
    assert words == ["The", "cat", "sat", "The", "dog", "ran"]
    assert not any("." in word or "!" in word for word in words)


def test_empty_text_has_one_empty_word() -> None:
    analyzer = make_analyzer("")
    assert analyzer.words() == [""]
    assert analyzer.word_count() == 1
    assert analyzer.unique_word_count() == 1
    assert analyzer.unique_word_percentage() == 100.0


def test_unique_word_percentage_guards_zero_word_count(monkeypatch: pytest.MonkeyPatch) -> None:
    analyzer = make_analyzer("anything")
    monkeypatch.setattr(analyzer, "words", lambda: [])
    with pytest.raises(ZeroDivisionError):
        analyzer.unique_word_percentage()


def test_lines_split_each_separator_independently() -> None:
    analyzer = make_analyzer("one\r\ntwo\nthree")
    assert analyzer.lines() == ["one", "", "two", "three"]
    assert analyzer.line_count() == 4
    assert analyzer.line_count(separator=r"\r\n|\n") == 3


def test_word_positions_use_first_occurrence_for_repeated_words() -> None:
    analyzer = make_analyzer("the cat saw the dog")
    positions = analyzer.word_positions()
    # The second "the" at offset 12 resolves to the first occurrence.
    assert positions == {0: "the", 4: "cat", 8: "saw", 16: "dog"}
    assert 12 not in positions


def test_length_counts_codepoints_with_and_without_whitespace() -> None:
    analyzer = make_analyzer("héllo wörld\n")
    assert analyzer.length() == 12
    assert analyzer.length(whitespace=False) == 10


def test_unique_words_case_handling() -> None:
    analyzer = make_analyzer("Hi, hi HI")
    assert analyzer.unique_words(case_sensitive=False) == {"hi": 3}
    assert analyzer.unique_words() == {"Hi": 1, "hi": 1, "HI": 1}
    assert analyzer.unique_word_count(case_sensitive=False) == 1
    assert analyzer.unique_word_percentage(case_sensitive=False) == pytest.approx(100 / 3)


def test_unique_words_ascii_only_folding() -> None:
    analyzer = make_analyzer("Äpfel äpfel APFEL apfel", unicode_case_folding=False)
    assert analyzer.unicode_case_folding is False
    assert analyzer.unique_words(case_sensitive=False) == {"Äpfel": 1, "äpfel": 1, "apfel": 2}

    unicode_analyzer = make_analyzer("Äpfel äpfel", unicode_case_folding=True)
    assert unicode_analyzer.unique_words(case_sensitive=False) == {"äpfel": 2}


def test_unique_words_sorted_is_stable_and_limited() -> None:
    analyzer = make_analyzer("b a c a b d a")
    assert analyzer.unique_words() == {"b": 2, "a": 3, "c": 1, "d": 1}
    assert list(analyzer.unique_words(sorted=True).items()) == [("a", 3), ("b", 2), ("c", 1), ("d", 1)]
    assert list(analyzer.unique_words(limit=2, sorted=True)) == ["a", "b"]
    assert list(analyzer.unique_words(limit=2)) == ["b", "a"]


def test_unique_word_count_never_exceeds_word_count() -> None:
    for text in ["", "one", "a a a", "The cat sat. The dog ran!", "x y z x"]:
        analyzer = make_analyzer(text)
        assert analyzer.unique_word_count() <= analyzer.word_count()


def test_lengths_by_word_collapses_duplicates() -> None:
    analyzer = make_analyzer("tree bee tree")
    assert analyzer.lengths_by_word() == {"tree": 4, "bee": 3}


def test_words_at_extreme_includes_ties() -> None:
    analyzer = make_analyzer("cat dog owl")
    assert analyzer.words_at_extreme(Selector.MAX) == {"cat": 3, "dog": 3, "owl": 3}

    analyzer.set_text("a bb cc ddd e")
    assert analyzer.words_at_extreme("min") == {"a": 1, "e": 1}
    assert analyzer.words_at_extreme("max") == {"ddd": 3}
    with pytest.raises(ValueError):
        analyzer.words_at_extreme(Selector.AVERAGE)


def test_word_length_selectors() -> None:
    analyzer = make_analyzer("a bb cccc")
    assert analyzer.word_length(Selector.MIN) == 1
    assert analyzer.word_length(Selector.MAX) == 4
    assert analyzer.word_length(Selector.AVERAGE) == pytest.approx(7 / 3)


def test_average_word_length_of_empty_text_raises() -> None:
    analyzer = make_analyzer("")
    assert analyzer.word_length(Selector.MIN) == 0
    with pytest.raises(ZeroDivisionError):
        analyzer.word_length(Selector.AVERAGE)


def test_section_length_over_lines_and_sentences() -> None:
    analyzer = make_analyzer("one two\nthree")
    assert analyzer.section_length(Selector.AVERAGE, analyzer.lines()) == 1.5
    assert analyzer.section_length(Selector.MIN, analyzer.lines()) == 1
    assert analyzer.section_length(Selector.MAX, analyzer.lines()) == 2

    analyzer.set_text("Short one. This sentence is longer! End?")
    sentences = analyzer.sentences()
    assert sentences == ["Short one.", "This sentence is longer!", "End?"]
    assert section_length("max", sentences) == 4
    assert section_length("min", sentences) == 1


def test_words_keep_newlines_because_only_spaces_split() -> None:
    analyzer = make_analyzer("first line.\nsecond line")
    assert analyzer.clean_text == "first line \nsecond line"
    assert analyzer.words() == ["first", "line", "\nsecond", "line"]
