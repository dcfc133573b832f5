from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from text_stat.analyzer import TextAnalyzer
from text_stat.config import TextStatOptions
from text_stat.stats import Selector
from text_stat.types import TextReport

LOGGER = logging.getLogger(__name__)
IntArray = NDArray[np.int_]
T = TypeVar("T")

# Columns that hold lists and are joined with ";" in CSV output.
_LIST_COLUMNS = ("shortest_words", "longest_words")


def _ensure_dir_exists(path: Path, description: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"{description} does not exist: {path}")
    if not path.is_dir():
        raise NotADirectoryError(f"{description} is not a directory: {path}")


def _or_none(metric: Callable[[], T]) -> T | None:
    try:
        return metric()
    except ZeroDivisionError:
        return None


def load_corpus(input_dir: Path) -> list[tuple[str, str]]:
    """Load raw text corpus from a directory of .txt files."""

    _ensure_dir_exists(input_dir, "Input directory")
    LOGGER.info("Loading corpus from %s", input_dir)
    corpus: list[tuple[str, str]] = []
    for filename in sorted(input_dir.iterdir()):
        if filename.suffix != ".txt":
            LOGGER.debug("Skipping %s (not a .txt file)", filename.name)
            continue
        with filename.open("r", encoding="utf-8", errors="ignore") as infile:
            corpus.append((filename.name, infile.read()))
    LOGGER.debug("Loaded %d documents", len(corpus))
    return corpus


def build_report(
    filename: str,
    text: str,
    *,
    options: TextStatOptions | None = None,
    top_n: int = 10,
    case_sensitive: bool = True,
) -> TextReport:
    """Compute the summary statistics of one document."""

    analyzer = TextAnalyzer(options)
    analyzer.set_text(text)
    sentences = analyzer.sentences()
    lines = analyzer.lines()
    top_words = analyzer.unique_words(limit=top_n, sorted=True, case_sensitive=case_sensitive)

    return {
        "filename": filename,
        "length": analyzer.length(),
        "length_without_whitespace": analyzer.length(whitespace=False),
        "word_count": analyzer.word_count(),
        "line_count": len(lines),
        "sentence_count": len(sentences),
        "unique_word_count": analyzer.unique_word_count(case_sensitive),
        "unique_word_percentage": _or_none(lambda: analyzer.unique_word_percentage(case_sensitive)),
        "shortest_word_length": int(analyzer.word_length(Selector.MIN)),
        "longest_word_length": int(analyzer.word_length(Selector.MAX)),
        "average_word_length": _or_none(lambda: float(analyzer.word_length(Selector.AVERAGE))),
        "shortest_words": list(analyzer.words_at_extreme(Selector.MIN)),
        "longest_words": list(analyzer.words_at_extreme(Selector.MAX)),
        "shortest_sentence_length": int(analyzer.section_length(Selector.MIN, sentences)),
        "longest_sentence_length": int(analyzer.section_length(Selector.MAX, sentences)),
        "average_sentence_length": _or_none(lambda: float(analyzer.section_length(Selector.AVERAGE, sentences))),
        "average_line_length": _or_none(lambda: float(analyzer.section_length(Selector.AVERAGE, lines))),
        "top_words": [{"word": word, "count": count} for word, count in top_words.items()],
    }


def analyze_corpus(
    corpus: Iterable[tuple[str, str]],
    *,
    options: TextStatOptions | None = None,
    top_n: int = 10,
    case_sensitive: bool = True,
) -> List[TextReport]:
    reports = [
        build_report(filename, text, options=options, top_n=top_n, case_sensitive=case_sensitive)
        for filename, text in corpus
    ]
    LOGGER.info("Analyzed %d documents", len(reports))
    return reports


def build_term_matrix(
    corpus: Sequence[tuple[str, str]],
    *,
    options: TextStatOptions | None = None,
    case_sensitive: bool = True,
) -> tuple[IntArray, list[str]]:
    """Create a document-word count matrix over the cleaned words of a corpus."""

    analyzer = TextAnalyzer(options)
    frequencies: list[dict[str, int]] = []
    for _, text in corpus:
        analyzer.set_text(text)
        counts = analyzer.unique_words(case_sensitive=case_sensitive)
        counts.pop("", None)
        frequencies.append(counts)

    vocabulary = sorted({word for counts in frequencies for word in counts})
    vocab_index = {word: idx for idx, word in enumerate(vocabulary)}
    matrix: IntArray = np.zeros((len(frequencies), len(vocabulary)), dtype=int)

    for row_index, counts in enumerate(frequencies):
        for word, count in counts.items():
            matrix[row_index, vocab_index[word]] = count

    return matrix, vocabulary


def save_reports(reports: Sequence[TextReport], output_dir: Path, *, basename: str = "text_stats") -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"{basename}.json"
    csv_path = output_dir / f"{basename}.csv"

    LOGGER.info("Writing reports to %s and %s", json_path, csv_path)
    with json_path.open("w", encoding="utf-8") as outfile:
        json.dump(list(reports), outfile, ensure_ascii=False, indent=2)

    fieldnames = list(TextReport.__annotations__)
    with csv_path.open("w", encoding="utf-8", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()
        for report in reports:
            row = dict(report)
            for column in _LIST_COLUMNS:
                row[column] = ";".join(report[column])  # type: ignore[literal-required]
            row["top_words"] = ";".join(f'{entry["word"]}:{entry["count"]}' for entry in report["top_words"])
            writer.writerow(row)

    return json_path


def save_term_matrix(matrix: IntArray, vocabulary: Sequence[str], filenames: Sequence[str], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Writing %dx%d term matrix to %s", matrix.shape[0], matrix.shape[1], path)
    with path.open("w", encoding="utf-8", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(["filename", *vocabulary])
        for filename, row in zip(filenames, matrix):
            writer.writerow([filename, *(int(value) for value in row)])
