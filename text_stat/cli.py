from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from .config import env_int, env_path, load_options
from .report import analyze_corpus, build_report, build_term_matrix, load_corpus, save_reports, save_term_matrix

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Descriptive text statistics")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    stats_parser = subparsers.add_parser("stats", help="Print statistics for one text file as JSON")
    stats_parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        help="Text file to analyze (default: read standard input)",
    )
    stats_parser.add_argument(
        "--exclude",
        default=None,
        help="Regular expression removed while cleaning (default: TEXT_STAT_EXCLUDE or built-in rules)",
    )

    report_parser = subparsers.add_parser("report", help="Analyze a directory of .txt files and write JSON/CSV")
    report_parser.add_argument(
        "--input-dir",
        type=Path,
        default=env_path("TEXT_STAT_INPUT_DIR", "data"),
        help="Directory containing text files (default: %(default)s or TEXT_STAT_INPUT_DIR)",
    )
    report_parser.add_argument(
        "--output-dir",
        type=Path,
        default=env_path("TEXT_STAT_OUTPUT_DIR", "text_stats"),
        help="Directory to write reports to (default: %(default)s or TEXT_STAT_OUTPUT_DIR)",
    )
    report_parser.add_argument(
        "--basename",
        default=os.getenv("TEXT_STAT_BASENAME", "text_stats"),
        help="Base filename for the JSON/CSV reports (default: %(default)s or TEXT_STAT_BASENAME)",
    )
    report_parser.add_argument(
        "--term-matrix",
        action="store_true",
        help="Also write a document-word count matrix as term_matrix.csv",
    )

    for sub in (stats_parser, report_parser):
        sub.add_argument(
            "--top",
            type=int,
            default=env_int("TEXT_STAT_TOP_WORDS", 10),
            help="Number of most frequent words to include (default: %(default)s or TEXT_STAT_TOP_WORDS)",
        )
        sub.add_argument(
            "--case-insensitive",
            action="store_false",
            dest="case_sensitive",
            help="Fold case before counting unique words",
        )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    options = load_options()

    if args.command == "stats":
        if args.exclude:
            options = replace(options, exclude=args.exclude)
        if args.file is None:
            filename, text = "<stdin>", sys.stdin.read()
        else:
            if not args.file.is_file():
                raise FileNotFoundError(f"Input file does not exist: {args.file}")
            filename, text = args.file.name, args.file.read_text(encoding="utf-8", errors="ignore")
        report = build_report(
            filename,
            text,
            options=options,
            top_n=args.top,
            case_sensitive=args.case_sensitive,
        )
        json.dump(report, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    elif args.command == "report":
        corpus = load_corpus(args.input_dir)
        if not corpus:
            LOGGER.warning("No .txt files found in %s", args.input_dir)
        reports = analyze_corpus(
            corpus,
            options=options,
            top_n=args.top,
            case_sensitive=args.case_sensitive,
        )
        save_reports(reports, args.output_dir, basename=args.basename)
        if args.term_matrix:
            matrix, vocabulary = build_term_matrix(corpus, options=options, case_sensitive=args.case_sensitive)
            save_term_matrix(
                matrix,
                vocabulary,
                [filename for filename, _ in corpus],
                args.output_dir / "term_matrix.csv",
            )
    else:
        parser.error("No command provided")


if __name__ == "__main__":
    main()
