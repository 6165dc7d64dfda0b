"""
Module: cli

Purpose:
    Command-line entry point (``mcq-shuffler``).

    inspect INPUT   Parse a .docx exam and summarise detected questions
    generate INPUT  Parse, apply reviewer answers, gate, build the archive

    INPUT may be a .docx exam or a .jsonl file written by ``inspect --json``.

Exit codes:
    0  success
    1  user-correctable problem (bad input, unresolved review)
    2  internal failure (conversion or build error)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from mcq_toolkit import __version__
from mcq_toolkit.builder import BuildError, BuilderConfig, build_exams
from mcq_toolkit.builder.config import ARCHIVE_NAME, MAX_VERSIONS, MIN_VERSIONS, OUTPUT_FORMATS
from mcq_toolkit.core.models import Question
from mcq_toolkit.core.utils import load_questions_jsonl, save_questions_jsonl
from mcq_toolkit.extractor import (
    DocumentConversionError,
    NoQuestionsFoundError,
    ParseResult,
    parse_document,
)
from mcq_toolkit.review import ReviewIncompleteError, ReviewSession

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USER = 1
EXIT_INTERNAL = 2


def _version_count(value: str) -> int:
    count = int(value)
    if not MIN_VERSIONS <= count <= MAX_VERSIONS:
        raise argparse.ArgumentTypeError(
            f"must be between {MIN_VERSIONS} and {MAX_VERSIONS}"
        )
    return count


def _answer_override(value: str) -> Tuple[int, str]:
    """Parse NUM=LETTER, e.g. "12=C"."""
    number, sep, letter = value.partition("=")
    if not sep or not number.strip().isdigit() or len(letter.strip()) != 1:
        raise argparse.ArgumentTypeError(f"expected NUM=LETTER, got {value!r}")
    return int(number), letter.strip().upper()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcq-shuffler",
        description="Shuffle a styled multiple-choice .docx exam into N versions with an answer key.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    inspect = sub.add_parser("inspect", help="Parse an exam and list detected questions")
    inspect.add_argument("input", type=Path, help="Exam .docx")
    inspect.add_argument("--json", type=Path, dest="json_path", help="Write questions as JSONL")
    inspect.add_argument("--debug-dir", type=Path, help="Write diagnostics, marked XML and HTML")

    generate = sub.add_parser("generate", help="Build shuffled versions and the answer key")
    generate.add_argument("input", type=Path, help="Exam .docx or reviewed .jsonl")
    generate.add_argument(
        "-n", "--versions", type=_version_count, default=3,
        help=f"Number of versions ({MIN_VERSIONS}-{MAX_VERSIONS}, default 3)",
    )
    generate.add_argument("-o", "--output", type=Path, default=Path(ARCHIVE_NAME), help="Output .zip")
    generate.add_argument("--format", choices=OUTPUT_FORMATS, default="docx", dest="output_format")
    generate.add_argument("--seed", type=int, default=None, help="Random seed for reproducible shuffles")
    generate.add_argument(
        "--answer", type=_answer_override, action="append", default=[], metavar="NUM=LETTER",
        help="Set the correct option of question NUM (repeatable)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "inspect":
            return _run_inspect(args)
        return _run_generate(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USER
    except NoQuestionsFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.diagnostics is not None:
            for message in e.diagnostics.messages:
                print(f"  {message}", file=sys.stderr)
        return EXIT_USER
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USER
    except DocumentConversionError as e:
        print(f"Error: could not convert document: {e}", file=sys.stderr)
        return EXIT_INTERNAL
    except BuildError as e:
        print(f"Error: build failed: {e}", file=sys.stderr)
        return EXIT_INTERNAL


def _run_inspect(args: argparse.Namespace) -> int:
    result = parse_document(args.input)
    _print_summary(result.questions)

    if args.json_path:
        save_questions_jsonl(result.questions, args.json_path)
        print(f"Wrote {len(result.questions)} questions to {args.json_path}")
    if args.debug_dir:
        report = result.diagnostics.save(args.debug_dir)
        print(f"Wrote diagnostics to {report}")
    return EXIT_OK


def _run_generate(args: argparse.Namespace) -> int:
    questions = _load_input(args.input)
    session = ReviewSession(questions)

    for number, letter in args.answer:
        try:
            session.select_answer_letter(number, letter)
        except (KeyError, ValueError) as e:
            print(f"Error: --answer {number}={letter}: {e}", file=sys.stderr)
            return EXIT_USER

    try:
        reviewed = session.confirm()
    except ReviewIncompleteError as e:
        print(f"Error: {e}", file=sys.stderr)
        for issue in e.issues:
            print(f"  {issue}", file=sys.stderr)
        print("Use --answer NUM=LETTER to select answers.", file=sys.stderr)
        return EXIT_USER

    config = BuilderConfig(
        version_count=args.versions,
        output_path=args.output,
        output_format=args.output_format,
        seed=args.seed,
    )
    result = build_exams(reviewed, config, progress_callback=_print_progress)
    print(f"Wrote {len(result.variants)} versions to {result.archive_path}")
    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return EXIT_OK


def _load_input(path: Path) -> List[Question]:
    if path.suffix.lower() == ".jsonl":
        return load_questions_jsonl(path)
    result: ParseResult = parse_document(path)
    return list(result.questions)


def _print_summary(questions: Sequence[Question]) -> None:
    missing = sum(1 for q in questions if not q.has_detected_answer)
    print(f"Found {len(questions)} questions ({missing} missing answers)")
    for question in questions:
        number = question.original_number if question.original_number is not None else "?"
        status = "ok" if len(question.correct_options) == 1 else "REVIEW"
        print(f"  [{status:>6}] {number}. {question.text[:60]}")
        for option in question.options:
            mark = "*" if option.is_correct else " "
            print(f"           {mark} {option.original_label or '?'}. {option.text[:60]}")


def _print_progress(done: int, total: int) -> None:
    logger.info(f"Processing... {done}/{total}")


if __name__ == "__main__":
    sys.exit(main())
