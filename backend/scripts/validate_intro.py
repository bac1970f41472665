"""Validate an introduction from the command line.

Usage (from repository root):
    python backend/scripts/validate_intro.py "Good Morning Respected Seniors. ..."
    python backend/scripts/validate_intro.py --file intro.txt --at 2026-02-24T09:00:00+05:30
    python backend/scripts/validate_intro.py --example 1
    echo "..." | python backend/scripts/validate_intro.py

Usage (from backend/):
    python -m scripts.validate_intro --stats
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

from sqlalchemy.exc import SQLAlchemyError

# Make package imports work whether the script is run from repo root or backend/.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from intro_validator.config import get_settings
from intro_validator.logging_config import configure_logging
from intro_validator.samples import SAMPLE_INTRODUCTIONS
from intro_validator.services.introductions import decide_reply, get_validator, validate_and_record
from intro_validator.validation import IntroductionValidator, ValidationResult


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse script CLI arguments."""

    parser = argparse.ArgumentParser(description="Validate a five-sentence introduction message.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("text", nargs="?", help="Introduction text (reads stdin when omitted).")
    source.add_argument("--file", type=Path, help="Read the introduction from a UTF-8 text file.")
    source.add_argument(
        "--example",
        type=int,
        choices=range(1, len(SAMPLE_INTRODUCTIONS) + 1),
        help="Validate one of the built-in sample introductions.",
    )
    source.add_argument("--list-examples", action="store_true", help="List the built-in samples and exit.")
    source.add_argument("--stats", action="store_true", help="Print recorded validation totals and exit.")
    parser.add_argument(
        "--at",
        help="Evaluation time in ISO 8601; naive values are read in the configured timezone (default: now).",
    )
    parser.add_argument(
        "--no-record",
        dest="record",
        action="store_false",
        help="Skip storing the verdict in the validation stats.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def resolve_evaluation_time(raw: str | None, timezone_name: str) -> datetime:
    """Parse ``--at``; naive timestamps are wall-clock times in ``timezone_name``."""

    if not raw:
        return datetime.now(timezone.utc)
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=ZoneInfo(timezone_name))
    return parsed


def read_text(args: argparse.Namespace) -> str:
    if args.example:
        sample = SAMPLE_INTRODUCTIONS[args.example - 1]
        print(f"Example: {sample.title}")
        return sample.text
    if args.file:
        return args.file.read_text(encoding="utf-8")
    if args.text:
        return args.text
    return sys.stdin.read()


def print_stats() -> None:
    from intro_validator.db.session import SessionLocal
    from intro_validator.services.introductions import get_validation_stats

    with SessionLocal() as db:
        stats = get_validation_stats(db)
    print(f"total={stats.total}")
    print(f"valid={stats.valid}")
    print(f"invalid={stats.invalid}")


def record_verdict(text: str, evaluated_at: datetime, validator: IntroductionValidator) -> ValidationResult | None:
    """Validate and store the verdict; ``None`` when the database is unavailable."""

    from intro_validator.db.session import SessionLocal

    try:
        with SessionLocal() as db:
            verdict, _run = validate_and_record(
                db, text, source="cli", evaluated_at=evaluated_at, validator=validator
            )
    except SQLAlchemyError as exc:
        print(f"Could not record the verdict: {exc}", file=sys.stderr)
        return None
    return verdict


def main(argv: list[str] | None = None) -> int:
    """Validate one introduction and print the verdict; exit code 1 on rejection."""

    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else get_settings().log_level)

    if args.list_examples:
        for index, sample in enumerate(SAMPLE_INTRODUCTIONS, start=1):
            print(f"{index}. {sample.title}")
        return 0
    if args.stats:
        print_stats()
        return 0

    text = " ".join(read_text(args).split())
    if not text:
        print("No introduction text provided.", file=sys.stderr)
        return 2

    validator = get_validator()
    evaluated_at = resolve_evaluation_time(args.at, validator.greeting_checker.timezone_name)
    verdict = record_verdict(text, evaluated_at, validator) if args.record else None
    if verdict is None:
        verdict, _run = validate_and_record(
            None, text, source="cli", evaluated_at=evaluated_at, validator=validator
        )

    print(f"Evaluated at: {validator.greeting_checker.localize(evaluated_at).isoformat()}")
    print(f'Expected greeting: "{validator.expected_greeting(evaluated_at)}"')
    action = decide_reply(verdict)
    if verdict.is_valid:
        print("VALID INTRODUCTION")
        print(f"Action: react with {action.reaction}")
        return 0

    print("INVALID INTRODUCTION")
    for index, message in enumerate(verdict.messages, start=1):
        print(f"  {index}. {message}")
    print(f'Action: reply "{action.reply_text}"')
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
