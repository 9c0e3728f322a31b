"""Command-line helpers for maintaining the transliteration fixture."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import SuiteConfig
from .fixtures import count_by_category, load_fixture
from .models import Category, FixtureLoadError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate the transliteration test fixture")
    subparsers = parser.add_subparsers(dest="command", required=True)
    check = subparsers.add_parser("check", help="Validate the fixture and compare category counts")
    check.add_argument(
        "fixture",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the fixture JSON (default: SINGLISHQA_FIXTURE or test-data/sample_D1.json)",
    )
    return parser.parse_args(argv)


def check_fixture(path: Path, config: SuiteConfig) -> int:
    try:
        cases = load_fixture(path)
    except FixtureLoadError as exc:
        print(f"Fixture {path} is not usable. See errors below:", file=sys.stderr)
        for field, message in exc.errors.items():
            print(f" - {field}: {message}", file=sys.stderr)
        return 1

    counts = count_by_category(cases)
    uncategorized = len(cases) - sum(counts.values())
    mismatched = False
    for category in Category:
        expected = config.expected_counts.get(category, 0)
        actual = counts[category]
        status = "ok" if actual == expected else "MISMATCH"
        mismatched = mismatched or actual != expected
        print(f"{category.label:<16} {actual:>3} / {expected:<3} {status}")
    print(f"{'Total':<16} {len(cases):>3} / {config.expected_total:<3}")
    if uncategorized:
        print(f"{uncategorized} record(s) carry no known id prefix", file=sys.stderr)
    return 2 if mismatched else 0


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = SuiteConfig()
    if args.command == "check":
        raise SystemExit(check_fixture(args.fixture or config.fixture_path, config))


if __name__ == "__main__":  # pragma: no cover
    main()
