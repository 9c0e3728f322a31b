"""Fixture loading for the transliteration suites."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .models import Category, FixtureLoadError, FixtureRecord, TestCase

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("TC ID", "Input", "Expected output")

_OPTIONAL_FIELDS = {
    "Test case name": "name",
    "Input length type": "input_length_type",
    "Actual output": "actual_output",
    "Status": "status",
    "Justification": "justification",
    "What is covered by the test": "coverage",
}


def load_records(path: Path | str) -> List[FixtureRecord]:
    """Read every fixture record, failing on the first unusable file or field."""

    fixture_path = Path(path)
    try:
        raw = json.loads(fixture_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FixtureLoadError({"file": f"fixture file not found: {fixture_path}"})
    except json.JSONDecodeError as exc:
        raise FixtureLoadError({"file": f"invalid JSON in {fixture_path}: {exc}"})

    if not isinstance(raw, list):
        raise FixtureLoadError({"file": "fixture must be a JSON array of records"})

    errors: Dict[str, str] = {}
    records: List[FixtureRecord] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            errors[f"[{index}]"] = "record must be an object"
            continue
        missing = [name for name in REQUIRED_FIELDS if not isinstance(entry.get(name), str)]
        if missing:
            for name in missing:
                errors[f"[{index}].{name}"] = "required string field missing"
            continue
        extras = {attr: str(entry.get(key) or "") for key, attr in _OPTIONAL_FIELDS.items()}
        records.append(
            FixtureRecord(
                tc_id=entry["TC ID"],
                input=entry["Input"],
                expected_output=entry["Expected output"],
                **extras,
            )
        )

    seen: set[str] = set()
    for record in records:
        if record.tc_id in seen:
            errors[record.tc_id] = "duplicate TC ID"
        seen.add(record.tc_id)

    if errors:
        raise FixtureLoadError(errors)
    logger.debug("Loaded %d fixture records from %s", len(records), fixture_path)
    return records


def load_fixture(path: Path | str) -> List[TestCase]:
    return [TestCase.from_record(record) for record in load_records(path)]


def cases_for(cases: Iterable[TestCase], category: Category) -> List[TestCase]:
    """Return the cases whose id carries ``category``'s prefix, in fixture order."""

    return [case for case in cases if case.category is category]


def count_by_category(cases: Iterable[TestCase]) -> Dict[Category, int]:
    counts = {category: 0 for category in Category}
    for case in cases:
        if case.category is not None:
            counts[case.category] += 1
    return counts


__all__ = ["REQUIRED_FIELDS", "cases_for", "count_by_category", "load_fixture", "load_records"]
