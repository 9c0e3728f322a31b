"""Rendering and persistence of the per-category run summary."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Mapping

from .models import Category, CategoryTally, RunSummary

RULE = "=" * 72
THIN_RULE = "-" * 72

_PURPOSE = {
    Category.POSITIVE: (
        "Correct conversions",
        "Validate accurate Singlish to Sinhala transliteration",
        ("Passed (correct)", "Failed (errors)"),
    ),
    Category.NEGATIVE: (
        "Incorrect or messy input",
        "Document actual system behavior with problematic inputs",
        ("Documented", "Test errors"),
    ),
    Category.UI: (
        "User interface behavior",
        "Validate real-time conversion and interface behavior",
        ("Passed (working)", "Failed (broken)"),
    ),
}

_LEGEND = {
    Category.POSITIVE: (
        "Validate correct system behavior.",
        "Input: valid Singlish -> expected: accurate Sinhala.",
        "PASS = system translated correctly.",
    ),
    Category.NEGATIVE: (
        "Document system behavior with bad inputs.",
        "Input: invalid or messy Singlish -> expected: ideal Sinhala.",
        "These check robustness, not correctness.",
    ),
    Category.UI: (
        "Validate user interface functionality.",
        "Real-time conversion, responsiveness, clearing.",
        "PASS = UI works as expected.",
    ),
}


def accuracy(tally: CategoryTally) -> str:
    if not tally.total:
        return "0.00%"
    return f"{tally.passed / tally.total * 100:.2f}%"


def render_report(summary: RunSummary, expected_counts: Mapping[Category, int]) -> str:
    """Return the full textual summary for ``summary``."""

    lines: List[str] = ["", RULE, "TEST EXECUTION SUMMARY REPORT".center(72),
                        "Singlish to Sinhala transliteration".center(72), RULE, ""]

    for category in Category:
        tally = summary.tally(category)
        title, purpose, (pass_label, fail_label) = _PURPOSE[category]
        lines.append(f"{category.label.upper()} - {title} ({expected_counts.get(category, 0)} scenarios)")
        lines.append(f"   Purpose: {purpose}")
        lines.append(f"   |- Total test cases:  {tally.total}")
        lines.append(f"   |- {pass_label + ':':<18} {tally.passed}")
        lines.append(f"   |- {fail_label + ':':<18} {tally.failed}")
        lines.append(f"   `- Accuracy:          {accuracy(tally)}")
        lines.append("")

    overall = summary.overall
    lines.extend(
        [
            THIN_RULE,
            "OVERALL TEST EXECUTION SUMMARY",
            f"   |- Total test cases executed:  {overall.total}",
            f"   |- Tests passed/documented:    {overall.passed}",
            f"   `- Tests failed:               {overall.failed}",
            "",
            RULE,
            "",
        ]
    )
    lines.extend(render_requirements(summary, expected_counts))
    lines.extend(["", RULE, "", "INTERPRETATION GUIDE:", ""])
    for category in Category:
        lines.append(f"   {category.label.upper()} ({expected_counts.get(category, 0)}):")
        lines.extend(f"      * {text}" for text in _LEGEND[category])
        lines.append("")
    lines.append(RULE)
    return "\n".join(lines) + "\n"


def render_requirements(summary: RunSummary, expected_counts: Mapping[Category, int]) -> List[str]:
    """Expected-versus-actual count table; status depends only on counts."""

    border = "   +" + "-" * 22 + "+" + "-" * 10 + "+" + "-" * 8 + "+" + "-" * 12 + "+"
    row = "   | {:<20} | {:>8} | {:>6} | {:<10} |"
    lines = ["REQUIREMENTS VALIDATION:", border, row.format("Test category", "Required", "Actual", "Status"), border]
    for category in Category:
        required = expected_counts.get(category, 0)
        actual = summary.tally(category).total
        lines.append(row.format(category.label, required, actual, "PASS" if actual == required else "FAIL"))
    lines.append(border)
    required_total = sum(expected_counts.values())
    actual_total = summary.overall.total
    status = "COMPLETE" if actual_total == required_total else "MISSING"
    lines.append(row.format("TOTAL", required_total, actual_total, status))
    lines.append(border)
    return lines


def write_summary(path: Path | str, summary: RunSummary, expected_counts: Mapping[Category, int]) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload: Dict[str, object] = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        **summary.to_dict(),
        "expected_counts": {category.value: count for category, count in expected_counts.items()},
        "accuracy": {category.value: accuracy(summary.tally(category)) for category in Category},
    }
    target.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return target


__all__ = ["accuracy", "render_report", "render_requirements", "write_summary"]
