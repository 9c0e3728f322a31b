"""Core data models for the transliteration regression suite."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class FixtureLoadError(Exception):
    """Raised when the fixture file cannot be turned into test cases."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("Fixture load failed")
        self.errors = errors

    def __str__(self) -> str:  # pragma: no cover - debug convenience
        return f"FixtureLoadError(errors={self.errors!r})"


class Category(Enum):
    """Test category, derived from the fixture record id prefix."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    UI = "ui"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_PREFIXES = {
    Category.POSITIVE: "Pos_Fun_",
    Category.NEGATIVE: "Neg_",
    Category.UI: "Pos_UI_",
}

_LABELS = {
    Category.POSITIVE: "Positive Tests",
    Category.NEGATIVE: "Negative Tests",
    Category.UI: "UI Tests",
}

# Pos_UI_ must be tested before the broader positive prefix family.
_MATCH_ORDER = (Category.UI, Category.POSITIVE, Category.NEGATIVE)


def categorize(tc_id: str) -> Optional[Category]:
    """Return the category encoded in ``tc_id`` or ``None`` when it has none."""

    for category in _MATCH_ORDER:
        if tc_id.startswith(category.prefix):
            return category
    return None


@dataclass(frozen=True, slots=True)
class TestCase:
    """One fixture record as consumed by a live run."""

    __test__ = False

    id: str
    input: str
    expected_output: str
    category: Optional[Category] = None

    @classmethod
    def from_record(cls, record: "FixtureRecord") -> "TestCase":
        return cls(
            id=record.tc_id,
            input=record.input,
            expected_output=record.expected_output,
            category=categorize(record.tc_id),
        )


@dataclass(slots=True)
class FixtureRecord:
    """Raw fixture entry with the maintenance metadata kept alongside it."""

    tc_id: str
    input: str
    expected_output: str
    name: str = ""
    input_length_type: str = ""
    actual_output: str = ""
    status: str = ""
    justification: str = ""
    coverage: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "TC ID": self.tc_id,
            "Test case name": self.name,
            "Input length type": self.input_length_type,
            "Input": self.input,
            "Expected output": self.expected_output,
            "Actual output": self.actual_output,
            "Status": self.status,
            "Justification": self.justification,
            "What is covered by the test": self.coverage,
        }


@dataclass(frozen=True, slots=True)
class InteractionResult:
    actual_output: str
    is_match: bool
    responsiveness: "ResponsivenessCheck"

    @property
    def is_responsive(self) -> bool:
        return self.responsiveness.responsive


@dataclass(frozen=True, slots=True)
class ResponsivenessCheck:
    """Outcome of a responsiveness check.

    ``timed_out`` separates "the wait itself failed" from "the elements were
    found but are not usable", so flaky infrastructure is distinguishable from
    a frozen page.
    """

    responsive: bool
    timed_out: bool = False
    detail: Optional[str] = None

    def __bool__(self) -> bool:
        return self.responsive


@dataclass(frozen=True, slots=True)
class CategoryTally:
    passed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    def record(self, passed: bool) -> "CategoryTally":
        if passed:
            return CategoryTally(self.passed + 1, self.failed)
        return CategoryTally(self.passed, self.failed + 1)

    def to_dict(self) -> Dict[str, int]:
        return {"passed": self.passed, "failed": self.failed, "total": self.total}


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Immutable aggregate of per-category and overall tallies."""

    categories: Dict[Category, CategoryTally] = field(
        default_factory=lambda: {category: CategoryTally() for category in Category}
    )
    overall: CategoryTally = field(default_factory=CategoryTally)

    def record(self, category: Optional[Category], passed: bool) -> "RunSummary":
        categories = dict(self.categories)
        if category is not None:
            categories[category] = categories.get(category, CategoryTally()).record(passed)
        return RunSummary(categories=categories, overall=self.overall.record(passed))

    def tally(self, category: Category) -> CategoryTally:
        return self.categories.get(category, CategoryTally())

    @property
    def categorized_total(self) -> int:
        return sum(self.tally(category).total for category in Category)

    def to_dict(self) -> Dict[str, object]:
        return {
            "categories": {category.value: self.tally(category).to_dict() for category in Category},
            "overall": self.overall.to_dict(),
        }


__all__ = [
    "Category",
    "CategoryTally",
    "FixtureLoadError",
    "FixtureRecord",
    "InteractionResult",
    "ResponsivenessCheck",
    "RunSummary",
    "TestCase",
    "categorize",
]
