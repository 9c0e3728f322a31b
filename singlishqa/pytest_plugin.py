"""pytest plugin: live-suite switch and the per-category console summary."""
from __future__ import annotations

from typing import Optional

import pytest

from .config import SuiteConfig
from .models import Category, RunSummary, TestCase
from .reporting import render_report, write_summary

CATEGORY_PROPERTY = "singlishqa_category"

_SUITE_CONFIG_KEY = pytest.StashKey[SuiteConfig]()


def category_of(report: pytest.TestReport) -> Optional[Category]:
    for name, value in report.user_properties:
        if name == CATEGORY_PROPERTY:
            try:
                return Category(value)
            except ValueError:
                return None
    return None


def is_final_report(report: pytest.TestReport) -> bool:
    """True for the one report that decides a test's outcome.

    That is the call report, or the setup report when setup failed or skipped.
    Anything but "passed" is then counted as a fail.
    """

    if report.when == "call":
        return True
    return report.when == "setup" and not report.passed


class CategoryReporter:
    """Accumulates a :class:`RunSummary` from test reports and prints it at the end."""

    def __init__(self, suite_config: SuiteConfig) -> None:
        self.suite_config = suite_config
        self.summary = RunSummary()

    def pytest_runtest_logreport(self, report: pytest.TestReport) -> None:
        if not is_final_report(report):
            return
        self.summary = self.summary.record(category_of(report), report.passed)

    def pytest_terminal_summary(self, terminalreporter) -> None:  # type: ignore[no-untyped-def]
        text = render_report(self.summary, self.suite_config.expected_counts)
        terminalreporter.write(text)
        if self.suite_config.summary_path and self.summary.categorized_total:
            path = write_summary(self.suite_config.summary_path, self.summary, self.suite_config.expected_counts)
            terminalreporter.write_line(f"Category summary written to {path}")


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("singlishqa")
    group.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run the browser-driven suites against the hosted transliteration page",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "live: drives the hosted transliteration page through a real browser")
    suite_config = SuiteConfig()
    if config.getoption("live"):
        suite_config.live = True
    config.stash[_SUITE_CONFIG_KEY] = suite_config
    config.pluginmanager.register(CategoryReporter(suite_config), "singlishqa-category-reporter")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    suite_config = config.stash[_SUITE_CONFIG_KEY]
    selected: list[pytest.Item] = []
    deselected: list[pytest.Item] = []
    for item in items:
        callspec = getattr(item, "callspec", None)
        if callspec is not None:
            for value in callspec.params.values():
                if isinstance(value, TestCase) and value.category is not None:
                    item.user_properties.append((CATEGORY_PROPERTY, value.category.value))
                    break
        if "live" in item.keywords and not suite_config.live:
            deselected.append(item)
        else:
            selected.append(item)
    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected


def suite_config_for(config: pytest.Config) -> SuiteConfig:
    return config.stash[_SUITE_CONFIG_KEY]


__all__ = ["CATEGORY_PROPERTY", "CategoryReporter", "category_of", "is_final_report", "suite_config_for"]
