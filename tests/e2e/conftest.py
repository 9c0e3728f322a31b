"""Fixtures for the browser-driven suites; the page comes from pytest-playwright."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import pytest

from singlishqa.config import SuiteConfig
from singlishqa.fixtures import cases_for, load_fixture
from singlishqa.models import TestCase
from singlishqa.pytest_plugin import suite_config_for
from singlishqa.scenario import ScenarioRunner
from singlishqa.translator_page import TranslatorPage

REPO_ROOT = Path(__file__).resolve().parents[2]


@lru_cache(maxsize=None)
def _all_cases(path: Path) -> tuple[TestCase, ...]:
    return tuple(load_fixture(path))


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    if "case" not in metafunc.fixturenames:
        return
    config = suite_config_for(metafunc.config)
    fixture_path = config.fixture_path if config.fixture_path.is_absolute() else REPO_ROOT / config.fixture_path
    cases = cases_for(_all_cases(fixture_path), metafunc.module.CATEGORY)
    metafunc.parametrize("case", cases, ids=[case.id for case in cases])


@pytest.fixture(scope="session")
def suite_config(pytestconfig: pytest.Config) -> SuiteConfig:
    return suite_config_for(pytestconfig)


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, suite_config: SuiteConfig):
    return {**browser_context_args, **suite_config.context_args()}


@pytest.fixture()
def translator(page, suite_config: SuiteConfig) -> TranslatorPage:
    page.set_default_timeout(suite_config.action_timeout_ms)
    page.set_default_navigation_timeout(suite_config.navigation_timeout_ms)
    translator_page = TranslatorPage(page, suite_config)
    translator_page.navigate()
    return translator_page


@pytest.fixture()
def scenario_runner(translator: TranslatorPage, suite_config: SuiteConfig) -> ScenarioRunner:
    return ScenarioRunner(translator, suite_config)
