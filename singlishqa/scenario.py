"""Fixed interaction sequence driven once per fixture record."""
from __future__ import annotations

import logging
from typing import Optional

from .config import NegativePolicy, SuiteConfig
from .models import Category, InteractionResult, ResponsivenessCheck, TestCase
from .translator_page import TranslatorPage

logger = logging.getLogger(__name__)


class OutputMismatch(AssertionError):
    """Raised when the converted output differs from the recorded expectation."""

    def __init__(self, case: TestCase, actual: str) -> None:
        category = case.category.value if case.category else "uncategorized"
        super().__init__(
            f"{case.id} ({category}): expected {case.expected_output!r}, got {actual!r}"
        )
        self.case = case
        self.actual = actual


class PageUnresponsive(AssertionError):
    def __init__(self, case: TestCase, check: ResponsivenessCheck) -> None:
        reason = "responsiveness check timed out" if check.timed_out else (check.detail or "elements not usable")
        super().__init__(f"{case.id}: page not responsive after conversion ({reason})")
        self.case = case
        self.responsiveness = check


class ScenarioRunner:
    """Drives a :class:`TranslatorPage` through one fixture record and checks it."""

    def __init__(self, translator: TranslatorPage, config: SuiteConfig | None = None) -> None:
        self.translator = translator
        self.config = config or translator.config

    # ------------------------------------------------------------------ public
    def run(self, case: TestCase) -> InteractionResult:
        """Execute and verify ``case`` according to its category."""

        if case.category is Category.UI:
            return self._run_ui(case)
        result = self.execute(case, settle_ms=self.config.scenario_settle_ms)
        self._verify_output(case, result)
        self._verify_responsive(case, result.responsiveness)
        return result

    def execute(self, case: TestCase, *, settle_ms: int) -> InteractionResult:
        self.translator.clear_input()
        self.translator.type_input(case.input)
        self.translator.page.wait_for_timeout(settle_ms)
        actual = self.translator.get_output()
        check = self.translator.is_responsive()
        return InteractionResult(actual_output=actual, is_match=actual == case.expected_output, responsiveness=check)

    # ---------------------------------------------------------------- internal
    def _run_ui(self, case: TestCase) -> InteractionResult:
        self.translator.clear_input()
        initial = self.translator.get_output()
        assert initial == "", f"{case.id}: output not empty before typing: {initial!r}"

        result = self.execute(case, settle_ms=self.config.ui_settle_ms)
        self._verify_output(case, result)
        self._verify_responsive(case, result.responsiveness)

        self.translator.clear_input()
        self.translator.page.wait_for_timeout(self.config.ui_clear_settle_ms)
        cleared = self.translator.get_output()
        assert cleared == "", f"{case.id}: output not cleared after clearing input: {cleared!r}"
        return result

    def _verify_output(self, case: TestCase, result: InteractionResult) -> None:
        logger.info(
            "%s input=%r expected=%r actual=%r status=%s",
            case.id,
            case.input,
            case.expected_output,
            result.actual_output,
            "PASS" if result.is_match else "FAIL",
        )
        if result.is_match:
            return

        self._capture_failure(case)
        logger.warning(
            "Output mismatch for %s\n  - Expected: %s\n  - Actual:   %s",
            case.id,
            case.expected_output,
            result.actual_output,
        )
        if case.category is Category.NEGATIVE and self.config.negative_policy is NegativePolicy.DOCUMENT:
            logger.info("%s mismatch documented; negative policy does not fail the test", case.id)
            return
        raise OutputMismatch(case, result.actual_output)

    def _verify_responsive(self, case: TestCase, check: ResponsivenessCheck) -> None:
        if not check:
            raise PageUnresponsive(case, check)

    def _capture_failure(self, case: TestCase) -> Optional[str]:
        category = case.category.value if case.category else "uncategorized"
        name = f"FAIL-{category}-{case.id}"
        try:
            path = self.translator.take_screenshot(name)
        except Exception:  # pragma: no cover - diagnostics are best effort
            logger.warning("Failed to capture screenshot %s", name, exc_info=True)
            return None
        logger.info("Saved mismatch screenshot to %s", path)
        return str(path)


__all__ = ["OutputMismatch", "PageUnresponsive", "ScenarioRunner"]
