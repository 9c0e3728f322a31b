"""Page object for the hosted Singlish to Sinhala transliteration page."""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .config import SuiteConfig
from .models import ResponsivenessCheck

logger = logging.getLogger(__name__)

INPUT_SELECTOR = 'textarea[placeholder*="Singlish"]'
OUTPUT_SELECTOR = "div.whitespace-pre-wrap.overflow-y-auto.flex-grow.bg-slate-50"
CLEAR_SELECTOR = 'button:has-text("Clear")'


class TranslatorPage:
    """Semantic operations over the input, output and clear controls.

    All side effects stay on the page passed in; the page converts reactively,
    so every input-changing call waits a fixed settle delay before returning.
    """

    def __init__(self, page: Page, config: SuiteConfig | None = None) -> None:
        self.page = page
        self.config = config or SuiteConfig()
        self.input_area = page.locator(INPUT_SELECTOR)
        self.output_area = page.locator(OUTPUT_SELECTOR)
        self.clear_button = page.locator(CLEAR_SELECTOR)

    def navigate(self) -> None:
        self.page.goto(self.config.base_url, timeout=self.config.navigation_timeout_ms)
        self.page.wait_for_load_state("networkidle", timeout=self.config.navigation_timeout_ms)

    def clear_input(self) -> None:
        self.input_area.click()
        self.page.keyboard.press("ControlOrMeta+A")
        self.page.keyboard.press("Backspace")
        self.page.wait_for_timeout(self.config.clear_settle_ms)

    def clear_via_button(self) -> None:
        self.clear_button.click()
        self.page.wait_for_timeout(self.config.clear_settle_ms)

    def type_input(self, text: str) -> None:
        self.clear_input()
        self.input_area.fill(text)
        self.page.wait_for_timeout(self.config.type_settle_ms)

    def get_output(self) -> str:
        self.output_area.wait_for(state="visible")
        return (self.output_area.text_content() or "").strip()

    def read_stable_output(self, max_attempts: int = 3, interval_ms: int = 500) -> str:
        """Re-read the output until two consecutive non-empty reads agree."""

        previous = ""
        current = ""
        for _ in range(max_attempts):
            current = self.get_output()
            if current and current == previous:
                break
            previous = current
            self.page.wait_for_timeout(interval_ms)
        return current

    def is_responsive(self) -> ResponsivenessCheck:
        timeout = self.config.responsive_timeout_ms
        try:
            self.input_area.wait_for(state="visible", timeout=timeout)
            self.output_area.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            logger.warning("Responsiveness check timed out after %sms: %s", timeout, exc)
            return ResponsivenessCheck(responsive=False, timed_out=True, detail=str(exc))
        if not self.input_area.is_editable():
            return ResponsivenessCheck(responsive=False, detail="input area is not editable")
        return ResponsivenessCheck(responsive=True)

    def verify_real_time_conversion(self, text: str) -> bool:
        """Type key by key and report whether output appeared without a submit."""

        try:
            self.clear_input()
            self.input_area.press_sequentially(text, delay=self.config.key_delay_ms)
            return len(self.get_output()) > 0
        except PlaywrightTimeoutError:
            logger.warning("Real-time conversion check timed out for %r", text)
            return False

    def take_screenshot(self, name: str, *, today: Optional[date] = None) -> Path:
        stamp = (today or datetime.now(timezone.utc).date()).strftime("%Y%m%d")
        target = Path(self.config.screenshot_root) / f"test_run_{stamp}" / f"{name}.png"
        target.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(target), full_page=True)
        return target


__all__ = ["CLEAR_SELECTOR", "INPUT_SELECTOR", "OUTPUT_SELECTOR", "TranslatorPage"]
