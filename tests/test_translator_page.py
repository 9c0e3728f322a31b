from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from fake_page import FakePage
from singlishqa import translator_page
from singlishqa.config import SuiteConfig
from singlishqa.translator_page import INPUT_SELECTOR, OUTPUT_SELECTOR, TranslatorPage


@pytest.fixture()
def config(tmp_path: Path) -> SuiteConfig:
    return SuiteConfig(base_url="https://translator.test/", screenshot_root=tmp_path / "shots")


@pytest.fixture()
def page() -> FakePage:
    return FakePage()


def test_navigate_waits_for_network_idle(page: FakePage, config: SuiteConfig) -> None:
    TranslatorPage(page, config).navigate()
    assert page.visited == ["https://translator.test/"]
    assert page.load_states == ["networkidle"]


def test_type_input_clears_then_waits_for_conversion(page: FakePage, config: SuiteConfig) -> None:
    page.text = "old text"
    translator = TranslatorPage(page, config)

    translator.type_input("mama gedhara yanavaa")

    assert page.keyboard.pressed == ["ControlOrMeta+A", "Backspace"]
    assert page.timeouts == [config.clear_settle_ms, config.type_settle_ms]
    assert translator.get_output() == "මම ගෙදර යනවා"


def test_get_output_is_trimmed(page: FakePage, config: SuiteConfig) -> None:
    page.text = "mama bath kanavaa"
    assert TranslatorPage(page, config).get_output() == "මම බත් කනවා"
    assert page.waits[-1] == (OUTPUT_SELECTOR, "visible", None)


def test_empty_input_yields_empty_output(page: FakePage, config: SuiteConfig) -> None:
    translator = TranslatorPage(page, config)
    translator.type_input("")
    assert translator.get_output() == ""


def test_clear_input_is_idempotent(page: FakePage, config: SuiteConfig) -> None:
    translator = TranslatorPage(page, config)
    translator.type_input("mama gedhara yanavaa")

    translator.clear_input()
    assert translator.get_output() == ""
    translator.clear_input()
    assert translator.get_output() == ""


def test_clear_via_button(page: FakePage, config: SuiteConfig) -> None:
    translator = TranslatorPage(page, config)
    translator.type_input("mama gedhara yanavaa")
    translator.clear_via_button()
    assert translator.get_output() == ""
    assert page.timeouts[-1] == config.clear_settle_ms


def test_is_responsive_when_elements_visible(page: FakePage, config: SuiteConfig) -> None:
    check = TranslatorPage(page, config).is_responsive()
    assert check.responsive
    assert not check.timed_out
    assert (INPUT_SELECTOR, "visible", config.responsive_timeout_ms) in page.waits


def test_is_responsive_reports_timeout_instead_of_raising(page: FakePage, config: SuiteConfig) -> None:
    page.hidden.add(OUTPUT_SELECTOR)
    check = TranslatorPage(page, config).is_responsive()
    assert not check
    assert check.timed_out
    assert "Timeout" in (check.detail or "")


def test_is_responsive_distinguishes_frozen_input(page: FakePage, config: SuiteConfig) -> None:
    page.editable = False
    check = TranslatorPage(page, config).is_responsive()
    assert not check
    assert not check.timed_out


def test_real_time_conversion_detected_without_submit(page: FakePage, config: SuiteConfig) -> None:
    translator = TranslatorPage(page, config)
    assert translator.verify_real_time_conversion("mama gedhara yanavaa") is True
    assert page.typed_delays == [config.key_delay_ms]


def test_real_time_conversion_false_on_timeout(page: FakePage, config: SuiteConfig) -> None:
    page.hidden.add(OUTPUT_SELECTOR)
    assert TranslatorPage(page, config).verify_real_time_conversion("mama") is False


def test_read_stable_output_stops_when_reads_agree(page: FakePage, config: SuiteConfig) -> None:
    page.text = "mama gedhara yanavaa"
    output = TranslatorPage(page, config).read_stable_output(max_attempts=3, interval_ms=250)
    assert output == "මම ගෙදර යනවා"
    assert page.timeouts == [250]


def test_take_screenshot_uses_dated_folder(page: FakePage, config: SuiteConfig) -> None:
    path = TranslatorPage(page, config).take_screenshot("FAIL-positive-Pos_Fun_0001", today=date(2026, 1, 31))
    assert path == config.screenshot_root / "test_run_20260131" / "FAIL-positive-Pos_Fun_0001.png"
    assert path.exists()


def test_take_screenshot_defaults_to_utc_date(page: FakePage, config: SuiteConfig, monkeypatch) -> None:
    seen = []

    class FrozenClock:
        @staticmethod
        def now(tz=None):
            seen.append(tz)
            # still the 31st in UTC while UTC+5:30 has already reached February
            return datetime(2026, 1, 31, 23, 0, tzinfo=tz)

    monkeypatch.setattr(translator_page, "datetime", FrozenClock)
    path = TranslatorPage(page, config).take_screenshot("FAIL-ui-Pos_UI_0001")
    assert seen == [timezone.utc]
    assert path.parent.name == "test_run_20260131"
