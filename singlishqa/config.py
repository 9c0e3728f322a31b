"""Run configuration for the transliteration suites."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from .models import Category

DEFAULT_BASE_URL = "https://www.swifttranslator.com/"

EXPECTED_COUNTS: Dict[Category, int] = {
    Category.POSITIVE: 24,
    Category.NEGATIVE: 10,
    Category.UI: 1,
}

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when an environment setting cannot be interpreted."""


class NegativePolicy(str, Enum):
    STRICT = "strict"
    DOCUMENT = "document"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _env_optional_path(name: str, default: str) -> Optional[Path]:
    """An explicitly empty variable disables the path."""

    raw = os.getenv(name, default).strip()
    return Path(raw) if raw else None


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in _TRUTHY


def _env_policy() -> NegativePolicy:
    raw = (os.getenv("SINGLISHQA_NEGATIVE_POLICY") or NegativePolicy.STRICT.value).strip().lower()
    try:
        return NegativePolicy(raw)
    except ValueError as exc:
        raise ConfigError(f"SINGLISHQA_NEGATIVE_POLICY must be 'strict' or 'document', got {raw!r}") from exc


@dataclass(slots=True)
class SuiteConfig:
    """Settings shared by the page adapter, the scenario runner and the reporter."""

    base_url: str = field(default_factory=lambda: os.getenv("SINGLISHQA_BASE_URL", DEFAULT_BASE_URL))
    fixture_path: Path = field(
        default_factory=lambda: Path(os.getenv("SINGLISHQA_FIXTURE", "test-data/sample_D1.json"))
    )
    screenshot_root: Path = field(
        default_factory=lambda: Path(os.getenv("SINGLISHQA_SCREENSHOT_ROOT", "screenshots"))
    )
    summary_path: Optional[Path] = field(
        default_factory=lambda: _env_optional_path("SINGLISHQA_SUMMARY_PATH", "test-results/category-summary.json")
    )
    clear_settle_ms: int = field(default_factory=lambda: _env_int("SINGLISHQA_CLEAR_SETTLE_MS", 500))
    type_settle_ms: int = field(default_factory=lambda: _env_int("SINGLISHQA_TYPE_SETTLE_MS", 3000))
    scenario_settle_ms: int = field(default_factory=lambda: _env_int("SINGLISHQA_SCENARIO_SETTLE_MS", 1500))
    ui_settle_ms: int = field(default_factory=lambda: _env_int("SINGLISHQA_UI_SETTLE_MS", 2000))
    ui_clear_settle_ms: int = 500
    responsive_timeout_ms: int = field(default_factory=lambda: _env_int("SINGLISHQA_RESPONSIVE_TIMEOUT_MS", 5000))
    navigation_timeout_ms: int = 30000
    action_timeout_ms: int = 15000
    key_delay_ms: int = 100
    viewport: Dict[str, int] = field(default_factory=lambda: {"width": 1280, "height": 720})
    negative_policy: NegativePolicy = field(default_factory=_env_policy)
    live: bool = field(default_factory=lambda: _env_flag("SINGLISHQA_LIVE"))
    expected_counts: Dict[Category, int] = field(default_factory=lambda: dict(EXPECTED_COUNTS))

    def __post_init__(self) -> None:
        for name in (
            "clear_settle_ms",
            "type_settle_ms",
            "scenario_settle_ms",
            "ui_settle_ms",
            "ui_clear_settle_ms",
            "responsive_timeout_ms",
        ):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0")
        if not isinstance(self.negative_policy, NegativePolicy):
            try:
                self.negative_policy = NegativePolicy(self.negative_policy)
            except ValueError as exc:
                raise ConfigError(f"unknown negative_policy {self.negative_policy!r}") from exc

    @property
    def expected_total(self) -> int:
        return sum(self.expected_counts.values())

    def context_args(self) -> Dict[str, object]:
        """Keyword arguments for ``browser.new_context``."""

        return {
            "base_url": self.base_url,
            "viewport": dict(self.viewport),
            "ignore_https_errors": True,
        }


__all__ = ["ConfigError", "DEFAULT_BASE_URL", "EXPECTED_COUNTS", "NegativePolicy", "SuiteConfig"]
