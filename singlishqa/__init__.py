"""Browser-driven regression suite for a Singlish to Sinhala transliteration page."""
from .config import NegativePolicy, SuiteConfig
from .fixtures import cases_for, load_fixture
from .models import Category, FixtureLoadError, ResponsivenessCheck, RunSummary, TestCase, categorize
from .reporting import render_report
from .scenario import OutputMismatch, ScenarioRunner
from .translator_page import TranslatorPage

__all__ = [
    "Category",
    "FixtureLoadError",
    "NegativePolicy",
    "OutputMismatch",
    "ResponsivenessCheck",
    "RunSummary",
    "ScenarioRunner",
    "SuiteConfig",
    "TestCase",
    "TranslatorPage",
    "cases_for",
    "categorize",
    "load_fixture",
    "render_report",
]
