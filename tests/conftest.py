"""Pytest configuration and shared fixtures for the mdlist test suite."""

import os

import pytest
from bs4 import BeautifulSoup
from hypothesis import Phase, Verbosity, settings

from mdlist.options import MarkdownOptions
from mdlist.printer import StructuredPrinter

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def printer() -> StructuredPrinter:
    """Provide an empty printer with default Markdown options."""
    return StructuredPrinter(MarkdownOptions())


@pytest.fixture
def make_tag():
    """Build a single BeautifulSoup tag from an HTML snippet."""

    def _make(html: str):
        soup = BeautifulSoup(html, "html.parser")
        return soup.find(True)

    return _make
