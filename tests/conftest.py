"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides testing settings and sample UI trees.
"""

import pytest
from pydantic_settings import SettingsConfigDict

from jsxrender.config import settings as settings_module
from jsxrender.config.logging import setup_logging
from jsxrender.config.settings import Settings
from jsxrender.models.schemas import Element, FormatPolicy, RenderOptions

from tests.data.sample_trees import (
    NAVIGATION_TREE,
    build_async_page,
)


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"
    default_pretty: bool = True
    default_max_inline_content_width: int = 40
    default_tab: str = "    "
    default_newline: str = "\n"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure library logging once for the test session."""
    setup_logging(TestSettings(), force=True)


@pytest.fixture
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(monkeypatch: pytest.MonkeyPatch, test_settings: TestSettings):
    """Override library settings for testing."""
    monkeypatch.setattr(settings_module, "settings", test_settings)
    yield test_settings


@pytest.fixture
def default_policy() -> FormatPolicy:
    """Formatting policy built from default render options."""
    return RenderOptions().to_policy()


@pytest.fixture
def compact_policy() -> FormatPolicy:
    """Formatting policy with pretty-printing disabled."""
    return RenderOptions(pretty=False).to_policy()


@pytest.fixture
def navigation_tree() -> Element:
    """Pure tree with nested elements and attributes."""
    return NAVIGATION_TREE


@pytest.fixture
def async_page() -> Element:
    """Tree mixing sync and async components."""
    return build_async_page()
