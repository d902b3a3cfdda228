"""Shared pytest fixtures and configuration.

This file is automatically loaded by pytest and provides fixtures
accessible to all tests.
"""

import os

import pytest
from hypothesis import settings, HealthCheck

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# Define profiles for different environments
settings.register_profile(
    "ci",
    max_examples=50,  # Faster for CI
    deadline=None,  # No deadlines for slow tests
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "dev",
    max_examples=100,
    deadline=500,  # 500ms deadline for local tests
)

settings.register_profile(
    "thorough",
    max_examples=1000,  # Comprehensive for nightly runs
    deadline=None,
)

# Load profile based on environment variable
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


# =============================================================================
# Theme Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def theme():
    """The default (Tokyo Night) theme."""
    from glimpse.ui.theme import default_theme

    return default_theme()


@pytest.fixture
def palette_dict(theme):
    """Default palette as a plain dict, for writing custom theme files."""
    from dataclasses import asdict

    return asdict(theme)


# =============================================================================
# Environment Isolation
# =============================================================================

@pytest.fixture(autouse=True)
def clear_glimpse_env(monkeypatch):
    """Keep GLIMPSE_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("GLIMPSE_"):
            monkeypatch.delenv(key)
    yield
