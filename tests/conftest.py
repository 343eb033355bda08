"""
Pytest configuration for the burnout dashboard.

Provides fixtures for:
- Settings with test-specific overrides
- A seeded, session-wide dataset snapshot
"""

from __future__ import annotations

import pytest

from burnout_dashboard.config import Settings, get_settings
from burnout_dashboard.dataset import DashboardData, generate_dataset

TEST_SEED = 1234


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        app_env="test",
        log_level="DEBUG",
        dataset_seed=TEST_SEED,
        table_page_size=10,
    )


@pytest.fixture(scope="session")
def dataset() -> DashboardData:
    """
    One seeded snapshot shared by every test; it is immutable.
    """
    return generate_dataset(seed=TEST_SEED)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """
    Drop the cached Settings so env overrides in one test don't leak.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
