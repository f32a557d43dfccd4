"""
Repository-level pytest configuration.

Registers the UI lifecycle hooks and every step module as plugins so that
all features share one step vocabulary, and exposes the repo root.
"""

from __future__ import annotations

from pathlib import Path

import pytest


pytest_plugins = [
    "pytester",
    "storefront_suites.ui_testing.hooks",
    "storefront_suites.ui_testing.steps.common_steps",
    "storefront_suites.ui_testing.steps.login_steps",
    "storefront_suites.ui_testing.steps.inventory_steps",
    "storefront_suites.ui_testing.steps.cart_steps",
    "storefront_suites.ui_testing.steps.checkout_steps",
]


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
