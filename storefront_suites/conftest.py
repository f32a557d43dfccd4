"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the project markers (Gherkin tags become markers of the same name)
and tags collected items by suite directory.

================================================================================
"""

from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )
    config.addinivalue_line(
        "markers", "pending: Scenarios whose steps are not implemented yet"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser scenarios against the storefront"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the framework"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "login: Tests related to signing in"
    )
    config.addinivalue_line(
        "markers", "inventory: Tests related to the product listing"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart"
    )
    config.addinivalue_line(
        "markers", "checkout: Tests related to placing an order"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add the suite marker from the test's directory."""
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in Path(str(item.fspath)).parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Storefront E2E Automation",
        "=" * 60,
        "",
    ]
