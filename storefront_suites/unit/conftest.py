"""
Fixtures for the browser-free unit tests.

Timeouts are kept short so negative waits finish in well under a second.
"""

import pytest

from storefront_suites.ui_testing.framework.config_loader import Settings
from storefront_suites.ui_testing.framework.element_actions import ElementActions
from storefront_suites.ui_testing.framework.page_base import PageInteractor
from storefront_suites.unit.fakes import FakePage, FakeScreenshots


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def actions(fake_page: FakePage) -> ElementActions:
    return ElementActions(fake_page, default_timeout=1.0, page_load_timeout=1.0, poll_interval=0.02)


@pytest.fixture
def screenshots() -> FakeScreenshots:
    return FakeScreenshots()


@pytest.fixture
def interactor(actions: ElementActions, screenshots: FakeScreenshots) -> PageInteractor:
    return PageInteractor(
        actions,
        screenshots,
        base_url="https://www.saucedemo.com/",
        query_timeout=0.2,
    )


@pytest.fixture
def settings() -> Settings:
    """Built-in defaults, isolated from the process environment."""
    return Settings(environ={})
