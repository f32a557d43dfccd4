"""
================================================================================
UI Scenario Lifecycle Hooks
================================================================================

Pytest plugin providing the scenario lifecycle for the BDD suites.

Key Features:
- Command line overrides for browser kind and headed mode
- Session-scoped settings and browser factory (one driver per xdist worker)
- Per-scenario context: fresh browser, base URL opened, dialogs handled
- Failure diagnostics at teardown (screenshot, URL, title), then close
- Steps raising NotYetImplemented are reported as pending (skipped)

================================================================================
"""

from typing import Generator

import allure
import pytest
from loguru import logger

from storefront_suites.ui_testing.framework.browser_manager import BrowserManager
from storefront_suites.ui_testing.framework.config_loader import Settings, load_settings
from storefront_suites.ui_testing.framework.errors import NotYetImplemented
from storefront_suites.ui_testing.scenario_context import ScenarioContext
from storefront_tools.common.log_setup import init_logger
from storefront_tools.report_tools.allure_utils import attach_page_state


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_addoption(parser):
    """Register storefront command line options."""
    group = parser.getgroup("storefront", "Storefront UI automation")
    group.addoption(
        "--browser",
        action="store",
        default=None,
        help="Browser kind: chrome, chromium, edge, firefox, webkit (default: browser.name)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run browsers with a visible window",
    )


def pytest_configure(config):
    """Configure loguru from settings once per process."""
    settings = load_settings()
    init_logger(
        level=settings.get_str("logging.level", "INFO"),
        log_file=settings.get_str("logging.file") or None,
    )


# ================================================================================
# Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Process-wide read-only settings."""
    return load_settings()


@pytest.fixture(scope="session")
def browser_manager(settings: Settings) -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser factory.

    The Playwright driver starts on the first scenario and stops when the
    worker finishes; every scenario still gets its own browser.
    """
    manager = BrowserManager(settings)
    yield manager
    manager.stop()


@pytest.fixture
def scenario_context(request, settings: Settings, browser_manager: BrowserManager) -> Generator[ScenarioContext, None, None]:
    """
    Function-scoped scenario context.

    Setup opens a new browser at the application base URL. Teardown records
    diagnostics when the scenario failed and always closes the browser.
    """
    context = ScenarioContext(
        settings,
        browser_manager,
        name=_scenario_name(request),
        browser_kind=request.config.getoption("--browser"),
        headless=False if request.config.getoption("--headed") else None,
    )
    try:
        with allure.step("Open storefront"):
            context.start()
        yield context
    finally:
        _after_scenario(request, context)


def _scenario_name(request) -> str:
    scenario = getattr(getattr(request.node, "function", None), "__scenario__", None)
    return getattr(scenario, "name", None) or request.node.name


def _after_scenario(request, context: ScenarioContext) -> None:
    try:
        if _scenario_failed(request.node) and context.has_session:
            _record_failure(context)
    finally:
        context.close()


def _scenario_failed(item) -> bool:
    for when in ("setup", "call"):
        report = getattr(item, f"rep_{when}", None)
        if report is not None and report.failed:
            return True
    return False


def _record_failure(context: ScenarioContext) -> None:
    """Best-effort: log URL and title and take a screenshot. Never raises."""
    try:
        url = context.interactor.current_url
        title = context.interactor.title()
        logger.error(f"Scenario '{context.name}' failed at {url} (title: {title!r})")
        attach_page_state(url, title)
    except Exception as e:
        logger.warning(f"Could not read page state after failure: {e}")

    context.screenshots.capture_safely(context.name, "scenario_failure")


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_makereport(item, call):
    """
    Keep each phase report on the item and turn pending steps into skips.

    ``trylast`` makes this the innermost wrapper, so report plugins see the
    pending outcome.
    """
    outcome = yield
    report = outcome.get_result()

    if call.excinfo is not None and call.excinfo.errisinstance(NotYetImplemented):
        report.outcome = "skipped"
        report.longrepr = (str(item.path), item.location[1] or 0, str(call.excinfo.value))

    setattr(item, f"rep_{report.when}", report)


def pytest_bdd_before_scenario(request, feature, scenario):
    logger.info(f"Scenario started: {feature.name} / {scenario.name}")


def pytest_bdd_step_error(request, feature, scenario, step, step_func, step_func_args, exception):
    if isinstance(exception, NotYetImplemented):
        logger.warning(f"Pending step in '{scenario.name}': {step.keyword} {step.name}")
        return
    logger.error(
        f"Step failed in '{feature.name}' / '{scenario.name}': "
        f"{step.keyword} {step.name} -> {exception.__class__.__name__}: {exception}"
    )
