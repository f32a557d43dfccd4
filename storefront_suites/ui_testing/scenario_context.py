"""
================================================================================
Scenario Context
================================================================================

Everything one scenario shares between its steps: the browser session, the
page objects built on it, and scratch values carried from step to step.

One context per scenario. The session is created on first use (or eagerly
by the setup hook) and closed by the teardown hook; page objects are built
lazily against that session.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from storefront_suites.ui_testing.framework.browser_manager import BrowserManager, BrowserSession
from storefront_suites.ui_testing.framework.config_loader import Settings
from storefront_suites.ui_testing.framework.element_actions import ElementActions
from storefront_suites.ui_testing.framework.page_base import PageInteractor
from storefront_suites.ui_testing.framework.screenshot_manager import ScreenshotManager
from storefront_suites.ui_testing.pages import (
    AppHeader,
    CartPage,
    CheckoutCompletePage,
    CheckoutInfoPage,
    CheckoutOverviewPage,
    InventoryPage,
    LoginPage,
)


class ScenarioContext:
    """
    Per-scenario aggregate of session, page objects and step data.

    Usage:
        context = ScenarioContext(settings, browser_manager, name="Valid login")
        context.start()
        context.login_page.login_as_standard_user()
        context.close()
    """

    def __init__(
        self,
        settings: Settings,
        browser_manager: BrowserManager,
        name: str = "scenario",
        browser_kind: Optional[str] = None,
        headless: Optional[bool] = None,
    ):
        """
        Args:
            settings: Loaded settings
            browser_manager: Factory used to create the session
            name: Scenario name, used for failure screenshots
            browser_kind: Override of ``browser.name``
            headless: Override of ``browser.headless``
        """
        self.settings = settings
        self.browser_manager = browser_manager
        self.name = name
        self.browser_kind = browser_kind
        self.headless = headless
        self.data: Dict[str, Any] = {}

        self._session: Optional[BrowserSession] = None
        self._interactor: Optional[PageInteractor] = None
        self._screenshots: Optional[ScreenshotManager] = None
        self._pages: Dict[type, Any] = {}

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @property
    def has_session(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> BrowserSession:
        if self._session is None:
            self._session = self.browser_manager.create_session(self.browser_kind, self.headless)
            self._session.install_dialog_handler()
        return self._session

    def start(self) -> None:
        """Create the session and open the application base URL."""
        self.interactor.open()
        logger.info(f"Scenario '{self.name}' started at {self.interactor.current_url}")

    @property
    def screenshots(self) -> ScreenshotManager:
        if self._screenshots is None:
            self._screenshots = ScreenshotManager(
                self.session.page,
                Path(self.settings.get_str("screenshots.path", "screenshots/")),
                enabled=self.settings.get_bool("screenshots.on_failure", True),
            )
        return self._screenshots

    @property
    def interactor(self) -> PageInteractor:
        if self._interactor is None:
            actions = ElementActions(
                self.session.page,
                default_timeout=self.settings.explicit_wait,
                page_load_timeout=self.settings.page_load_timeout,
            )
            self._interactor = PageInteractor(
                actions,
                self.screenshots,
                base_url=self.settings.base_url,
                query_timeout=self.settings.query_wait,
            )
        return self._interactor

    def close(self) -> None:
        """Release the session; safe to call more than once."""
        if self._session is not None:
            self._session.close()
        self._session = None
        self._interactor = None
        self._screenshots = None
        self._pages.clear()

    # ------------------------------------------------------------------
    # Page objects
    # ------------------------------------------------------------------

    def _page(self, page_class: type, *args: Any) -> Any:
        if page_class not in self._pages:
            self._pages[page_class] = page_class(self.interactor, *args)
        return self._pages[page_class]

    @property
    def header(self) -> AppHeader:
        """Header component of whichever post-login screen is showing."""
        if AppHeader not in self._pages:
            self._pages[AppHeader] = AppHeader(self.interactor.for_owner("AppHeader"))
        return self._pages[AppHeader]

    @property
    def login_page(self) -> LoginPage:
        return self._page(LoginPage, self.settings)

    @property
    def inventory_page(self) -> InventoryPage:
        return self._page(InventoryPage)

    @property
    def cart_page(self) -> CartPage:
        return self._page(CartPage)

    @property
    def checkout_info_page(self) -> CheckoutInfoPage:
        return self._page(CheckoutInfoPage)

    @property
    def checkout_overview_page(self) -> CheckoutOverviewPage:
        return self._page(CheckoutOverviewPage)

    @property
    def checkout_complete_page(self) -> CheckoutCompletePage:
        return self._page(CheckoutCompletePage)


__all__ = [
    "ScenarioContext",
]
