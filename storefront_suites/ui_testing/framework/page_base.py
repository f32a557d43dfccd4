"""
================================================================================
Page Interactor
================================================================================

The capability every page object holds to talk to the browser.

Page objects compose a PageInteractor instead of inheriting from a base page.
The interactor adds the page-level failure policy on top of ElementActions:

    - Mutating operations and value getters: on failure, log, take a
      best-effort screenshot named after the page and a reason tag, then
      re-raise the original error unchanged.
    - Queries (is_displayed, is_enabled, count_present): absence is a normal
      answer and comes back as False / 0 through the status-returning probes.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, TypeVar

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError

from .element_actions import (
    SELECT_BY_INDEX,
    SELECT_BY_LABEL,
    SELECT_BY_VALUE,
    ElementActions,
    WaitResult,
)
from .locators import ElementLocator
from .screenshot_manager import ScreenshotManager


T = TypeVar("T")


class PageInteractor:
    """
    Guarded access to the synchronization layer for one page object.

    Usage:
        class LoginPage:
            LOGIN_BUTTON = ElementLocator.by_id("login-button", "Login button")

            def __init__(self, ui: PageInteractor):
                self.ui = ui.for_owner(type(self).__name__)

            def click_login(self):
                self.ui.click(self.LOGIN_BUTTON)
    """

    def __init__(
        self,
        actions: ElementActions,
        screenshots: ScreenshotManager,
        base_url: str = "",
        query_timeout: float = 2.0,
        owner: str = "Page",
    ):
        """
        Args:
            actions: Synchronization layer bound to the session page
            screenshots: Screenshot manager bound to the same page
            base_url: Application base URL used by open()
            query_timeout: Timeout in seconds for display/enabled queries
            owner: Name used in logs and screenshot file names
        """
        self.actions = actions
        self.screenshots = screenshots
        self.base_url = base_url
        self.query_timeout = query_timeout
        self.owner = owner

    def for_owner(self, owner: str) -> "PageInteractor":
        """Copy of this interactor that reports failures under ``owner``."""
        clone = copy.copy(self)
        clone.owner = owner
        return clone

    # ------------------------------------------------------------------
    # Failure policy
    # ------------------------------------------------------------------

    @contextmanager
    def guarded(self, reason: str, target: Any = "") -> Iterator[None]:
        """
        Log, screenshot and re-raise any failure raised inside the block.

        Args:
            reason: Screenshot tag, e.g. ``click_failure``
            target: Locator or URL named in the log line
        """
        try:
            yield
        except Exception as e:
            logger.error(f"{self.owner}: {reason.replace('_', ' ')} on {target}: {e}")
            self.screenshots.capture_safely(self.owner, reason)
            raise

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------

    def click(self, locator: ElementLocator, timeout: float = None) -> None:
        with self.guarded("click_failure", locator):
            self.actions.click(locator, timeout)

    def click_via_script(self, locator: ElementLocator, timeout: float = None) -> None:
        with self.guarded("javascript_click_failure", locator):
            self.actions.click_via_script(locator, timeout)

    def type_text(self, locator: ElementLocator, text: str, timeout: float = None) -> None:
        with self.guarded("type_failure", locator):
            self.actions.type_text(locator, text, timeout)

    def select_by_label(self, locator: ElementLocator, label: str, timeout: float = None) -> None:
        with self.guarded("select_failure", locator):
            self.actions.select_option(locator, label, SELECT_BY_LABEL, timeout)

    def select_by_value(self, locator: ElementLocator, value: str, timeout: float = None) -> None:
        with self.guarded("select_failure", locator):
            self.actions.select_option(locator, value, SELECT_BY_VALUE, timeout)

    def select_by_index(self, locator: ElementLocator, index: int, timeout: float = None) -> None:
        with self.guarded("select_failure", locator):
            self.actions.select_option(locator, index, SELECT_BY_INDEX, timeout)

    def hover(self, locator: ElementLocator, timeout: float = None) -> None:
        with self.guarded("hover_failure", locator):
            self.actions.hover(locator, timeout)

    def double_click(self, locator: ElementLocator, timeout: float = None) -> None:
        with self.guarded("double_click_failure", locator):
            self.actions.double_click(locator, timeout)

    def right_click(self, locator: ElementLocator, timeout: float = None) -> None:
        with self.guarded("right_click_failure", locator):
            self.actions.right_click(locator, timeout)

    def drag_and_drop(self, source: ElementLocator, target: ElementLocator, timeout: float = None) -> None:
        with self.guarded("drag_drop_failure", source):
            self.actions.drag_and_drop(source, target, timeout)

    def scroll_into_view(self, locator: ElementLocator, timeout: float = None) -> None:
        with self.guarded("scroll_failure", locator):
            self.actions.scroll_into_view(locator, timeout)

    # ------------------------------------------------------------------
    # Value getters
    # ------------------------------------------------------------------

    def read_text(self, locator: ElementLocator, timeout: float = None) -> str:
        with self.guarded("get_text_failure", locator):
            return self.actions.read_text(locator, timeout)

    def read_attribute(self, locator: ElementLocator, name: str, timeout: float = None) -> Optional[str]:
        with self.guarded("get_attribute_failure", locator):
            return self.actions.read_attribute(locator, name, timeout)

    def read_all_texts(self, locator: ElementLocator, timeout: float = None) -> List[str]:
        """
        Texts of every match.

        Returns an empty list when nothing matches; once matches exist, a
        failure to read them propagates.
        """
        if self.actions.count(locator) == 0:
            return []
        with self.guarded("find_elements_failure", locator):
            return self.actions.read_all_texts(locator, timeout)

    def read_value(self, locator: ElementLocator, convert: Callable[[str], T], timeout: float = None) -> T:
        """
        Text of the element passed through ``convert``, e.g. ``int`` or ``parse_price``.

        A conversion error is reported like a failed read.
        """
        with self.guarded("get_text_failure", locator):
            return convert(self.actions.read_text(locator, timeout))

    def read_all_values(
        self, locator: ElementLocator, convert: Callable[[str], T], timeout: float = None
    ) -> List[T]:
        """Converted texts of every match; empty when nothing matches."""
        if self.actions.count(locator) == 0:
            return []
        with self.guarded("find_elements_failure", locator):
            return [convert(text) for text in self.actions.read_all_texts(locator, timeout)]

    def read_selected_label(self, locator: ElementLocator, timeout: float = None) -> str:
        with self.guarded("get_text_failure", locator):
            return self.actions.read_selected_label(locator, timeout)

    def count_visible(self, locator: ElementLocator, timeout: float = None) -> int:
        """Number of matches once all of them are visible; 0 when nothing matches."""
        if self.actions.count(locator) == 0:
            return 0
        with self.guarded("find_elements_failure", locator):
            return len(self.actions.wait_all_visible(locator, timeout))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def probe(self, locator: ElementLocator, timeout: float = None) -> WaitResult:
        """Visibility probe using the query timeout by default."""
        return self.actions.probe_visible(locator, self._query_timeout(timeout))

    def is_displayed(self, locator: ElementLocator, timeout: float = None) -> bool:
        """True if the element becomes visible within the query timeout. Never raises for absence."""
        return self.probe(locator, timeout).found

    def is_enabled(self, locator: ElementLocator, timeout: float = None) -> bool:
        """True if the element is visible and enabled. Absent elements are not enabled."""
        result = self.probe(locator, timeout)
        if not result.found:
            return False
        try:
            return result.element.is_enabled()
        except PlaywrightError as e:
            logger.debug(f"{self.owner}: {locator} detached while reading enabled state: {e}")
            return False

    def count_present(self, locator: ElementLocator) -> int:
        """Number of matches right now, 0 when absent."""
        return self.actions.count(locator)

    def all_displayed(self, *locators: ElementLocator) -> bool:
        """Logical AND of is_displayed over ``locators``."""
        return all(self.is_displayed(locator) for locator in locators)

    # ------------------------------------------------------------------
    # Page level
    # ------------------------------------------------------------------

    def open(self, path: str = "") -> None:
        """Navigate to ``base_url`` joined with ``path``."""
        url = self.base_url.rstrip("/") + "/" + path.lstrip("/") if path else self.base_url
        with allure.step(f"Open {url}"):
            with self.guarded("navigation_failure", url):
                self.actions.navigate(url)

    def navigate(self, url: str) -> None:
        with self.guarded("navigation_failure", url):
            self.actions.navigate(url)

    def refresh(self) -> None:
        with self.guarded("navigation_failure", "refresh"):
            self.actions.refresh()

    def back(self) -> None:
        with self.guarded("navigation_failure", "back"):
            self.actions.back()

    def forward(self) -> None:
        with self.guarded("navigation_failure", "forward"):
            self.actions.forward()

    def wait_for_load(self, *key_locators: ElementLocator, timeout: float = None) -> None:
        """
        Wait for document readiness, then for each key element to be visible.

        Single-page navigations do not always fire a load event, so the key
        elements are the real signal.
        """
        with self.guarded("page_load_failure", ", ".join(str(locator) for locator in key_locators)):
            self.actions.wait_for_page_load()
            for locator in key_locators:
                self.actions.wait_visible(locator, timeout)
        logger.debug(f"{self.owner} loaded")

    def wait_for_url_contains(self, fragment: str, timeout: float = None) -> bool:
        with self.guarded("page_load_failure", fragment):
            return self.actions.wait_for_url_contains(fragment, timeout)

    def url_contains(self, fragment: str) -> bool:
        return fragment in self.actions.current_url

    @property
    def current_url(self) -> str:
        return self.actions.current_url

    def title(self) -> str:
        return self.actions.title()

    def _query_timeout(self, timeout: Optional[float]) -> float:
        return self.query_timeout if timeout is None else timeout


__all__ = [
    "PageInteractor",
]
