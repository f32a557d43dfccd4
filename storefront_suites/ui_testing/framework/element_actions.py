# ================================================================================
# Element Actions Module
# ================================================================================
#
# Synchronization layer between page objects and the Playwright page.
#
# Every action first waits for the element to reach the state it needs
# (visible, clickable, attached) and only then acts, re-resolving the locator
# on each call. Every wait is bounded by an explicit per-call timeout that
# falls back to the configured default.
#
# Key Features:
#   - Visibility / clickability / presence / invisibility waits
#   - Custom condition polling and page-load readiness
#   - Status-returning probes for "is it on screen" queries
#   - Typed timeout errors carrying the locator and timeout
#   - Allure step integration
#
# This layer never takes screenshots; failure diagnostics belong to the
# page interaction layer above it.
#
# ================================================================================

import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, TypeVar

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import (
    ConditionTimeoutError,
    ElementNotClickableError,
    ElementNotPresentError,
    ElementNotVisibleError,
    UnexpectedInteractionError,
)
from .locators import ElementLocator


T = TypeVar("T")

SELECT_BY_LABEL = "label"
SELECT_BY_VALUE = "value"
SELECT_BY_INDEX = "index"


@dataclass
class WaitResult:
    """
    Outcome of a probe: whether the element reached the state in time.

    Attributes:
        found: True if the element reached the state before the timeout
        element: Resolved Playwright locator when found
        locator: The locator that was probed
        timeout: Timeout used, in seconds
    """
    found: bool
    element: Optional[Locator] = None
    locator: Optional[ElementLocator] = None
    timeout: float = 0.0

    def __bool__(self) -> bool:
        return self.found


class ElementActions:
    """
    Wait primitives and wait-then-act compositions over a Playwright page.

    All timeouts are in seconds.

    Example:
        actions = ElementActions(page, default_timeout=20)
        actions.type_text(LoginPage.USERNAME, "standard_user")
        actions.click(LoginPage.LOGIN_BUTTON)
        if actions.probe_visible(LoginPage.ERROR, timeout=2):
            ...
    """

    def __init__(
        self,
        page: Page,
        default_timeout: float = 20.0,
        page_load_timeout: float = 30.0,
        poll_interval: float = 0.25,
    ):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object
            default_timeout: Default explicit wait in seconds
            page_load_timeout: Timeout for document readiness in seconds
            poll_interval: Delay between custom-condition evaluations in seconds
        """
        self.page = page
        self.default_timeout = default_timeout
        self.page_load_timeout = page_load_timeout
        self.poll_interval = poll_interval

    # ------------------------------------------------------------------
    # Waits
    # ------------------------------------------------------------------

    def wait_visible(self, locator: ElementLocator, timeout: float = None) -> Locator:
        """
        Wait until the first match exists and is visible.

        Raises:
            ElementNotVisibleError: If the element is not visible in time
        """
        timeout = self._timeout(timeout)
        element = self._await_state(locator, "visible", timeout)
        if element is None:
            raise ElementNotVisibleError(locator, timeout)
        return element

    def wait_clickable(self, locator: ElementLocator, timeout: float = None) -> Locator:
        """
        Wait until the element is visible, enabled, stable and receives pointer events.

        Uses a Playwright trial click, which runs the actionability checks
        without clicking.

        Raises:
            ElementNotClickableError: If the element is not clickable in time
        """
        timeout = self._timeout(timeout)
        deadline = time.monotonic() + timeout

        element = self._await_state(locator, "visible", timeout)
        if element is None:
            raise ElementNotClickableError(locator, timeout)

        remaining = max(deadline - time.monotonic(), 0.0)
        try:
            element.click(trial=True, timeout=_ms(remaining))
        except PlaywrightTimeoutError as e:
            raise ElementNotClickableError(locator, timeout) from e
        return element

    def wait_present(self, locator: ElementLocator, timeout: float = None) -> Locator:
        """
        Wait until the element is attached to the DOM; visibility not required.

        Raises:
            ElementNotPresentError: If the element is not attached in time
        """
        timeout = self._timeout(timeout)
        element = self._await_state(locator, "attached", timeout)
        if element is None:
            raise ElementNotPresentError(locator, timeout)
        return element

    def wait_all_visible(self, locator: ElementLocator, timeout: float = None) -> List[Locator]:
        """
        Wait until at least one element matches and every current match is visible.

        Raises:
            ElementNotVisibleError: If the condition does not hold in time
        """
        timeout = self._timeout(timeout)

        def all_visible(page: Page) -> Optional[List[Locator]]:
            elements = locator.resolve(page).all()
            if elements and all(element.is_visible() for element in elements):
                return elements
            return None

        try:
            return self.wait_for_custom_condition(
                all_visible, timeout, description=f"all of {locator} visible"
            )
        except ConditionTimeoutError as e:
            raise ElementNotVisibleError(locator, timeout) from e

    def wait_invisible(self, locator: ElementLocator, timeout: float = None) -> bool:
        """
        Wait until no element matches or the match is hidden.

        Raises:
            ConditionTimeoutError: If the element is still visible after the timeout
        """
        timeout = self._timeout(timeout)
        if self._await_state(locator, "hidden", timeout) is None:
            raise ConditionTimeoutError(
                locator, timeout, message=f"{locator} still visible after {timeout:g}s"
            )
        return True

    def wait_for_custom_condition(
        self,
        condition: Callable[[Page], T],
        timeout: float = None,
        description: str = "custom condition",
    ) -> T:
        """
        Poll ``condition(page)`` until it returns a truthy value.

        Playwright errors raised by the condition count as "not yet".

        Args:
            condition: Callable receiving the page
            timeout: Timeout in seconds
            description: Name used in the timeout error

        Returns:
            The first truthy value returned by the condition

        Raises:
            ConditionTimeoutError: If the condition stays falsy until the timeout
        """
        timeout = self._timeout(timeout)
        deadline = time.monotonic() + timeout

        while True:
            try:
                result = condition(self.page)
            except PlaywrightError as e:
                logger.trace(f"Condition '{description}' raised {e.__class__.__name__}, retrying")
                result = None

            if result:
                return result

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ConditionTimeoutError(description, timeout)
            self.page.wait_for_timeout(_ms(min(self.poll_interval, remaining)))

    def wait_for_page_load(self, timeout: float = None) -> None:
        """Wait for ``document.readyState`` to reach ``complete``."""
        timeout = self.page_load_timeout if timeout is None else timeout
        self.wait_for_custom_condition(
            lambda page: page.evaluate("document.readyState") == "complete",
            timeout,
            description="document ready",
        )

    def wait_for_url_contains(self, fragment: str, timeout: float = None) -> bool:
        """Wait until the current URL contains ``fragment``."""
        return self.wait_for_custom_condition(
            lambda page: fragment in page.url,
            timeout,
            description=f"URL containing '{fragment}'",
        )

    def wait_for_title_contains(self, text: str, timeout: float = None) -> bool:
        """Wait until the document title contains ``text``."""
        return self.wait_for_custom_condition(
            lambda page: text in page.title(),
            timeout,
            description=f"title containing '{text}'",
        )

    def static_wait(self, seconds: float) -> None:
        """Unconditional pause. Only for states with no observable readiness signal."""
        logger.warning(f"Static wait for {seconds}s")
        self.page.wait_for_timeout(_ms(seconds))

    # ------------------------------------------------------------------
    # Probes (status-returning waits)
    # ------------------------------------------------------------------

    def probe_visible(self, locator: ElementLocator, timeout: float = None) -> WaitResult:
        """Like wait_visible, but reports absence as ``found=False``."""
        timeout = self._timeout(timeout)
        element = self._await_state(locator, "visible", timeout)
        return WaitResult(element is not None, element, locator, timeout)

    def probe_present(self, locator: ElementLocator, timeout: float = None) -> WaitResult:
        """Like wait_present, but reports absence as ``found=False``."""
        timeout = self._timeout(timeout)
        element = self._await_state(locator, "attached", timeout)
        return WaitResult(element is not None, element, locator, timeout)

    def count(self, locator: ElementLocator) -> int:
        """Current number of matches, without waiting."""
        return locator.resolve(self.page).count()

    # ------------------------------------------------------------------
    # Actions
    #
    # Each composition waits and then acts against one deadline taken on entry.
    # ------------------------------------------------------------------

    @allure.step("Click: {locator}")
    def click(self, locator: ElementLocator, timeout: float = None) -> None:
        deadline = self._deadline(timeout)
        element = self.wait_clickable(locator, timeout)
        logger.info(f"Clicking {locator}")
        self._perform("click", locator, lambda: element.click(timeout=_ms(_left(deadline))))

    @allure.step("Click via script: {locator}")
    def click_via_script(self, locator: ElementLocator, timeout: float = None) -> None:
        """
        Dispatch a click from inside the page.

        Bypasses hit-testing, for elements that are visible but covered by
        another layer.
        """
        element = self.wait_visible(locator, timeout)
        logger.info(f"Clicking {locator} via script")
        self._perform("script click", locator, lambda: element.evaluate("el => el.click()"))

    @allure.step("Type into: {locator}")
    def type_text(self, locator: ElementLocator, text: str, timeout: float = None) -> None:
        """Replace the element's content with ``text``."""
        deadline = self._deadline(timeout)
        element = self.wait_visible(locator, timeout)
        logger.info(f"Typing into {locator}")

        def clear_and_fill():
            element.clear(timeout=_ms(_left(deadline)))
            element.fill(text, timeout=_ms(_left(deadline)))

        self._perform("type", locator, clear_and_fill)

    def read_text(self, locator: ElementLocator, timeout: float = None) -> str:
        """Rendered text of the element, stripped."""
        deadline = self._deadline(timeout)
        element = self.wait_visible(locator, timeout)
        text = self._perform("read text", locator, lambda: element.inner_text(timeout=_ms(_left(deadline))))
        return text.strip()

    def read_attribute(self, locator: ElementLocator, name: str, timeout: float = None) -> Optional[str]:
        """
        Attribute value of the element.

        ``value`` is read from the live input state rather than the markup.
        """
        deadline = self._deadline(timeout)
        element = self.wait_visible(locator, timeout)
        if name == "value":
            return self._perform(
                "read attribute", locator, lambda: element.input_value(timeout=_ms(_left(deadline)))
            )
        return self._perform(
            "read attribute", locator, lambda: element.get_attribute(name, timeout=_ms(_left(deadline)))
        )

    def read_all_texts(self, locator: ElementLocator, timeout: float = None) -> List[str]:
        """Text of every match, after all of them are visible."""
        deadline = self._deadline(timeout)
        elements = self.wait_all_visible(locator, timeout)
        return [
            self._perform("read text", locator, lambda: element.inner_text(timeout=_ms(_left(deadline)))).strip()
            for element in elements
        ]

    @allure.step("Select option {option} ({by}): {locator}")
    def select_option(
        self,
        locator: ElementLocator,
        option: Any,
        by: str = SELECT_BY_LABEL,
        timeout: float = None,
    ) -> None:
        """
        Select an option from a <select>.

        Args:
            locator: Select element locator
            option: Visible label, value or 0-based index
            by: "label", "value" or "index"
            timeout: Timeout in seconds
        """
        if by == SELECT_BY_LABEL:
            kwargs = {"label": str(option)}
        elif by == SELECT_BY_VALUE:
            kwargs = {"value": str(option)}
        elif by == SELECT_BY_INDEX:
            kwargs = {"index": int(option)}
        else:
            raise ValueError(f"Unknown selection method: {by}")

        deadline = self._deadline(timeout)
        element = self.wait_visible(locator, timeout)
        logger.info(f"Selecting {option!r} by {by} in {locator}")
        self._perform(
            "select", locator, lambda: element.select_option(timeout=_ms(_left(deadline)), **kwargs)
        )

    def read_selected_label(self, locator: ElementLocator, timeout: float = None) -> str:
        """Visible label of the selected option of a <select>."""
        element = self.wait_visible(locator, timeout)
        return self._perform(
            "read selection",
            locator,
            lambda: element.evaluate(
                "el => el.selectedIndex >= 0 ? el.options[el.selectedIndex].text : ''"
            ),
        )

    @allure.step("Hover: {locator}")
    def hover(self, locator: ElementLocator, timeout: float = None) -> None:
        deadline = self._deadline(timeout)
        element = self.wait_visible(locator, timeout)
        self._perform("hover", locator, lambda: element.hover(timeout=_ms(_left(deadline))))

    @allure.step("Double click: {locator}")
    def double_click(self, locator: ElementLocator, timeout: float = None) -> None:
        deadline = self._deadline(timeout)
        element = self.wait_clickable(locator, timeout)
        self._perform("double click", locator, lambda: element.dblclick(timeout=_ms(_left(deadline))))

    @allure.step("Right click: {locator}")
    def right_click(self, locator: ElementLocator, timeout: float = None) -> None:
        deadline = self._deadline(timeout)
        element = self.wait_clickable(locator, timeout)
        self._perform(
            "right click", locator, lambda: element.click(button="right", timeout=_ms(_left(deadline)))
        )

    @allure.step("Drag {source} to {target}")
    def drag_and_drop(
        self,
        source: ElementLocator,
        target: ElementLocator,
        timeout: float = None,
    ) -> None:
        deadline = self._deadline(timeout)
        source_element = self.wait_visible(source, timeout)
        target_element = self.wait_visible(target, _left(deadline))
        self._perform(
            "drag and drop",
            source,
            lambda: source_element.drag_to(target_element, timeout=_ms(_left(deadline))),
        )

    def scroll_into_view(self, locator: ElementLocator, timeout: float = None) -> None:
        deadline = self._deadline(timeout)
        element = self.wait_present(locator, timeout)
        self._perform(
            "scroll", locator, lambda: element.scroll_into_view_if_needed(timeout=_ms(_left(deadline)))
        )

    def is_enabled(self, locator: ElementLocator, timeout: float = None) -> bool:
        """Enabled state of the element, after it is visible."""
        deadline = self._deadline(timeout)
        element = self.wait_visible(locator, timeout)
        return self._perform(
            "read enabled state", locator, lambda: element.is_enabled(timeout=_ms(_left(deadline)))
        )

    # ------------------------------------------------------------------
    # Page-level operations
    # ------------------------------------------------------------------

    def navigate(self, url: str) -> None:
        logger.info(f"Navigating to {url}")
        self._perform(
            "navigate",
            url,
            lambda: self.page.goto(url, wait_until="load", timeout=_ms(self.page_load_timeout)),
        )

    def refresh(self) -> None:
        self._perform("refresh", self.page.url, lambda: self.page.reload(timeout=_ms(self.page_load_timeout)))

    def back(self) -> None:
        self._perform("back", self.page.url, lambda: self.page.go_back(timeout=_ms(self.page_load_timeout)))

    def forward(self) -> None:
        self._perform("forward", self.page.url, lambda: self.page.go_forward(timeout=_ms(self.page_load_timeout)))

    @property
    def current_url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _timeout(self, timeout: Optional[float]) -> float:
        return self.default_timeout if timeout is None else timeout

    def _deadline(self, timeout: Optional[float]) -> float:
        return time.monotonic() + self._timeout(timeout)

    def _await_state(self, locator: ElementLocator, state: str, timeout: float) -> Optional[Locator]:
        element = locator.resolve(self.page).first
        try:
            element.wait_for(state=state, timeout=_ms(timeout))
        except PlaywrightTimeoutError:
            logger.debug(f"{locator} not {state} after {timeout:g}s")
            return None
        return element

    @staticmethod
    def _perform(action: str, target: Any, operation: Callable[[], T]) -> T:
        try:
            return operation()
        except PlaywrightError as e:
            detail = str(e).splitlines()[0] if str(e) else e.__class__.__name__
            raise UnexpectedInteractionError(action, target, detail) from e


def _ms(seconds: float) -> float:
    # Playwright treats 0 as "no timeout"
    return max(seconds * 1000, 1)


def _left(deadline: float) -> float:
    return max(deadline - time.monotonic(), 0.0)


__all__ = [
    "SELECT_BY_LABEL",
    "SELECT_BY_VALUE",
    "SELECT_BY_INDEX",
    "WaitResult",
    "ElementActions",
]
