"""
In-memory stand-ins for the Playwright page and locator.

Only the calls the framework makes are modelled. Elements are registered per
selector string, may appear after a delay, and time out with the real
Playwright ``TimeoutError`` so the wait layer is exercised unchanged.
"""

import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class FakeElement:
    def __init__(
        self,
        text: str = "",
        value: str = "",
        visible: bool = True,
        enabled: bool = True,
        appears_after: float = 0.0,
        attributes: Optional[Dict[str, str]] = None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.text = text
        self.value = value
        self.visible = visible
        self.enabled = enabled
        self.attributes = attributes or {}
        self.on_click = on_click
        self.selected = ""
        self.clicks = 0
        self.button = None
        self.dropped_on = None
        self.performed: List[Tuple[str, Optional[float]]] = []
        self.shown_at = time.monotonic() + appears_after

    def attached(self) -> bool:
        return time.monotonic() >= self.shown_at

    def shown(self) -> bool:
        return self.visible and self.attached()


class FakePage:
    def __init__(self, url: str = "https://www.saucedemo.com/", title: str = "Swag Labs"):
        self.url = url
        self._title = title
        self.ready_state = "complete"
        self.elements: Dict[str, List[FakeElement]] = {}
        self.visited: List[str] = []
        self.screenshots: List[str] = []
        self.screenshot_error: Optional[Exception] = None
        self.handlers: Dict[str, Callable] = {}

    def add(self, selector: str, *elements: FakeElement) -> FakeElement:
        """Register ``elements`` under ``selector`` and return the first."""
        elements = elements or (FakeElement(),)
        self.elements.setdefault(selector, []).extend(elements)
        return elements[0]

    def remove(self, selector: str, element: FakeElement) -> None:
        self.elements[selector].remove(element)

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self, selector)

    def title(self) -> str:
        return self._title

    def wait_for_timeout(self, timeout: float) -> None:
        time.sleep(timeout / 1000)

    def evaluate(self, expression: str):
        if expression == "document.readyState":
            return self.ready_state
        raise PlaywrightError(f"Unsupported expression: {expression}")

    def goto(self, url: str, wait_until: str = "load", timeout: float = None):
        self.url = url
        self.visited.append(url)

    def screenshot(self, path: str, full_page: bool = False) -> bytes:
        if self.screenshot_error is not None:
            raise self.screenshot_error
        Path(path).write_bytes(b"\x89PNG")
        self.screenshots.append(path)
        return b"\x89PNG"

    def on(self, event: str, handler: Callable) -> None:
        self.handlers[event] = handler


class FakeLocator:
    def __init__(self, page: FakePage, selector: str, index: Optional[int] = None):
        self.page = page
        self.selector = selector
        self.index = index

    # Resolution

    def _matches(self) -> List[FakeElement]:
        return [element for element in self.page.elements.get(self.selector, []) if element.attached()]

    def _target(self) -> Optional[FakeElement]:
        matches = self._matches()
        position = self.index or 0
        return matches[position] if position < len(matches) else None

    def _require(self) -> FakeElement:
        element = self._target()
        if element is None:
            raise PlaywrightError(f"Element {self.selector} is not attached to the DOM")
        return element

    @property
    def first(self) -> "FakeLocator":
        return self if self.index is not None else self.nth(0)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self.page, self.selector, index)

    def all(self) -> List["FakeLocator"]:
        return [self.nth(i) for i in range(self.count())]

    def count(self) -> int:
        return len(self._matches())

    # Waiting

    def wait_for(self, state: str = "visible", timeout: float = 30000) -> None:
        deadline = time.monotonic() + timeout / 1000
        while not self._in_state(state):
            if time.monotonic() >= deadline:
                raise PlaywrightTimeoutError(f"Timeout {timeout:.0f}ms exceeded waiting for {self.selector}")
            time.sleep(0.01)

    def _in_state(self, state: str) -> bool:
        element = self._target()
        if state == "attached":
            return element is not None
        if state == "hidden":
            return element is None or not element.shown()
        return element is not None and element.shown()

    # Queries

    def is_visible(self) -> bool:
        element = self._target()
        return element is not None and element.shown()

    def is_enabled(self, timeout: float = None) -> bool:
        return self._require().enabled

    def inner_text(self, timeout: float = None) -> str:
        return self._require().text

    def input_value(self, timeout: float = None) -> str:
        return self._require().value

    def get_attribute(self, name: str, timeout: float = None) -> Optional[str]:
        return self._require().attributes.get(name)

    # Actions; each one records its name and timeout on the element

    def _act(self, action: str, timeout: Optional[float]) -> FakeElement:
        element = self._require()
        element.performed.append((action, timeout))
        return element

    def click(self, trial: bool = False, timeout: float = None, button: str = "left") -> None:
        element = self._require()
        if not element.enabled:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded: element is not enabled")
        if trial:
            return
        self._act("click", timeout)
        element.clicks += 1
        element.button = button
        if element.on_click is not None:
            element.on_click()

    def dblclick(self, timeout: float = None) -> None:
        self._act("dblclick", timeout).clicks += 2

    def hover(self, timeout: float = None) -> None:
        self._act("hover", timeout)

    def clear(self, timeout: float = None) -> None:
        self._act("clear", timeout).value = ""

    def fill(self, text: str, timeout: float = None) -> None:
        element = self._act("fill", timeout)
        if not element.enabled:
            raise PlaywrightError("Element is not editable")
        element.value = text

    def select_option(
        self, label: str = None, value: str = None, index: int = None, timeout: float = None
    ) -> List[str]:
        element = self._act("select_option", timeout)
        element.selected = label if label is not None else str(value if value is not None else index)
        return [element.selected]

    def drag_to(self, target: "FakeLocator", timeout: float = None) -> None:
        self._act("drag_to", timeout).dropped_on = target.selector

    def scroll_into_view_if_needed(self, timeout: float = None) -> None:
        self._act("scroll_into_view_if_needed", timeout)

    def evaluate(self, expression: str):
        element = self._require()
        if "selectedIndex" in expression:
            return element.selected
        if "click" in expression:
            element.performed.append(("script click", None))
            element.clicks += 1
            return None
        raise PlaywrightError(f"Unsupported expression: {expression}")


class FakeScreenshots:
    """Records capture requests instead of writing files."""

    def __init__(self):
        self.captured: List[tuple] = []

    def capture_safely(self, source: str, reason: str) -> Path:
        self.captured.append((source, reason))
        return Path(f"{source}_{reason}.png")
