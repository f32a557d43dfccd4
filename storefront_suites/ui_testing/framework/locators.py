"""
================================================================================
Element Locators
================================================================================

Declarative, immutable descriptions of how to find elements on a page.

A locator holds no live state: it is turned into a Playwright Locator each
time an action runs, so it can be declared once as a class constant and
evaluated any number of times.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Optional

from playwright.sync_api import Locator, Page


BY_ID = "id"
BY_CLASS = "class"
BY_CSS = "css"
BY_XPATH = "xpath"
BY_DATA_TEST = "data-test"
BY_TEXT = "text"


@dataclass(frozen=True)
class ElementLocator:
    """
    Strategy + value pair, optionally narrowed to the Nth match (0-based).

    Usage:
        USERNAME = ElementLocator.by_id("user-name", "Username field")
        ITEM_BUTTONS = ElementLocator.by_css("button.btn_inventory")
        first_button = ITEM_BUTTONS.nth(0)
    """

    strategy: str
    value: str
    description: str = ""
    index: Optional[int] = None

    @classmethod
    def by_id(cls, value: str, description: str = "") -> "ElementLocator":
        return cls(BY_ID, value, description)

    @classmethod
    def by_class(cls, value: str, description: str = "") -> "ElementLocator":
        return cls(BY_CLASS, value, description)

    @classmethod
    def by_css(cls, value: str, description: str = "") -> "ElementLocator":
        return cls(BY_CSS, value, description)

    @classmethod
    def by_xpath(cls, value: str, description: str = "") -> "ElementLocator":
        return cls(BY_XPATH, value, description)

    @classmethod
    def by_data_test(cls, value: str, description: str = "") -> "ElementLocator":
        return cls(BY_DATA_TEST, value, description)

    @classmethod
    def by_text(cls, value: str, description: str = "") -> "ElementLocator":
        return cls(BY_TEXT, value, description)

    @property
    def selector(self) -> str:
        """Playwright selector string for this strategy."""
        if self.strategy == BY_ID:
            return f"id={self.value}"
        if self.strategy == BY_CLASS:
            return f".{self.value}"
        if self.strategy == BY_CSS:
            return self.value
        if self.strategy == BY_XPATH:
            return f"xpath={self.value}"
        if self.strategy == BY_DATA_TEST:
            return f"data-test={self.value}"
        if self.strategy == BY_TEXT:
            return f"text={json.dumps(self.value)}"
        raise ValueError(f"Unknown locator strategy: {self.strategy}")

    def nth(self, index: int, description: str = "") -> "ElementLocator":
        """Derive a locator addressing only the match at ``index``."""
        if index < 0:
            raise ValueError(f"Locator index must be >= 0, got {index}")
        return replace(
            self,
            index=index,
            description=description or f"{self.name} #{index}",
        )

    def resolve(self, page: Page) -> Locator:
        """Build a live Playwright Locator against ``page``."""
        locator = page.locator(self.selector)
        if self.index is not None:
            locator = locator.nth(self.index)
        return locator

    @property
    def name(self) -> str:
        return self.description or f"{self.strategy}={self.value}"

    def __str__(self) -> str:
        if self.index is None or self.description:
            return self.name
        return f"{self.name} #{self.index}"


def xpath_literal(text: str) -> str:
    """
    Quote ``text`` for use inside an XPath expression.

    Strings containing both quote styles are built with concat().
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = text.split('"')
    return "concat(" + ", '\"', ".join(f'"{part}"' for part in parts) + ")"


__all__ = [
    "ElementLocator",
    "xpath_literal",
]
