"""
================================================================================
UI Automation Errors
================================================================================

Exception hierarchy raised by the synchronization layer, the browser factory
and the scenario layer.

    UIAutomationError
    ├── ConditionTimeoutError
    │   ├── ElementNotVisibleError
    │   ├── ElementNotClickableError
    │   └── ElementNotPresentError
    ├── SessionCreationError
    ├── UnexpectedInteractionError
    └── NotYetImplemented

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

from storefront_tools.report_tools.allure_utils import PENDING_PREFIX


class UIAutomationError(Exception):
    """Base class for every error raised by the UI framework."""
    pass


class ConditionTimeoutError(UIAutomationError):
    """
    A wait condition did not hold before its timeout expired.

    Attributes:
        locator: Locator (or condition description) that was waited on
        timeout: Timeout in seconds
    """

    condition = "satisfy the condition"

    def __init__(self, locator: Any, timeout: float, message: Optional[str] = None):
        self.locator = locator
        self.timeout = timeout
        super().__init__(
            message or f"{locator} did not {self.condition} within {timeout:g}s"
        )


class ElementNotVisibleError(ConditionTimeoutError):
    """Element did not become visible in time."""

    condition = "become visible"


class ElementNotClickableError(ConditionTimeoutError):
    """Element did not become visible, enabled and hit-testable in time."""

    condition = "become clickable"


class ElementNotPresentError(ConditionTimeoutError):
    """Element was not attached to the DOM in time."""

    condition = "become present in the DOM"


class SessionCreationError(UIAutomationError):
    """The browser could not be launched with the requested configuration."""
    pass


class UnexpectedInteractionError(UIAutomationError):
    """
    An element was ready but the action on it failed.

    The underlying Playwright error is chained as ``__cause__``.
    """

    def __init__(self, action: str, locator: Any, detail: str = ""):
        self.action = action
        self.locator = locator
        message = f"{action} failed on {locator}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NotYetImplemented(UIAutomationError):
    """A scenario step whose behavior has not been built; reported as pending."""

    def __init__(self, step: str = ""):
        self.step = step
        super().__init__(f"{PENDING_PREFIX} {step or 'step not implemented yet'}")


__all__ = [
    "UIAutomationError",
    "ConditionTimeoutError",
    "ElementNotVisibleError",
    "ElementNotClickableError",
    "ElementNotPresentError",
    "SessionCreationError",
    "UnexpectedInteractionError",
    "NotYetImplemented",
    "PENDING_PREFIX",
]
