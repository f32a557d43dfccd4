"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based building blocks for the storefront page objects.

Components:
    - config_loader: YAML settings with environment overrides
    - locators: Immutable element locators
    - element_actions: Synchronization layer (waits and wait-then-act actions)
    - screenshot_manager: Timestamped failure screenshots
    - page_base: PageInteractor, the failure policy page objects compose
    - browser_manager: Browser session factory
    - errors: Exception hierarchy

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, BrowserSession
from .config_loader import ConfigurationError, Settings, load_settings
from .element_actions import ElementActions, WaitResult
from .errors import (
    ConditionTimeoutError,
    ElementNotClickableError,
    ElementNotPresentError,
    ElementNotVisibleError,
    NotYetImplemented,
    SessionCreationError,
    UIAutomationError,
    UnexpectedInteractionError,
)
from .locators import ElementLocator
from .page_base import PageInteractor
from .screenshot_manager import ScreenshotManager

__all__ = [
    "BrowserManager",
    "BrowserSession",
    "ConfigurationError",
    "Settings",
    "load_settings",
    "ElementActions",
    "WaitResult",
    "ConditionTimeoutError",
    "ElementNotClickableError",
    "ElementNotPresentError",
    "ElementNotVisibleError",
    "NotYetImplemented",
    "SessionCreationError",
    "UIAutomationError",
    "UnexpectedInteractionError",
    "ElementLocator",
    "PageInteractor",
    "ScreenshotManager",
]
