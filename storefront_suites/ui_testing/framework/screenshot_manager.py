"""
================================================================================
Screenshot Manager
================================================================================

Timestamped page captures for failure diagnostics.

Files are named ``<source>_<reason>_<YYYYmmdd_HHMMSS_fff>.png`` so they can be
matched against log lines and report entries, and every capture is also
attached to the running Allure test.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from playwright.sync_api import Page

from storefront_tools.report_tools.allure_utils import attach_screenshot


# Default output directory for screenshots
SCREENSHOT_DIR = Path("screenshots")

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def screenshot_name(source: str, reason: str, when: Optional[datetime] = None) -> str:
    """Build ``<source>_<reason>_<timestamp>.png`` with filesystem-safe parts."""
    timestamp = (when or datetime.now()).strftime("%Y%m%d_%H%M%S_%f")[:-3]
    return f"{_safe(source)}_{_safe(reason)}_{timestamp}.png"


def _safe(part: str) -> str:
    return _UNSAFE_CHARS.sub("_", part).strip("_") or "unnamed"


class ScreenshotManager:
    """
    Captures full-page screenshots into a configured directory.

    Usage:
        shots = ScreenshotManager(page, Path("screenshots"))
        shots.capture("LoginPage", "click_failure")
    """

    def __init__(
        self,
        page: Page,
        directory: Union[str, Path] = SCREENSHOT_DIR,
        enabled: bool = True,
    ):
        """
        Args:
            page: Playwright Page object
            directory: Output directory (created on first capture)
            enabled: When False, captures are skipped
        """
        self.page = page
        self.directory = Path(directory)
        self.enabled = enabled

    def capture(self, source: str, reason: str) -> Optional[Path]:
        """
        Save a screenshot and attach it to the report.

        Args:
            source: Page object class or scenario name
            reason: Short failure tag, e.g. ``click_failure``

        Returns:
            Path of the written file, or None when captures are disabled
        """
        if not self.enabled:
            logger.debug(f"Screenshots disabled, skipping {source}/{reason}")
            return None

        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / screenshot_name(source, reason)

        self.page.screenshot(path=str(path), full_page=True)
        attach_screenshot(path)
        logger.info(f"Screenshot saved: {path}")
        return path

    def capture_safely(self, source: str, reason: str) -> Optional[Path]:
        """
        Best-effort capture: a failure to capture is logged, never raised.
        """
        try:
            return self.capture(source, reason)
        except Exception as e:
            logger.warning(f"Failed to capture screenshot for {source}/{reason}: {e}")
            return None


__all__ = [
    "SCREENSHOT_DIR",
    "ScreenshotManager",
    "screenshot_name",
]
