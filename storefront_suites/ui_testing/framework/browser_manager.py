"""
================================================================================
Browser Manager
================================================================================

Browser session factory for UI automation.

Features:
    - One Playwright driver per worker process
    - A fresh browser + context + page per scenario (BrowserSession)
    - Browser kind chosen by configuration (chrome, edge, firefox, webkit)
    - Fixed stability options (no sandbox, fixed viewport, no password bubbles)
    - Native dialog handling for credential / confirmation prompts

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Dialog,
    Page,
    Playwright,
    sync_playwright,
)
from playwright.sync_api import Error as PlaywrightError

from .config_loader import Settings
from .errors import SessionCreationError


DEFAULT_BROWSER = "chrome"

# Configured browser kind -> (Playwright engine, release channel)
BROWSER_KINDS: Dict[str, Tuple[str, Optional[str]]] = {
    "chrome": ("chromium", None),
    "chromium": ("chromium", None),
    "edge": ("chromium", "msedge"),
    "firefox": ("firefox", None),
    "webkit": ("webkit", None),
}

# Prompt texts that are accepted; any other dialog is dismissed
ACCEPTED_DIALOG_KEYWORDS = ("password", "ok", "continue")


def resolve_browser_kind(name: Optional[str]) -> Tuple[str, Optional[str]]:
    """
    Map a configured browser name to a Playwright engine and channel.

    Unknown or empty names fall back to chrome with a warning.
    """
    key = (name or "").strip().lower()
    if key not in BROWSER_KINDS:
        logger.warning(f"Unsupported browser '{name}', falling back to {DEFAULT_BROWSER}")
        key = DEFAULT_BROWSER
    return BROWSER_KINDS[key]


def handle_browser_prompt(dialog: Dialog) -> None:
    """
    Accept credential-manager style prompts, dismiss everything else.

    Registered on every session page so an unexpected native dialog never
    blocks the next interaction.
    """
    message = dialog.message or ""
    lowered = message.lower()
    try:
        if any(keyword in lowered for keyword in ACCEPTED_DIALOG_KEYWORDS):
            logger.info(f"Accepting browser {dialog.type} dialog: {message}")
            dialog.accept()
        else:
            logger.info(f"Dismissing browser {dialog.type} dialog: {message}")
            dialog.dismiss()
    except PlaywrightError as e:
        logger.warning(f"Dialog already handled or page closed: {e}")


class BrowserSession:
    """
    One live browser bound to one scenario.

    The caller owns the session and must close it; close() is idempotent and
    never raises.

    Usage:
        with manager.create_session() as session:
            session.page.goto("https://www.saucedemo.com/")
    """

    def __init__(self, browser: Browser, context: BrowserContext, page: Page, kind: str):
        self.browser = browser
        self.context = context
        self.page = page
        self.kind = kind
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def install_dialog_handler(self, handler: Callable[[Dialog], None] = handle_browser_prompt) -> None:
        """Register the native dialog handler on the session page."""
        self.page.on("dialog", handler)

    def close(self) -> None:
        """Close context and browser."""
        if self._closed:
            return
        self._closed = True

        for resource in (self.context, self.browser):
            try:
                resource.close()
            except PlaywrightError as e:
                logger.warning(f"Error while closing {self.kind} session: {e}")

        logger.debug(f"Browser session closed: {self.kind}")

    def __enter__(self) -> "BrowserSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class BrowserManager:
    """
    Creates isolated browser sessions.

    The Playwright driver is started once and shared by every session the
    manager creates; each session gets its own browser process.

    Usage:
        with BrowserManager(settings) as manager:
            session = manager.create_session()
            try:
                ...
            finally:
                session.close()
    """

    # Chromium switches for stable unattended runs
    CHROMIUM_ARGS = [
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
        "--window-size=1920,1080",
        "--disable-extensions",
        "--disable-plugins",
        "--disable-save-password-bubble",
        "--disable-password-manager-reauthentication",
    ]

    # Firefox preferences with the same intent
    FIREFOX_PREFS: Dict[str, Any] = {
        "signon.rememberSignons": False,
        "extensions.enabledScopes": 0,
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        settings: Settings,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ):
        """
        Initialize browser manager.

        Args:
            settings: Loaded settings (browser, timeouts)
            playwright_factory: Callable returning a Playwright context manager
        """
        self.settings = settings
        self._playwright_factory = playwright_factory
        self._playwright: Optional[Playwright] = None

    def __enter__(self) -> "BrowserManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def start(self) -> None:
        """Start the Playwright driver if it is not running."""
        if self._playwright is None:
            self._playwright = self._playwright_factory().start()
            logger.debug("Playwright driver started")

    def stop(self) -> None:
        """Stop the Playwright driver."""
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
            logger.debug("Playwright driver stopped")

    def create_session(
        self,
        browser_kind: Optional[str] = None,
        headless: Optional[bool] = None,
    ) -> BrowserSession:
        """
        Launch a new browser with a fresh context and page.

        Args:
            browser_kind: chrome, chromium, edge, firefox or webkit
                (defaults to ``browser.name``)
            headless: Headless flag (defaults to ``browser.headless``)

        Returns:
            New BrowserSession owned by the caller

        Raises:
            SessionCreationError: If the browser cannot be launched
        """
        self.start()

        kind = browser_kind or self.settings.get_str("browser.name", DEFAULT_BROWSER)
        headless = self.settings.get_bool("browser.headless", False) if headless is None else headless
        engine, channel = resolve_browser_kind(kind)

        launch_options = self._launch_options(engine, channel, headless)
        launcher = getattr(self._playwright, engine)

        try:
            browser = launcher.launch(**launch_options)
        except PlaywrightError as e:
            raise SessionCreationError(
                f"Could not launch {kind} ({engine}, channel={channel}): {e}"
            ) from e

        try:
            context = browser.new_context(**self.DEFAULT_CONTEXT_OPTIONS)
            context.set_default_timeout(self.settings.get_float("timeouts.implicit_wait", 10) * 1000)
            context.set_default_navigation_timeout(self.settings.page_load_timeout * 1000)
            page = context.new_page()
        except PlaywrightError as e:
            browser.close()
            raise SessionCreationError(f"Could not open a page in {kind}: {e}") from e

        logger.info(f"Browser started: {kind} (engine={engine}, headless={headless})")
        return BrowserSession(browser, context, page, kind)

    def _launch_options(self, engine: str, channel: Optional[str], headless: bool) -> Dict[str, Any]:
        options: Dict[str, Any] = {"headless": headless}
        if engine == "chromium":
            options["args"] = list(self.CHROMIUM_ARGS)
            if channel:
                options["channel"] = channel
        elif engine == "firefox":
            options["firefox_user_prefs"] = dict(self.FIREFOX_PREFS)
        return options


__all__ = [
    "BROWSER_KINDS",
    "BrowserManager",
    "BrowserSession",
    "handle_browser_prompt",
    "resolve_browser_kind",
]
