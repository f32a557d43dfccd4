from typing import Any, Dict, List

import pytest
from playwright.sync_api import Error as PlaywrightError

from storefront_suites.ui_testing.framework.browser_manager import (
    BrowserManager,
    handle_browser_prompt,
    resolve_browser_kind,
)
from storefront_suites.ui_testing.framework.config_loader import Settings
from storefront_suites.ui_testing.framework.errors import SessionCreationError
from storefront_suites.unit.fakes import FakePage


class FakeContext:
    def __init__(self):
        self.default_timeout = None
        self.navigation_timeout = None
        self.closed = False

    def set_default_timeout(self, timeout):
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout):
        self.navigation_timeout = timeout

    def new_page(self):
        return FakePage()

    def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self, options: Dict[str, Any]):
        self.options = options
        self.context_options: Dict[str, Any] = {}
        self.context = FakeContext()
        self.closed = False

    def new_context(self, **options):
        self.context_options = options
        return self.context

    def close(self):
        if self.closed:
            raise PlaywrightError("Browser has been closed")
        self.closed = True


class FakeBrowserType:
    def __init__(self, name: str, fail: bool = False):
        self.name = name
        self.fail = fail
        self.launched: List[FakeBrowser] = []

    def launch(self, **options):
        if self.fail:
            raise PlaywrightError(f"Executable doesn't exist for {self.name}")
        browser = FakeBrowser(options)
        self.launched.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, failing: str = ""):
        self.chromium = FakeBrowserType("chromium", failing == "chromium")
        self.firefox = FakeBrowserType("firefox", failing == "firefox")
        self.webkit = FakeBrowserType("webkit", failing == "webkit")
        self.stopped = False

    def start(self):
        return self

    def stop(self):
        self.stopped = True


class FakeDialog:
    def __init__(self, message: str):
        self.message = message
        self.type = "alert"
        self.outcome = None

    def accept(self):
        self.outcome = "accepted"

    def dismiss(self):
        self.outcome = "dismissed"


def make_manager(playwright: FakePlaywright, **browser) -> BrowserManager:
    settings = Settings(
        {
            "browser": {"name": "chrome", "headless": True, **browser},
            "timeouts": {"implicit_wait": 10, "page_load": 30},
        },
        environ={},
    )
    return BrowserManager(settings, playwright_factory=lambda: playwright)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("chrome", ("chromium", None)),
        ("Firefox", ("firefox", None)),
        ("edge", ("chromium", "msedge")),
        ("webkit", ("webkit", None)),
        ("netscape", ("chromium", None)),
        (None, ("chromium", None)),
    ],
)
def test_resolve_browser_kind(name, expected):
    assert resolve_browser_kind(name) == expected


def test_create_session_applies_timeouts_and_options():
    playwright = FakePlaywright()
    manager = make_manager(playwright)

    session = manager.create_session()
    browser = playwright.chromium.launched[0]

    assert browser.options["headless"] is True
    assert "--disable-save-password-bubble" in browser.options["args"]
    assert browser.context_options["viewport"] == {"width": 1920, "height": 1080}
    assert session.context.default_timeout == 10000
    assert session.context.navigation_timeout == 30000
    assert session.kind == "chrome"


def test_unknown_browser_falls_back_to_chromium():
    playwright = FakePlaywright()
    make_manager(playwright).create_session(browser_kind="netscape")

    assert len(playwright.chromium.launched) == 1


def test_firefox_gets_preferences():
    playwright = FakePlaywright()
    make_manager(playwright, name="firefox").create_session(headless=False)

    options = playwright.firefox.launched[0].options
    assert options["headless"] is False
    assert options["firefox_user_prefs"]["signon.rememberSignons"] is False


def test_launch_failure_raises_session_creation_error():
    manager = make_manager(FakePlaywright(failing="webkit"))

    with pytest.raises(SessionCreationError):
        manager.create_session(browser_kind="webkit")


def test_close_is_idempotent_and_never_raises():
    playwright = FakePlaywright()
    session = make_manager(playwright).create_session()

    session.close()
    session.close()

    assert session.is_closed
    assert session.context.closed
    assert playwright.chromium.launched[0].closed


def test_stop_stops_driver():
    playwright = FakePlaywright()
    with make_manager(playwright) as manager:
        manager.create_session().close()

    assert playwright.stopped


def test_dialog_handler_accepts_credential_prompts():
    save_password = FakeDialog("Save password for saucedemo.com?")
    other = FakeDialog("Leave site?")

    handle_browser_prompt(save_password)
    handle_browser_prompt(other)

    assert save_password.outcome == "accepted"
    assert other.outcome == "dismissed"


def test_install_dialog_handler_registers_on_page():
    session = make_manager(FakePlaywright()).create_session()
    session.install_dialog_handler()

    assert session.page.handlers["dialog"] is handle_browser_prompt
