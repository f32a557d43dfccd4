"""
================================================================================
Login Page Object
================================================================================

Entry screen of the storefront: username / password form, error banner and
the named test accounts from configuration.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from storefront_suites.ui_testing.framework.config_loader import Settings
from storefront_suites.ui_testing.framework.locators import ElementLocator
from storefront_suites.ui_testing.framework.page_base import PageInteractor


class LoginPage:
    """Login page object."""

    USERNAME_INPUT = ElementLocator.by_id("user-name", "Username field")
    PASSWORD_INPUT = ElementLocator.by_id("password", "Password field")
    LOGIN_BUTTON = ElementLocator.by_id("login-button", "Login button")
    LOGIN_LOGO = ElementLocator.by_class("login_logo", "Login logo")
    BOT_IMAGE = ElementLocator.by_class("bot_column", "Bot image")
    ERROR_MESSAGE = ElementLocator.by_css("h3[data-test='error']", "Login error")
    ERROR_CLOSE_BUTTON = ElementLocator.by_class("error-button", "Close error button")
    USERNAME_LABEL = ElementLocator.by_css("label[for='user-name']", "Username label")
    PASSWORD_LABEL = ElementLocator.by_css("label[for='password']", "Password label")

    def __init__(self, ui: PageInteractor, settings: Settings):
        self.ui = ui.for_owner(type(self).__name__)
        self.settings = settings

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        self.ui.open()
        self.wait_for_login_page_to_load()
        return self

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------

    def enter_username(self, username: str) -> None:
        self.ui.type_text(self.USERNAME_INPUT, username)

    def enter_password(self, password: str) -> None:
        self.ui.type_text(self.PASSWORD_INPUT, password)

    def click_login_button(self) -> None:
        self.ui.click(self.LOGIN_BUTTON)

    @allure.step("Login as {username}")
    def login(self, username: str, password: str) -> None:
        logger.info(f"Logging in as {username}")
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()

    def login_as(self, user_key: str, password: Optional[str] = None) -> None:
        """Log in with a named account from ``credentials.*``."""
        self.login(self.settings.credential(user_key), password or self.settings.password)

    def login_as_standard_user(self) -> None:
        self.login_as("standard_user")

    def login_as_locked_out_user(self) -> None:
        self.login_as("locked_out_user")

    def login_as_problem_user(self) -> None:
        self.login_as("problem_user")

    def login_as_performance_glitch_user(self) -> None:
        self.login_as("performance_glitch_user")

    def clear_username(self) -> None:
        self.ui.type_text(self.USERNAME_INPUT, "")

    def clear_password(self) -> None:
        self.ui.type_text(self.PASSWORD_INPUT, "")

    def clear_login_fields(self) -> None:
        self.clear_username()
        self.clear_password()

    def get_username_value(self) -> str:
        return self.ui.read_attribute(self.USERNAME_INPUT, "value") or ""

    def get_password_value(self) -> str:
        return self.ui.read_attribute(self.PASSWORD_INPUT, "value") or ""

    def get_username_placeholder(self) -> str:
        return self.ui.read_attribute(self.USERNAME_INPUT, "placeholder") or ""

    def get_password_placeholder(self) -> str:
        return self.ui.read_attribute(self.PASSWORD_INPUT, "placeholder") or ""

    # ------------------------------------------------------------------
    # Error banner
    # ------------------------------------------------------------------

    def get_error_message(self) -> str:
        return self.ui.read_text(self.ERROR_MESSAGE)

    def is_error_message_displayed(self) -> bool:
        return self.ui.is_displayed(self.ERROR_MESSAGE)

    def close_error_message(self) -> None:
        self.ui.click(self.ERROR_CLOSE_BUTTON)

    # ------------------------------------------------------------------
    # Element checks
    # ------------------------------------------------------------------

    def is_username_field_displayed(self) -> bool:
        return self.ui.is_displayed(self.USERNAME_INPUT)

    def is_password_field_displayed(self) -> bool:
        return self.ui.is_displayed(self.PASSWORD_INPUT)

    def is_login_button_displayed(self) -> bool:
        return self.ui.is_displayed(self.LOGIN_BUTTON)

    def is_login_button_enabled(self) -> bool:
        return self.ui.is_enabled(self.LOGIN_BUTTON)

    def get_login_button_text(self) -> str:
        # The button is an <input type="submit">; its caption is the value
        return self.ui.read_attribute(self.LOGIN_BUTTON, "value") or ""

    def is_login_logo_displayed(self) -> bool:
        return self.ui.is_displayed(self.LOGIN_LOGO)

    def is_bot_image_displayed(self) -> bool:
        return self.ui.is_displayed(self.BOT_IMAGE)

    def is_username_label_displayed(self) -> bool:
        return self.ui.is_displayed(self.USERNAME_LABEL)

    def is_password_label_displayed(self) -> bool:
        return self.ui.is_displayed(self.PASSWORD_LABEL)

    def wait_for_login_page_to_load(self) -> None:
        self.ui.wait_for_load(self.USERNAME_INPUT, self.PASSWORD_INPUT, self.LOGIN_BUTTON)

    def verify_login_page_elements(self) -> bool:
        return self.ui.all_displayed(
            self.USERNAME_INPUT,
            self.PASSWORD_INPUT,
            self.LOGIN_BUTTON,
            self.LOGIN_LOGO,
        )

    def is_login_page_displayed(self) -> bool:
        return self.is_login_button_displayed() and self.is_username_field_displayed()
