"""
================================================================================
Checkout Information Page Object
================================================================================

First checkout step: buyer name and postal code form.

================================================================================
"""

from __future__ import annotations

import allure

from storefront_suites.ui_testing.framework.locators import ElementLocator
from storefront_suites.ui_testing.framework.page_base import PageInteractor

from .app_header import AppHeader


class CheckoutInfoPage:
    """Checkout: Your Information."""

    PAGE_TITLE_TEXT = "Checkout: Your Information"
    URL_FRAGMENT = "checkout-step-one.html"

    FIRST_NAME_INPUT = ElementLocator.by_id("first-name", "First name field")
    LAST_NAME_INPUT = ElementLocator.by_id("last-name", "Last name field")
    POSTAL_CODE_INPUT = ElementLocator.by_id("postal-code", "Postal code field")
    CONTINUE_BUTTON = ElementLocator.by_id("continue", "Continue button")
    CANCEL_BUTTON = ElementLocator.by_id("cancel", "Cancel button")
    ERROR_MESSAGE = ElementLocator.by_css("h3[data-test='error']", "Checkout error")

    def __init__(self, ui: PageInteractor):
        self.ui = ui.for_owner(type(self).__name__)
        self.header = AppHeader(self.ui)

    def enter_first_name(self, first_name: str) -> None:
        self.ui.type_text(self.FIRST_NAME_INPUT, first_name)

    def enter_last_name(self, last_name: str) -> None:
        self.ui.type_text(self.LAST_NAME_INPUT, last_name)

    def enter_postal_code(self, postal_code: str) -> None:
        self.ui.type_text(self.POSTAL_CODE_INPUT, postal_code)

    def get_first_name(self) -> str:
        return self.ui.read_attribute(self.FIRST_NAME_INPUT, "value") or ""

    def get_last_name(self) -> str:
        return self.ui.read_attribute(self.LAST_NAME_INPUT, "value") or ""

    def get_postal_code(self) -> str:
        return self.ui.read_attribute(self.POSTAL_CODE_INPUT, "value") or ""

    @allure.step("Fill checkout information")
    def fill_checkout_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.enter_first_name(first_name)
        self.enter_last_name(last_name)
        self.enter_postal_code(postal_code)

    @allure.step("Continue to overview")
    def click_continue(self) -> None:
        self.ui.click(self.CONTINUE_BUTTON)

    @allure.step("Cancel checkout")
    def click_cancel(self) -> None:
        self.ui.click(self.CANCEL_BUTTON)

    def get_error_message(self) -> str:
        return self.ui.read_text(self.ERROR_MESSAGE)

    def is_error_message_displayed(self) -> bool:
        return self.ui.is_displayed(self.ERROR_MESSAGE)

    def is_first_name_field_displayed(self) -> bool:
        return self.ui.is_displayed(self.FIRST_NAME_INPUT)

    def is_last_name_field_displayed(self) -> bool:
        return self.ui.is_displayed(self.LAST_NAME_INPUT)

    def is_postal_code_field_displayed(self) -> bool:
        return self.ui.is_displayed(self.POSTAL_CODE_INPUT)

    def get_page_title(self) -> str:
        return self.header.get_title_text()

    def wait_for_checkout_info_page_to_load(self) -> None:
        self.ui.wait_for_load(self.FIRST_NAME_INPUT, self.CONTINUE_BUTTON)

    def verify_checkout_info_page_elements(self) -> bool:
        return self.ui.all_displayed(
            self.FIRST_NAME_INPUT,
            self.LAST_NAME_INPUT,
            self.POSTAL_CODE_INPUT,
            self.CONTINUE_BUTTON,
            self.CANCEL_BUTTON,
        )

    def is_checkout_info_page_displayed(self) -> bool:
        return self.ui.url_contains(self.URL_FRAGMENT) and self.is_first_name_field_displayed()
