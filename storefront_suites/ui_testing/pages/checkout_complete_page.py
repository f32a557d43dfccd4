"""
================================================================================
Checkout Complete Page Object
================================================================================

Order confirmation screen.

================================================================================
"""

from __future__ import annotations

import allure

from storefront_suites.ui_testing.framework.locators import ElementLocator
from storefront_suites.ui_testing.framework.page_base import PageInteractor

from .app_header import AppHeader


class CheckoutCompletePage:
    """Checkout: Complete!"""

    PAGE_TITLE_TEXT = "Checkout: Complete!"
    URL_FRAGMENT = "checkout-complete.html"
    CONFIRMATION_HEADER = "Thank you for your order!"

    COMPLETE_HEADER = ElementLocator.by_class("complete-header", "Confirmation header")
    COMPLETE_TEXT = ElementLocator.by_class("complete-text", "Confirmation text")
    PONY_EXPRESS_IMAGE = ElementLocator.by_class("pony_express", "Pony express image")
    BACK_HOME_BUTTON = ElementLocator.by_id("back-to-products", "Back home button")

    def __init__(self, ui: PageInteractor):
        self.ui = ui.for_owner(type(self).__name__)
        self.header = AppHeader(self.ui)

    def get_complete_header(self) -> str:
        return self.ui.read_text(self.COMPLETE_HEADER)

    def get_complete_text(self) -> str:
        return self.ui.read_text(self.COMPLETE_TEXT)

    def get_confirmation_message(self) -> str:
        """Header and body text joined by a space."""
        return f"{self.get_complete_header()} {self.get_complete_text()}"

    def is_pony_express_image_displayed(self) -> bool:
        return self.ui.is_displayed(self.PONY_EXPRESS_IMAGE)

    @allure.step("Back to products")
    def click_back_home(self) -> None:
        self.ui.click(self.BACK_HOME_BUTTON)

    def is_checkout_complete(self) -> bool:
        if not self.ui.is_displayed(self.COMPLETE_HEADER):
            return False
        return self.get_complete_header().lower() == self.CONFIRMATION_HEADER.lower()

    def get_page_title(self) -> str:
        return self.header.get_title_text()

    def wait_for_checkout_complete_page_to_load(self) -> None:
        self.ui.wait_for_load(self.COMPLETE_HEADER, self.BACK_HOME_BUTTON)

    def verify_checkout_complete_page_elements(self) -> bool:
        return self.ui.all_displayed(
            self.COMPLETE_HEADER,
            self.COMPLETE_TEXT,
            self.PONY_EXPRESS_IMAGE,
            self.BACK_HOME_BUTTON,
        )

    def is_checkout_complete_page_displayed(self) -> bool:
        return self.ui.url_contains(self.URL_FRAGMENT) and self.ui.is_displayed(self.COMPLETE_HEADER)
