"""
================================================================================
App Header Component
================================================================================

Header shared by every screen after login: page title, cart icon with item
badge, and the burger menu.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import allure

from storefront_suites.ui_testing.framework.locators import ElementLocator
from storefront_suites.ui_testing.framework.page_base import PageInteractor


class AppHeader:
    """Header component composed into the post-login page objects."""

    TITLE = ElementLocator.by_class("title", "Page title")
    CART_LINK = ElementLocator.by_class("shopping_cart_link", "Cart icon")
    CART_BADGE = ElementLocator.by_class("shopping_cart_badge", "Cart badge")
    MENU_BUTTON = ElementLocator.by_id("react-burger-menu-btn", "Menu button")
    CLOSE_MENU_BUTTON = ElementLocator.by_id("react-burger-cross-btn", "Close menu button")
    LOGOUT_LINK = ElementLocator.by_id("logout_sidebar_link", "Logout link")
    RESET_APP_LINK = ElementLocator.by_id("reset_sidebar_link", "Reset app state link")

    def __init__(self, ui: PageInteractor):
        self.ui = ui

    def get_title_text(self) -> str:
        return self.ui.read_text(self.TITLE)

    def is_title_displayed(self) -> bool:
        return self.ui.is_displayed(self.TITLE)

    @allure.step("Open cart")
    def click_cart_icon(self) -> None:
        self.ui.click(self.CART_LINK)

    def is_cart_icon_displayed(self) -> bool:
        return self.ui.is_displayed(self.CART_LINK)

    def get_cart_badge_count(self) -> int:
        """
        Number shown on the cart badge.

        The badge is not rendered for an empty cart, which reads as 0.
        """
        if not self.ui.is_displayed(self.CART_BADGE):
            return 0
        return self.ui.read_value(self.CART_BADGE, int)

    def get_cart_badge_text(self) -> str:
        """Badge text, empty when the badge is absent."""
        if not self.ui.is_displayed(self.CART_BADGE):
            return ""
        return self.ui.read_text(self.CART_BADGE)

    def is_cart_badge_displayed(self) -> bool:
        return self.ui.is_displayed(self.CART_BADGE)

    def click_menu_button(self) -> None:
        self.ui.click(self.MENU_BUTTON)

    def is_menu_button_displayed(self) -> bool:
        return self.ui.is_displayed(self.MENU_BUTTON)

    @allure.step("Log out")
    def logout(self) -> None:
        self.click_menu_button()
        self.ui.click(self.LOGOUT_LINK)

    @allure.step("Reset app state")
    def reset_app_state(self) -> None:
        """Empty the cart through the side menu, then close the menu."""
        self.click_menu_button()
        self.ui.click(self.RESET_APP_LINK)
        self.ui.click(self.CLOSE_MENU_BUTTON)
