"""
================================================================================
Cart Page Object
================================================================================

Cart review screen: line items with remove buttons, running total, and the
continue-shopping / checkout transitions.

================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

import allure
from loguru import logger

from storefront_suites.ui_testing.framework.locators import ElementLocator
from storefront_suites.ui_testing.framework.page_base import PageInteractor

from .app_header import AppHeader
from .inventory_page import product_card_xpath
from .money import parse_price, sum_prices


class CartPage:
    """Cart page object."""

    PAGE_TITLE_TEXT = "Your Cart"
    URL_FRAGMENT = "cart.html"

    CART_LIST = ElementLocator.by_class("cart_list", "Cart list")
    CART_ITEMS = ElementLocator.by_class("cart_item", "Cart items")
    ITEM_NAMES = ElementLocator.by_css(".cart_item .inventory_item_name", "Cart item names")
    ITEM_PRICES = ElementLocator.by_css(".cart_item .inventory_item_price", "Cart item prices")
    ITEM_DESCRIPTIONS = ElementLocator.by_css(".cart_item .inventory_item_desc", "Cart item descriptions")
    ITEM_QUANTITIES = ElementLocator.by_class("cart_quantity", "Cart item quantities")
    REMOVE_BUTTONS = ElementLocator.by_css(".cart_item button.cart_button", "Remove buttons")
    CONTINUE_SHOPPING_BUTTON = ElementLocator.by_id("continue-shopping", "Continue shopping button")
    CHECKOUT_BUTTON = ElementLocator.by_id("checkout", "Checkout button")

    def __init__(self, ui: PageInteractor):
        self.ui = ui.for_owner(type(self).__name__)
        self.header = AppHeader(self.ui)

    @staticmethod
    def _by_name(product_name: str, suffix: str, what: str) -> ElementLocator:
        return ElementLocator.by_xpath(
            f"{product_card_xpath(product_name, card_class='cart_item')}{suffix}",
            f"{what} of '{product_name}' in cart",
        )

    def _remove_button_for(self, product_name: str) -> ElementLocator:
        return self._by_name(product_name, "//button[contains(@class, 'cart_button')]", "Remove button")

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def get_page_title(self) -> str:
        return self.header.get_title_text()

    def get_cart_badge_count(self) -> int:
        return self.header.get_cart_badge_count()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    @allure.step("Continue shopping")
    def click_continue_shopping(self) -> None:
        self.ui.click(self.CONTINUE_SHOPPING_BUTTON)

    @allure.step("Proceed to checkout")
    def click_checkout(self) -> None:
        self.ui.click(self.CHECKOUT_BUTTON)

    def is_continue_shopping_button_displayed(self) -> bool:
        return self.ui.is_displayed(self.CONTINUE_SHOPPING_BUTTON)

    def is_checkout_button_displayed(self) -> bool:
        return self.ui.is_displayed(self.CHECKOUT_BUTTON)

    def is_checkout_button_enabled(self) -> bool:
        return self.ui.is_enabled(self.CHECKOUT_BUTTON)

    # ------------------------------------------------------------------
    # Line items
    # ------------------------------------------------------------------

    def get_cart_item_count(self) -> int:
        return self.ui.count_present(self.CART_ITEMS)

    def get_cart_item_names(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_NAMES)

    def get_cart_item_prices(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_PRICES)

    def get_cart_item_descriptions(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_DESCRIPTIONS)

    def get_cart_item_quantities(self) -> List[int]:
        return self.ui.read_all_values(self.ITEM_QUANTITIES, int)

    def get_cart_total_price(self) -> Decimal:
        """Sum of the listed line prices; 0 for an empty cart."""
        return sum_prices(self.ui.read_all_values(self.ITEM_PRICES, parse_price))

    def is_product_in_cart(self, product_name: str) -> bool:
        return self.ui.count_present(self._by_name(product_name, "", "Row")) > 0

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    @allure.step("Remove '{product_name}' from cart")
    def remove_product_by_name(self, product_name: str) -> None:
        logger.info(f"Removing from cart: {product_name}")
        self.ui.click(self._remove_button_for(product_name))

    @allure.step("Remove cart item #{index}")
    def remove_product_by_index(self, index: int) -> None:
        self.ui.click(self.REMOVE_BUTTONS.nth(index))

    @allure.step("Clear cart")
    def clear_cart(self) -> None:
        for _ in range(self.get_cart_item_count()):
            self.remove_product_by_index(0)

    def click_product_name_by_name(self, product_name: str) -> None:
        self.ui.click(self._by_name(product_name, "//div[contains(@class, 'inventory_item_name')]", "Name link"))

    def click_product_name_by_index(self, index: int) -> None:
        self.ui.click(self.ITEM_NAMES.nth(index))

    def get_remove_button_text_by_name(self, product_name: str) -> str:
        return self.ui.read_text(self._remove_button_for(product_name))

    def get_remove_button_text_by_index(self, index: int) -> str:
        return self.ui.read_text(self.REMOVE_BUTTONS.nth(index))

    def get_product_price_by_name(self, product_name: str) -> str:
        return self.ui.read_text(
            self._by_name(product_name, "//div[contains(@class, 'inventory_item_price')]", "Price")
        )

    def get_product_price_by_index(self, index: int) -> str:
        return self.ui.read_text(self.ITEM_PRICES.nth(index))

    def get_product_description_by_name(self, product_name: str) -> str:
        return self.ui.read_text(
            self._by_name(product_name, "//div[contains(@class, 'inventory_item_desc')]", "Description")
        )

    def get_product_description_by_index(self, index: int) -> str:
        return self.ui.read_text(self.ITEM_DESCRIPTIONS.nth(index))

    # ------------------------------------------------------------------
    # Page checks
    # ------------------------------------------------------------------

    def wait_for_cart_page_to_load(self) -> None:
        self.ui.wait_for_load(AppHeader.TITLE, self.CONTINUE_SHOPPING_BUTTON, self.CHECKOUT_BUTTON)

    def verify_cart_page_elements(self) -> bool:
        return self.ui.all_displayed(
            AppHeader.TITLE,
            AppHeader.CART_LINK,
            self.CONTINUE_SHOPPING_BUTTON,
            self.CHECKOUT_BUTTON,
        )

    def is_cart_page_displayed(self) -> bool:
        return self.ui.url_contains(self.URL_FRAGMENT) and self.is_continue_shopping_button_displayed()
