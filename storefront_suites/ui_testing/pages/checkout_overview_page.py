"""
================================================================================
Checkout Overview Page Object
================================================================================

Second checkout step: order lines with subtotal, tax and total.

================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

import allure

from storefront_suites.ui_testing.framework.locators import ElementLocator
from storefront_suites.ui_testing.framework.page_base import PageInteractor

from .app_header import AppHeader
from .money import parse_price, sum_prices


class CheckoutOverviewPage:
    """Checkout: Overview."""

    PAGE_TITLE_TEXT = "Checkout: Overview"
    URL_FRAGMENT = "checkout-step-two.html"

    CART_ITEMS = ElementLocator.by_class("cart_item", "Order lines")
    ITEM_NAMES = ElementLocator.by_css(".cart_item .inventory_item_name", "Order line names")
    ITEM_PRICES = ElementLocator.by_css(".cart_item .inventory_item_price", "Order line prices")
    SUBTOTAL_LABEL = ElementLocator.by_class("summary_subtotal_label", "Item total")
    TAX_LABEL = ElementLocator.by_class("summary_tax_label", "Tax")
    TOTAL_LABEL = ElementLocator.by_class("summary_total_label", "Total")
    FINISH_BUTTON = ElementLocator.by_id("finish", "Finish button")
    CANCEL_BUTTON = ElementLocator.by_id("cancel", "Cancel button")

    def __init__(self, ui: PageInteractor):
        self.ui = ui.for_owner(type(self).__name__)
        self.header = AppHeader(self.ui)

    def get_item_count(self) -> int:
        return self.ui.count_present(self.CART_ITEMS)

    def get_item_names(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_NAMES)

    def get_item_prices(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_PRICES)

    def get_items_price_sum(self) -> Decimal:
        return sum_prices(self.ui.read_all_values(self.ITEM_PRICES, parse_price))

    def get_subtotal_text(self) -> str:
        return self.ui.read_text(self.SUBTOTAL_LABEL)

    def get_tax_text(self) -> str:
        return self.ui.read_text(self.TAX_LABEL)

    def get_total_text(self) -> str:
        return self.ui.read_text(self.TOTAL_LABEL)

    def get_subtotal(self) -> Decimal:
        return self.ui.read_value(self.SUBTOTAL_LABEL, parse_price)

    def get_tax(self) -> Decimal:
        return self.ui.read_value(self.TAX_LABEL, parse_price)

    def get_total(self) -> Decimal:
        return self.ui.read_value(self.TOTAL_LABEL, parse_price)

    @allure.step("Finish order")
    def click_finish(self) -> None:
        self.ui.click(self.FINISH_BUTTON)

    @allure.step("Cancel order")
    def click_cancel(self) -> None:
        self.ui.click(self.CANCEL_BUTTON)

    def get_page_title(self) -> str:
        return self.header.get_title_text()

    def wait_for_checkout_overview_page_to_load(self) -> None:
        self.ui.wait_for_load(self.SUBTOTAL_LABEL, self.FINISH_BUTTON)

    def verify_checkout_overview_page_elements(self) -> bool:
        return self.ui.all_displayed(
            self.SUBTOTAL_LABEL,
            self.TAX_LABEL,
            self.TOTAL_LABEL,
            self.FINISH_BUTTON,
            self.CANCEL_BUTTON,
        )

    def is_checkout_overview_page_displayed(self) -> bool:
        return self.ui.url_contains(self.URL_FRAGMENT) and self.ui.is_displayed(self.FINISH_BUTTON)
