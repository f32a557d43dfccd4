"""
================================================================================
Inventory Page Object
================================================================================

Product listing shown after login: sorting, per-product cart buttons and
product details, addressable by product name or by position.

================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

import allure
from loguru import logger

from storefront_suites.ui_testing.framework.locators import ElementLocator, xpath_literal
from storefront_suites.ui_testing.framework.page_base import PageInteractor

from .app_header import AppHeader
from .money import parse_price


SORT_NAME_A_TO_Z = "Name (A to Z)"
SORT_NAME_Z_TO_A = "Name (Z to A)"
SORT_PRICE_LOW_TO_HIGH = "Price (low to high)"
SORT_PRICE_HIGH_TO_LOW = "Price (high to low)"

_CARD_XPATH = "//div[contains(concat(' ', normalize-space(@class), ' '), ' {card_class} ')]"
_NAME_DESCENDANT = "//div[contains(concat(' ', normalize-space(@class), ' '), ' inventory_item_name ')]"


def product_card_xpath(product_name: str, card_class: str = "inventory_item") -> str:
    """XPath of the product card (inventory or cart row) whose name equals ``product_name``."""
    card = _CARD_XPATH.format(card_class=card_class)
    return f"{card}[.{_NAME_DESCENDANT}[normalize-space(.)={xpath_literal(product_name)}]]"


class InventoryPage:
    """Inventory (products) page object."""

    PAGE_TITLE_TEXT = "Products"
    URL_FRAGMENT = "inventory.html"

    INVENTORY_CONTAINER = ElementLocator.by_class("inventory_list", "Inventory list")
    SORT_DROPDOWN = ElementLocator.by_class("product_sort_container", "Sort dropdown")
    INVENTORY_ITEMS = ElementLocator.by_class("inventory_item", "Inventory items")
    ITEM_NAMES = ElementLocator.by_class("inventory_item_name", "Product names")
    ITEM_PRICES = ElementLocator.by_class("inventory_item_price", "Product prices")
    ITEM_DESCRIPTIONS = ElementLocator.by_class("inventory_item_desc", "Product descriptions")
    ITEM_BUTTONS = ElementLocator.by_css("button.btn_inventory", "Product cart buttons")
    ITEM_IMAGES = ElementLocator.by_css("img.inventory_item_img", "Product images")

    def __init__(self, ui: PageInteractor):
        self.ui = ui.for_owner(type(self).__name__)
        self.header = AppHeader(self.ui)

    # ------------------------------------------------------------------
    # Locator builders
    # ------------------------------------------------------------------

    @staticmethod
    def _by_name(product_name: str, suffix: str, what: str) -> ElementLocator:
        return ElementLocator.by_xpath(
            f"{product_card_xpath(product_name)}{suffix}",
            f"{what} of '{product_name}'",
        )

    def _button_for(self, product_name: str) -> ElementLocator:
        return self._by_name(product_name, "//button[contains(@class, 'btn_inventory')]", "Cart button")

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def get_page_title(self) -> str:
        return self.header.get_title_text()

    def get_cart_badge_count(self) -> int:
        return self.header.get_cart_badge_count()

    def click_cart_icon(self) -> None:
        self.header.click_cart_icon()

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    @allure.step("Sort products by '{option}'")
    def sort_products(self, option: str) -> None:
        self.ui.select_by_label(self.SORT_DROPDOWN, option)

    def sort_by_name_a_to_z(self) -> None:
        self.sort_products(SORT_NAME_A_TO_Z)

    def sort_by_name_z_to_a(self) -> None:
        self.sort_products(SORT_NAME_Z_TO_A)

    def sort_by_price_low_to_high(self) -> None:
        self.sort_products(SORT_PRICE_LOW_TO_HIGH)

    def sort_by_price_high_to_low(self) -> None:
        self.sort_products(SORT_PRICE_HIGH_TO_LOW)

    def get_current_sort_option(self) -> str:
        return self.ui.read_selected_label(self.SORT_DROPDOWN)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def get_inventory_item_count(self) -> int:
        return self.ui.count_present(self.INVENTORY_ITEMS)

    def get_all_product_names(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_NAMES)

    def get_all_product_prices(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_PRICES)

    def get_all_product_price_values(self) -> List[Decimal]:
        return self.ui.read_all_values(self.ITEM_PRICES, parse_price)

    def get_all_product_descriptions(self) -> List[str]:
        return self.ui.read_all_texts(self.ITEM_DESCRIPTIONS)

    def get_cart_button_count(self) -> int:
        return self.ui.count_visible(self.ITEM_BUTTONS)

    # ------------------------------------------------------------------
    # By name
    # ------------------------------------------------------------------

    @allure.step("Add '{product_name}' to cart")
    def add_product_to_cart_by_name(self, product_name: str) -> None:
        logger.info(f"Adding product to cart: {product_name}")
        self.ui.click(self._button_for(product_name))

    @allure.step("Remove '{product_name}' from cart")
    def remove_product_from_cart_by_name(self, product_name: str) -> None:
        logger.info(f"Removing product from cart: {product_name}")
        self.ui.click(self._button_for(product_name))

    def click_product_name_by_name(self, product_name: str) -> None:
        self.ui.click(self._by_name(product_name, _NAME_DESCENDANT, "Name link"))

    def click_product_image_by_name(self, product_name: str) -> None:
        self.ui.click(self._by_name(product_name, "//img[contains(@class, 'inventory_item_img')]", "Image"))

    def get_product_price_by_name(self, product_name: str) -> str:
        return self.ui.read_text(
            self._by_name(product_name, "//div[contains(@class, 'inventory_item_price')]", "Price")
        )

    def get_product_description_by_name(self, product_name: str) -> str:
        return self.ui.read_text(
            self._by_name(product_name, "//div[contains(@class, 'inventory_item_desc')]", "Description")
        )

    def get_button_text_by_name(self, product_name: str) -> str:
        return self.ui.read_text(self._button_for(product_name))

    def is_product_in_cart_by_name(self, product_name: str) -> bool:
        return self.get_button_text_by_name(product_name).lower() == "remove"

    # ------------------------------------------------------------------
    # By index (0-based)
    # ------------------------------------------------------------------

    @allure.step("Add product #{index} to cart")
    def add_product_to_cart_by_index(self, index: int) -> None:
        logger.info(f"Adding product #{index} to cart")
        self.ui.click(self.ITEM_BUTTONS.nth(index))

    @allure.step("Remove product #{index} from cart")
    def remove_product_from_cart_by_index(self, index: int) -> None:
        self.ui.click(self.ITEM_BUTTONS.nth(index))

    def click_product_name_by_index(self, index: int) -> None:
        self.ui.click(self.ITEM_NAMES.nth(index))

    def click_product_image_by_index(self, index: int) -> None:
        self.ui.click(self.ITEM_IMAGES.nth(index))

    def get_product_name_by_index(self, index: int) -> str:
        return self.ui.read_text(self.ITEM_NAMES.nth(index))

    def get_product_price_by_index(self, index: int) -> str:
        return self.ui.read_text(self.ITEM_PRICES.nth(index))

    def get_product_description_by_index(self, index: int) -> str:
        return self.ui.read_text(self.ITEM_DESCRIPTIONS.nth(index))

    def get_button_text_by_index(self, index: int) -> str:
        return self.ui.read_text(self.ITEM_BUTTONS.nth(index))

    def is_product_in_cart_by_index(self, index: int) -> bool:
        return self.get_button_text_by_index(index).lower() == "remove"

    # ------------------------------------------------------------------
    # Page checks
    # ------------------------------------------------------------------

    def wait_for_inventory_page_to_load(self) -> None:
        self.ui.wait_for_load(AppHeader.TITLE, self.INVENTORY_CONTAINER)

    def verify_inventory_page_elements(self) -> bool:
        return self.ui.all_displayed(
            AppHeader.TITLE,
            AppHeader.CART_LINK,
            AppHeader.MENU_BUTTON,
            self.SORT_DROPDOWN,
            self.INVENTORY_CONTAINER,
        )

    def is_inventory_page_displayed(self) -> bool:
        return (
            self.ui.url_contains(self.URL_FRAGMENT)
            and self.ui.is_displayed(self.INVENTORY_CONTAINER)
            and self.get_inventory_item_count() > 0
        )

    def get_page_document_title(self) -> str:
        return self.ui.title()
