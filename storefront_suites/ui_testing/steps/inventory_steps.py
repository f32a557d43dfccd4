"""
================================================================================
Inventory Step Definitions
================================================================================

Products added from the inventory are recorded in
``scenario_context.data["added_products"]`` as ``{"name", "price"}`` dicts so
later cart and checkout steps can compare against them.
"""

from decimal import Decimal
from typing import Dict, List

from pytest_bdd import given, parsers, then, when

from storefront_suites.ui_testing.pages.inventory_page import (
    SORT_NAME_A_TO_Z,
    SORT_NAME_Z_TO_A,
    SORT_PRICE_HIGH_TO_LOW,
    SORT_PRICE_LOW_TO_HIGH,
)
from storefront_suites.ui_testing.pages.money import parse_price
from storefront_suites.ui_testing.scenario_context import ScenarioContext


ORDINALS = {"first": 0, "second": 1, "third": 2, "fourth": 3, "fifth": 4, "sixth": 5}


def added_products(scenario_context: ScenarioContext) -> List[Dict]:
    return scenario_context.data.setdefault("added_products", [])


@given("I am on the inventory page")
def on_inventory_page(scenario_context: ScenarioContext):
    inventory = scenario_context.inventory_page
    inventory.wait_for_inventory_page_to_load()
    assert inventory.is_inventory_page_displayed(), "Inventory page is not displayed"


@when(parsers.re(r"I add the (?P<ordinal>first|second|third|fourth|fifth|sixth) product to cart"))
def add_product_by_position(scenario_context: ScenarioContext, ordinal: str):
    inventory = scenario_context.inventory_page
    index = ORDINALS[ordinal]
    added_products(scenario_context).append({
        "name": inventory.get_product_name_by_index(index),
        "price": parse_price(inventory.get_product_price_by_index(index)),
    })
    inventory.add_product_to_cart_by_index(index)


@given(parsers.parse('I have added "{product}" to the cart'))
@when(parsers.parse('I add "{product}" to the cart'))
def add_product_by_name(scenario_context: ScenarioContext, product: str):
    inventory = scenario_context.inventory_page
    added_products(scenario_context).append({
        "name": product,
        "price": parse_price(inventory.get_product_price_by_name(product)),
    })
    inventory.add_product_to_cart_by_name(product)


@when(parsers.parse('I sort products by "{option}"'))
def sort_products(scenario_context: ScenarioContext, option: str):
    scenario_context.inventory_page.sort_products(option)


@when("I click on the shopping cart icon")
def click_cart_icon(scenario_context: ScenarioContext):
    scenario_context.header.click_cart_icon()


@then(parsers.parse('I should see the inventory title "{title}"'))
def inventory_title(scenario_context: ScenarioContext, title: str):
    actual = scenario_context.inventory_page.get_page_title()
    assert actual == title, f"Inventory title is '{actual}', expected '{title}'"


@then("the inventory should show products")
def inventory_has_products(scenario_context: ScenarioContext):
    assert scenario_context.inventory_page.get_inventory_item_count() > 0, "No products listed"


@then("I should see multiple product items")
def multiple_products(scenario_context: ScenarioContext):
    count = scenario_context.inventory_page.get_inventory_item_count()
    assert count > 1, f"Expected several products, found {count}"


@then("each product should have a name, price, and add to cart button")
def products_complete(scenario_context: ScenarioContext):
    inventory = scenario_context.inventory_page
    count = inventory.get_inventory_item_count()
    assert len(inventory.get_all_product_names()) == count
    assert len(inventory.get_all_product_prices()) == count
    assert inventory.get_cart_button_count() == count


@then(parsers.parse('the add to cart button should change to "{text}"'))
def button_changed(scenario_context: ScenarioContext, text: str):
    product = added_products(scenario_context)[-1]["name"]
    actual = scenario_context.inventory_page.get_button_text_by_name(product)
    assert actual.lower() == text.lower(), f"Button of '{product}' reads '{actual}', expected '{text}'"


@then(parsers.parse('all three products should show "{text}" button'))
def three_buttons_show(scenario_context: ScenarioContext, text: str):
    inventory = scenario_context.inventory_page
    for index in range(3):
        actual = inventory.get_button_text_by_index(index)
        assert actual.lower() == text.lower(), f"Product #{index} button reads '{actual}'"


@then(parsers.parse('the products should be sorted by "{option}"'))
def products_sorted(scenario_context: ScenarioContext, option: str):
    inventory = scenario_context.inventory_page
    assert inventory.get_current_sort_option() == option

    if option in (SORT_NAME_A_TO_Z, SORT_NAME_Z_TO_A):
        names = inventory.get_all_product_names()
        assert names == sorted(names, reverse=option == SORT_NAME_Z_TO_A), f"Unexpected order: {names}"
    elif option in (SORT_PRICE_LOW_TO_HIGH, SORT_PRICE_HIGH_TO_LOW):
        prices: List[Decimal] = inventory.get_all_product_price_values()
        assert prices == sorted(prices, reverse=option == SORT_PRICE_HIGH_TO_LOW), f"Unexpected order: {prices}"
    else:
        raise ValueError(f"Unknown sort option: {option}")
