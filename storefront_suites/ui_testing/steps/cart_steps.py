"""
================================================================================
Cart Step Definitions
================================================================================
"""

from decimal import Decimal

from pytest_bdd import given, parsers, then, when

from storefront_suites.ui_testing.scenario_context import ScenarioContext
from storefront_suites.ui_testing.steps.inventory_steps import added_products


@given("I am on the cart page")
def on_cart_page(scenario_context: ScenarioContext):
    scenario_context.header.click_cart_icon()
    scenario_context.cart_page.wait_for_cart_page_to_load()


@when(parsers.parse('I remove "{product}" from the cart'))
def remove_product(scenario_context: ScenarioContext, product: str):
    scenario_context.cart_page.remove_product_by_name(product)
    products = added_products(scenario_context)
    products[:] = [item for item in products if item["name"] != product]


@when("I remove all products from the cart")
def remove_all_products(scenario_context: ScenarioContext):
    scenario_context.cart_page.clear_cart()
    added_products(scenario_context).clear()


@then("I should be redirected to the cart page")
def redirected_to_cart(scenario_context: ScenarioContext):
    cart = scenario_context.cart_page
    cart.wait_for_cart_page_to_load()
    assert cart.is_cart_page_displayed(), "Cart page is not displayed"


@then(parsers.parse('I should see the cart title "{title}"'))
def cart_title(scenario_context: ScenarioContext, title: str):
    actual = scenario_context.cart_page.get_page_title()
    assert actual == title, f"Cart title is '{actual}', expected '{title}'"


@then(parsers.re(r"the cart should contain (?P<count>\d+) items?"), converters={"count": int})
def cart_contains(scenario_context: ScenarioContext, count: int):
    actual = scenario_context.cart_page.get_cart_item_count()
    assert actual == count, f"Cart holds {actual} items, expected {count}"


@then("the cart should be empty")
def cart_empty(scenario_context: ScenarioContext):
    assert scenario_context.cart_page.is_cart_empty(), "Cart still holds items"


@then("the cart total should equal the sum of the added product prices")
def cart_total_matches(scenario_context: ScenarioContext):
    expected = sum((item["price"] for item in added_products(scenario_context)), Decimal("0"))
    actual = scenario_context.cart_page.get_cart_total_price()
    assert actual == expected, f"Cart total {actual} differs from added prices {expected}"


@then(parsers.parse('I should see "{product}" in the cart'))
def product_in_cart(scenario_context: ScenarioContext, product: str):
    assert scenario_context.cart_page.is_product_in_cart(product), f"'{product}' is not in the cart"


@then(parsers.parse('I should not see "{product}" in the cart'))
def product_not_in_cart(scenario_context: ScenarioContext, product: str):
    assert not scenario_context.cart_page.is_product_in_cart(product), f"'{product}' is still in the cart"


@then(parsers.parse('each cart item should have a "{text}" button'))
def cart_items_have_button(scenario_context: ScenarioContext, text: str):
    cart = scenario_context.cart_page
    for index in range(cart.get_cart_item_count()):
        actual = cart.get_remove_button_text_by_index(index)
        assert actual.lower() == text.lower(), f"Cart item #{index} button reads '{actual}'"


@then("I should be redirected to the checkout information page")
def redirected_to_checkout_info(scenario_context: ScenarioContext):
    checkout_info = scenario_context.checkout_info_page
    checkout_info.wait_for_checkout_info_page_to_load()
    assert checkout_info.is_checkout_info_page_displayed(), "Checkout information page is not displayed"
