"""
================================================================================
Checkout Step Definitions
================================================================================

Checkout information, overview and completion steps. Button clicks
("Continue", "Finish", "Cancel", ...) go through the shared dispatcher in
``common_steps``.
"""

from pytest_bdd import given, parsers, then, when

from storefront_suites.ui_testing.scenario_context import ScenarioContext
from storefront_suites.ui_testing.steps.inventory_steps import added_products


@given("I am on the checkout information page")
def on_checkout_info_page(scenario_context: ScenarioContext):
    scenario_context.header.click_cart_icon()
    scenario_context.cart_page.wait_for_cart_page_to_load()
    scenario_context.cart_page.click_checkout()
    scenario_context.checkout_info_page.wait_for_checkout_info_page_to_load()


@when(parsers.re(r'I enter first name "(?P<first_name>[^"]*)"'))
def enter_first_name(scenario_context: ScenarioContext, first_name: str):
    scenario_context.checkout_info_page.enter_first_name(first_name)


@when(parsers.re(r'I enter last name "(?P<last_name>[^"]*)"'))
def enter_last_name(scenario_context: ScenarioContext, last_name: str):
    scenario_context.checkout_info_page.enter_last_name(last_name)


@when(parsers.re(r'I enter postal code "(?P<postal_code>[^"]*)"'))
def enter_postal_code(scenario_context: ScenarioContext, postal_code: str):
    scenario_context.checkout_info_page.enter_postal_code(postal_code)


@when(parsers.re(
    r'I enter checkout information "(?P<first_name>[^"]*)" "(?P<last_name>[^"]*)" "(?P<postal_code>[^"]*)"'
))
def enter_checkout_information(scenario_context: ScenarioContext, first_name: str, last_name: str, postal_code: str):
    scenario_context.checkout_info_page.fill_checkout_information(first_name, last_name, postal_code)


@when("I try to proceed with empty fields")
def proceed_with_empty_fields(scenario_context: ScenarioContext):
    scenario_context.checkout_info_page.click_continue()


@then("I should see the checkout overview page")
def checkout_overview_displayed(scenario_context: ScenarioContext):
    overview = scenario_context.checkout_overview_page
    overview.wait_for_checkout_overview_page_to_load()
    assert overview.is_checkout_overview_page_displayed(), "Checkout overview page is not displayed"


@then("the order item total should equal the sum of the item prices")
def item_total_matches(scenario_context: ScenarioContext):
    overview = scenario_context.checkout_overview_page
    assert overview.get_subtotal() == overview.get_items_price_sum()


@then("the order total should equal the item total plus tax")
def order_total_matches(scenario_context: ScenarioContext):
    overview = scenario_context.checkout_overview_page
    subtotal, tax, total = overview.get_subtotal(), overview.get_tax(), overview.get_total()
    assert total == subtotal + tax, f"Total {total} != item total {subtotal} + tax {tax}"


@then("I should see the order confirmation page")
def confirmation_page_displayed(scenario_context: ScenarioContext):
    complete = scenario_context.checkout_complete_page
    complete.wait_for_checkout_complete_page_to_load()
    assert complete.is_checkout_complete_page_displayed(), "Order confirmation page is not displayed"


@then(parsers.parse('I should see "{message}" message'))
def confirmation_message(scenario_context: ScenarioContext, message: str):
    actual = scenario_context.checkout_complete_page.get_confirmation_message()
    assert message.lower() in actual.lower(), f"'{message}' not found in '{actual}'"


@then("I should see the order completion message")
def order_completion_message(scenario_context: ScenarioContext):
    assert scenario_context.checkout_complete_page.is_checkout_complete(), "Order is not reported complete"


@then("I should remain on the checkout information page")
def remain_on_checkout_info(scenario_context: ScenarioContext):
    assert scenario_context.checkout_info_page.is_checkout_info_page_displayed(), (
        "Checkout information page is no longer displayed"
    )


@then(parsers.parse('the checkout error message should contain "{text}"'))
def checkout_error_contains(scenario_context: ScenarioContext, text: str):
    message = scenario_context.checkout_info_page.get_error_message()
    assert text.lower() in message.lower(), f"'{text}' not found in error message '{message}'"


@then(parsers.parse('the first name field should contain "{value}"'))
def first_name_contains(scenario_context: ScenarioContext, value: str):
    assert scenario_context.checkout_info_page.get_first_name() == value


@then("my cart items should remain unchanged")
def cart_items_unchanged(scenario_context: ScenarioContext):
    cart = scenario_context.cart_page
    cart.wait_for_cart_page_to_load()
    expected = sorted(item["name"] for item in added_products(scenario_context))
    actual = sorted(cart.get_cart_item_names())
    assert actual == expected, f"Cart holds {actual}, expected {expected}"
