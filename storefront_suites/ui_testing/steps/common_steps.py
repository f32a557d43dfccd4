"""
================================================================================
Common Step Definitions
================================================================================

Steps shared by several features: the button dispatcher, the cart badge and
error banner checks.

Steps only call page objects from the scenario context; they never touch the
browser page directly.

================================================================================
"""

from typing import Callable, Dict

from pytest_bdd import parsers, then, when

from storefront_suites.ui_testing.scenario_context import ScenarioContext


def _cancel(context: ScenarioContext) -> None:
    if context.checkout_overview_page.is_checkout_overview_page_displayed():
        context.checkout_overview_page.click_cancel()
    else:
        context.checkout_info_page.click_cancel()


# Lower-cased button caption -> page object action
BUTTON_ACTIONS: Dict[str, Callable[[ScenarioContext], None]] = {
    "login": lambda context: context.login_page.click_login_button(),
    "continue shopping": lambda context: context.cart_page.click_continue_shopping(),
    "checkout": lambda context: context.cart_page.click_checkout(),
    "continue": lambda context: context.checkout_info_page.click_continue(),
    "cancel": _cancel,
    "finish": lambda context: context.checkout_overview_page.click_finish(),
    "back home": lambda context: context.checkout_complete_page.click_back_home(),
}


@when(parsers.parse('I click "{button}" button'))
def click_named_button(scenario_context: ScenarioContext, button: str):
    """Single dispatcher for named buttons; caption matching ignores case."""
    action = BUTTON_ACTIONS.get(button.strip().lower())
    if action is None:
        raise ValueError(
            f"Unknown button '{button}'. Known buttons: {', '.join(sorted(BUTTON_ACTIONS))}"
        )
    action(scenario_context)


@then(parsers.parse('the cart badge should show "{count}"'))
def cart_badge_should_show(scenario_context: ScenarioContext, count: str):
    actual = scenario_context.header.get_cart_badge_count()
    assert actual == int(count), f"Cart badge shows {actual}, expected {count}"


@then("I should see an error message")
def error_message_displayed(scenario_context: ScenarioContext):
    checkout_info = scenario_context.checkout_info_page
    if checkout_info.is_checkout_info_page_displayed():
        assert checkout_info.is_error_message_displayed(), "Checkout error message is not displayed"
    else:
        assert scenario_context.login_page.is_error_message_displayed(), "Login error message is not displayed"
