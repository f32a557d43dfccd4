from decimal import Decimal

import pytest

from storefront_suites.ui_testing.pages import (
    AppHeader,
    CartPage,
    CheckoutCompletePage,
    CheckoutInfoPage,
    CheckoutOverviewPage,
    InventoryPage,
    LoginPage,
)
from storefront_suites.unit.fakes import FakeElement


def test_cart_badge_count_is_zero_when_badge_absent(interactor, screenshots):
    header = AppHeader(interactor)

    assert header.get_cart_badge_count() == 0
    assert header.get_cart_badge_text() == ""
    assert screenshots.captured == []


def test_cart_badge_count_reads_number(fake_page, interactor):
    fake_page.add(AppHeader.CART_BADGE.selector, FakeElement(text="2"))
    assert AppHeader(interactor).get_cart_badge_count() == 2


def test_unreadable_badge_is_reported_with_screenshot(fake_page, interactor, screenshots):
    fake_page.add(AppHeader.CART_BADGE.selector, FakeElement(text="many"))

    with pytest.raises(ValueError):
        AppHeader(interactor).get_cart_badge_count()

    assert screenshots.captured == [("Page", "get_text_failure")]


def test_login_as_uses_configured_credentials(fake_page, interactor, settings):
    username = fake_page.add(LoginPage.USERNAME_INPUT.selector)
    password = fake_page.add(LoginPage.PASSWORD_INPUT.selector)
    button = fake_page.add(LoginPage.LOGIN_BUTTON.selector, FakeElement(value="Login"))

    page = LoginPage(interactor, settings)
    page.login_as("locked_out_user")

    assert username.value == "locked_out_user"
    assert password.value == "secret_sauce"
    assert button.clicks == 1
    assert page.get_login_button_text() == "Login"


def test_login_page_displayed_and_error_banner(fake_page, interactor, settings):
    page = LoginPage(interactor, settings)
    assert not page.is_login_page_displayed()
    assert not page.is_error_message_displayed()

    fake_page.add(LoginPage.USERNAME_INPUT.selector, FakeElement(attributes={"placeholder": "Username"}))
    fake_page.add(LoginPage.PASSWORD_INPUT.selector)
    fake_page.add(LoginPage.LOGIN_BUTTON.selector)
    fake_page.add(
        LoginPage.ERROR_MESSAGE.selector,
        FakeElement(text="Epic sadface: Sorry, this user has been locked out."),
    )

    assert page.is_login_page_displayed()
    assert page.get_username_placeholder() == "Username"
    assert "locked out" in page.get_error_message()


def test_add_products_by_index(fake_page, interactor):
    buttons = [FakeElement(text="Add to cart") for _ in range(3)]
    badge = FakeElement(text="0", visible=False)

    def toggle(button):
        def on_click():
            button.text = "Remove"
            badge.visible = True
            badge.text = str(sum(b.text == "Remove" for b in buttons))
        return on_click

    for button in buttons:
        button.on_click = toggle(button)
    fake_page.add(InventoryPage.ITEM_BUTTONS.selector, *buttons)
    fake_page.add(AppHeader.CART_BADGE.selector, badge)

    page = InventoryPage(interactor)
    page.add_product_to_cart_by_index(0)
    page.add_product_to_cart_by_index(1)

    assert page.get_cart_badge_count() == 2
    assert page.is_product_in_cart_by_index(1)
    assert not page.is_product_in_cart_by_index(2)
    assert page.get_cart_button_count() == 3


def test_inventory_listing(fake_page, interactor):
    fake_page.url = "https://www.saucedemo.com/inventory.html"
    fake_page.add(InventoryPage.INVENTORY_CONTAINER.selector)
    fake_page.add(InventoryPage.INVENTORY_ITEMS.selector, FakeElement(), FakeElement())
    fake_page.add(InventoryPage.ITEM_PRICES.selector, FakeElement(text="$7.99"), FakeElement(text="$49.99"))

    page = InventoryPage(interactor)
    assert page.is_inventory_page_displayed()
    assert page.get_inventory_item_count() == 2
    assert page.get_all_product_price_values() == [Decimal("7.99"), Decimal("49.99")]


def test_cart_total_is_decimal_sum(fake_page, interactor):
    fake_page.add(CartPage.CART_ITEMS.selector, FakeElement())
    fake_page.add(CartPage.ITEM_PRICES.selector, FakeElement(text="$29.99"))

    page = CartPage(interactor)
    assert page.get_cart_item_count() == 1
    assert page.get_cart_total_price() == Decimal("29.99")


def test_empty_cart(interactor):
    page = CartPage(interactor)

    assert page.is_cart_empty()
    assert page.get_cart_total_price() == Decimal("0")
    assert page.get_cart_item_names() == []


def test_clear_cart_removes_every_row(fake_page, interactor):
    rows = [FakeElement(), FakeElement()]
    removes = [FakeElement(text="Remove"), FakeElement(text="Remove")]

    def remove(row, button):
        def on_click():
            fake_page.remove(CartPage.CART_ITEMS.selector, row)
            fake_page.remove(CartPage.REMOVE_BUTTONS.selector, button)
        return on_click

    for row, button in zip(rows, removes):
        button.on_click = remove(row, button)
    fake_page.add(CartPage.CART_ITEMS.selector, *rows)
    fake_page.add(CartPage.REMOVE_BUTTONS.selector, *removes)

    page = CartPage(interactor)
    page.clear_cart()
    assert page.is_cart_empty()


def test_first_name_round_trip(fake_page, interactor):
    fake_page.add(CheckoutInfoPage.FIRST_NAME_INPUT.selector, FakeElement(value="Jane"))

    page = CheckoutInfoPage(interactor)
    page.enter_first_name("John")
    assert page.get_first_name() == "John"


def test_overview_totals(fake_page, interactor):
    fake_page.add(CheckoutOverviewPage.ITEM_PRICES.selector, FakeElement(text="$29.99"), FakeElement(text="$9.99"))
    fake_page.add(CheckoutOverviewPage.SUBTOTAL_LABEL.selector, FakeElement(text="Item total: $39.98"))
    fake_page.add(CheckoutOverviewPage.TAX_LABEL.selector, FakeElement(text="Tax: $3.20"))
    fake_page.add(CheckoutOverviewPage.TOTAL_LABEL.selector, FakeElement(text="Total: $43.18"))

    page = CheckoutOverviewPage(interactor)
    assert page.get_items_price_sum() == page.get_subtotal() == Decimal("39.98")
    assert page.get_total() == page.get_subtotal() + page.get_tax()
    assert page.get_total_text() == "Total: $43.18"


def test_checkout_complete(fake_page, interactor):
    page = CheckoutCompletePage(interactor)
    assert not page.is_checkout_complete()

    fake_page.add(CheckoutCompletePage.COMPLETE_HEADER.selector, FakeElement(text="Thank you for your order!"))
    fake_page.add(CheckoutCompletePage.COMPLETE_TEXT.selector, FakeElement(text="Your order has been dispatched"))

    assert page.is_checkout_complete()
    assert page.get_confirmation_message().startswith("Thank you for your order!")


def test_unparseable_total_is_reported_with_screenshot(fake_page, interactor, screenshots):
    fake_page.add(CheckoutOverviewPage.TOTAL_LABEL.selector, FakeElement(text="Total: n/a"))
    fake_page.add(CartPage.ITEM_PRICES.selector, FakeElement(text="$29.99"), FakeElement(text="free"))

    with pytest.raises(ValueError):
        CheckoutOverviewPage(interactor).get_total()
    with pytest.raises(ValueError):
        CartPage(interactor).get_cart_total_price()

    assert screenshots.captured == [
        ("CheckoutOverviewPage", "get_text_failure"),
        ("CartPage", "find_elements_failure"),
    ]
