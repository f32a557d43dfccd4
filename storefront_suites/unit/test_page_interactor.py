import pytest

from storefront_suites.ui_testing.framework.errors import (
    ElementNotClickableError,
    ElementNotPresentError,
    ElementNotVisibleError,
)
from storefront_suites.ui_testing.framework.locators import ElementLocator
from storefront_suites.ui_testing.framework.page_base import PageInteractor
from storefront_suites.ui_testing.framework.screenshot_manager import ScreenshotManager
from storefront_suites.unit.fakes import FakeElement


CHECKOUT_BUTTON = ElementLocator.by_id("checkout", "Checkout button")
ERROR_BANNER = ElementLocator.by_css("h3[data-test='error']", "Error banner")


def test_failed_click_takes_screenshot_and_reraises(interactor, screenshots):
    ui = interactor.for_owner("CartPage")

    with pytest.raises(ElementNotClickableError):
        ui.click(CHECKOUT_BUTTON, timeout=0.2)

    assert screenshots.captured == [("CartPage", "click_failure")]


def test_failed_read_uses_getter_reason(interactor, screenshots):
    with pytest.raises(ElementNotVisibleError):
        interactor.read_text(ERROR_BANNER, timeout=0.1)

    assert screenshots.captured == [("Page", "get_text_failure")]


def test_screenshot_failure_does_not_mask_original_error(fake_page, actions, tmp_path):
    fake_page.screenshot_error = RuntimeError("target closed")
    ui = PageInteractor(actions, ScreenshotManager(fake_page, tmp_path), query_timeout=0.1)

    with pytest.raises(ElementNotClickableError):
        ui.click(CHECKOUT_BUTTON, timeout=0.1)


def test_failure_screenshot_written_to_directory(fake_page, actions, tmp_path):
    ui = PageInteractor(actions, ScreenshotManager(fake_page, tmp_path / "shots"), owner="LoginPage")

    with pytest.raises(ElementNotVisibleError):
        ui.type_text(ElementLocator.by_id("user-name"), "standard_user", timeout=0.1)

    files = list((tmp_path / "shots").glob("LoginPage_type_failure_*.png"))
    assert len(files) == 1


def test_queries_never_raise_for_absent_elements(interactor, screenshots):
    assert interactor.is_displayed(ERROR_BANNER) is False
    assert interactor.is_enabled(CHECKOUT_BUTTON) is False
    assert interactor.count_present(CHECKOUT_BUTTON) == 0
    assert interactor.read_all_texts(ERROR_BANNER) == []
    assert interactor.count_visible(ERROR_BANNER) == 0
    assert screenshots.captured == []


def test_is_displayed_is_idempotent(fake_page, interactor):
    fake_page.add(ERROR_BANNER.selector, FakeElement(text="Epic sadface"))

    assert interactor.is_displayed(ERROR_BANNER)
    assert interactor.is_displayed(ERROR_BANNER)


def test_is_enabled_reflects_element_state(fake_page, interactor):
    fake_page.add(CHECKOUT_BUTTON.selector, FakeElement(enabled=False))
    assert interactor.is_enabled(CHECKOUT_BUTTON) is False


def test_all_displayed(fake_page, interactor):
    fake_page.add(CHECKOUT_BUTTON.selector)
    assert interactor.all_displayed(CHECKOUT_BUTTON)
    assert not interactor.all_displayed(CHECKOUT_BUTTON, ERROR_BANNER)


def test_open_joins_base_url_and_path(fake_page, interactor):
    interactor.open()
    interactor.open("/cart.html")

    assert fake_page.visited == ["https://www.saucedemo.com/", "https://www.saucedemo.com/cart.html"]
    assert interactor.url_contains("cart.html")


def test_wait_for_load_failure_is_reported(interactor, screenshots):
    with pytest.raises(ElementNotVisibleError):
        interactor.wait_for_load(CHECKOUT_BUTTON, timeout=0.1)

    assert screenshots.captured == [("Page", "page_load_failure")]


MENU = ElementLocator.by_id("react-burger-menu-btn", "Menu button")
SORT = ElementLocator.by_class("product_sort_container", "Sort dropdown")


@pytest.mark.parametrize(
    "perform, error, reason",
    [
        (lambda ui: ui.click_via_script(MENU, timeout=0.1), ElementNotVisibleError, "javascript_click_failure"),
        (lambda ui: ui.hover(MENU, timeout=0.1), ElementNotVisibleError, "hover_failure"),
        (lambda ui: ui.double_click(MENU, timeout=0.1), ElementNotClickableError, "double_click_failure"),
        (lambda ui: ui.right_click(MENU, timeout=0.1), ElementNotClickableError, "right_click_failure"),
        (lambda ui: ui.drag_and_drop(MENU, SORT, timeout=0.1), ElementNotVisibleError, "drag_drop_failure"),
        (lambda ui: ui.scroll_into_view(MENU, timeout=0.1), ElementNotPresentError, "scroll_failure"),
        (lambda ui: ui.select_by_value(SORT, "hilo", timeout=0.1), ElementNotVisibleError, "select_failure"),
        (lambda ui: ui.select_by_index(SORT, 1, timeout=0.1), ElementNotVisibleError, "select_failure"),
    ],
    ids=[
        "click_via_script",
        "hover",
        "double_click",
        "right_click",
        "drag_and_drop",
        "scroll_into_view",
        "select_by_value",
        "select_by_index",
    ],
)
def test_failed_action_takes_tagged_screenshot_and_reraises(interactor, screenshots, perform, error, reason):
    ui = interactor.for_owner("InventoryPage")

    with pytest.raises(error):
        perform(ui)

    assert screenshots.captured == [("InventoryPage", reason)]


def test_actions_succeed_without_screenshots(fake_page, interactor, screenshots):
    menu = fake_page.add(MENU.selector)
    dropdown = fake_page.add(SORT.selector)

    interactor.hover(MENU)
    interactor.double_click(MENU)
    interactor.right_click(MENU)
    interactor.click_via_script(MENU)
    interactor.scroll_into_view(MENU)
    interactor.drag_and_drop(MENU, SORT)
    interactor.select_by_value(SORT, "lohi")

    assert [action for action, _ in menu.performed] == [
        "hover",
        "dblclick",
        "click",
        "script click",
        "scroll_into_view_if_needed",
        "drag_to",
    ]
    assert dropdown.selected == "lohi"
    assert screenshots.captured == []


def test_guarded_reports_any_error(interactor, screenshots):
    with pytest.raises(KeyError):
        with interactor.guarded("get_text_failure", MENU):
            raise KeyError("price")

    assert screenshots.captured == [("Page", "get_text_failure")]


def test_read_values_convert_text(fake_page, interactor, screenshots):
    fake_page.add(".cart_quantity", FakeElement(text="1"), FakeElement(text="3"))
    quantities = ElementLocator.by_class("cart_quantity")

    assert interactor.read_value(quantities, int) == 1
    assert interactor.read_all_values(quantities, int) == [1, 3]
    assert interactor.read_all_values(ElementLocator.by_class("missing"), int) == []
    assert screenshots.captured == []
