"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the storefront screens.

Each page class encapsulates:
    - Element locators (class constants)
    - Page-specific actions, by product name or by position
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .app_header import AppHeader
from .cart_page import CartPage
from .checkout_complete_page import CheckoutCompletePage
from .checkout_info_page import CheckoutInfoPage
from .checkout_overview_page import CheckoutOverviewPage
from .inventory_page import InventoryPage
from .login_page import LoginPage

__all__ = [
    "AppHeader",
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutInfoPage",
    "CheckoutOverviewPage",
    "InventoryPage",
    "LoginPage",
]
