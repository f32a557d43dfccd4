"""
================================================================================
Inventory Feature UI Scenarios
================================================================================

Binds ``inventory.feature`` to pytest. Steps come from the shared step modules
registered in the root ``conftest.py``; each scenario gets a fresh browser
through the ``scenario_context`` fixture.

================================================================================
"""

import allure
import pytest
from pytest_bdd import scenarios


pytestmark = [
    allure.epic("UI Testing"),
    allure.feature("Product Catalogue"),
    pytest.mark.ui,
    pytest.mark.e2e,
    pytest.mark.usefixtures("scenario_context"),
]

scenarios("inventory.feature")
