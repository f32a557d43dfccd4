"""Price parsing for storefront labels such as ``$29.99`` or ``Item total: $39.98``."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterable

_AMOUNT = re.compile(r"\d+(?:,\d{3})*(?:\.\d+)?")


def parse_price(text: str) -> Decimal:
    """
    Extract the amount from a price label.

    Raises:
        ValueError: If the label contains no amount
    """
    matches = _AMOUNT.findall(text or "")
    if not matches:
        raise ValueError(f"No price found in {text!r}")
    return Decimal(matches[-1].replace(",", ""))


def sum_prices(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, Decimal("0"))
