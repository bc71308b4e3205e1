from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..money import ZERO, q_money, to_amount

VAT_RATE = Decimal("0.15")


def get_shipping_total(shipping_cost: Any = None, shipping_tax: Any = None) -> Decimal:
    """
    Total shipping charge including VAT.

    An explicit tax is only trusted when it is positive; otherwise VAT is derived
    from the cost. A shipping-cost mapping may carry a `taxable` flag, which does
    not influence the result.
    """
    # Negative amounts are treated as missing.
    cost = max(to_amount(shipping_cost), ZERO)
    explicit_tax = max(to_amount(shipping_tax), ZERO)

    if explicit_tax > 0:
        tax = explicit_tax
    elif cost > 0:
        tax = q_money(cost * VAT_RATE)
    else:
        tax = ZERO

    return q_money(cost + tax)
