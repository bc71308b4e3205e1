from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..money import non_negative, q_money


@dataclass(frozen=True)
class ReturnFeeCalculation:
    base_amount: Decimal
    effective_fee: Decimal

    def as_dict(self) -> dict:
        return {"base_amount": self.base_amount, "effective_fee": self.effective_fee}


def calculate_return_fee(base_fee: Any, shipping_amount: Any) -> ReturnFeeCalculation:
    base_amount = q_money(non_negative(base_fee))
    # Customers who already paid shipping on the original order get half off.
    if non_negative(shipping_amount) > 0:
        effective_fee = q_money(base_amount / 2)
    else:
        effective_fee = base_amount
    return ReturnFeeCalculation(base_amount=base_amount, effective_fee=effective_fee)


def get_effective_return_fee(base_fee: Any, shipping_amount: Any) -> Decimal:
    return calculate_return_fee(base_fee, shipping_amount).effective_fee
