from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Optional

from .money import ZERO, q_money, to_amount, to_decimal

# Commercial invoices for international shipments declare 30% of the order value.
DEDUCTION_RATE = Decimal("0.7")
DECLARED_VALUE_MULTIPLIER = Decimal("1") - DEDUCTION_RATE


def adjust_declared_value(value: Any) -> Decimal:
    d = to_decimal(value)
    if d is None or d <= 0:
        return ZERO
    return d * DECLARED_VALUE_MULTIPLIER


def declare_invoice(lines: Iterable[dict], shipping: Any = None, currency: Optional[str] = None) -> dict:
    """
    Apply the declared value rule to every line of a commercial invoice.

    Each line carries `unit_price` (amount-like) and `quantity`. Per-line and
    total figures are rounded to cents for printing; the adjustment itself is
    applied to the unrounded amounts.
    """
    out_lines = []
    subtotal = ZERO
    declared_subtotal = ZERO
    for line in lines or []:
        unit_price = to_amount(line.get("unit_price"))
        qty = to_decimal(line.get("quantity"))
        qty = qty if qty is not None and qty > 0 else Decimal("1")
        line_total = unit_price * qty
        declared_total = adjust_declared_value(line_total)
        subtotal += line_total
        declared_subtotal += declared_total
        out_lines.append(
            {
                "sku": line.get("sku"),
                "quantity": qty,
                "unit_price": q_money(unit_price),
                "declared_unit_price": q_money(adjust_declared_value(unit_price)),
                "line_total": q_money(line_total),
                "declared_total": q_money(declared_total),
            }
        )

    shipping_amount = to_amount(shipping)
    declared_shipping = adjust_declared_value(shipping_amount)
    return {
        "currency": (currency or "SAR").strip().upper() or "SAR",
        "lines": out_lines,
        "subtotal": q_money(subtotal),
        "declared_subtotal": q_money(declared_subtotal),
        "shipping": q_money(shipping_amount),
        "declared_shipping": q_money(declared_shipping),
        "declared_total": q_money(declared_subtotal + declared_shipping),
    }
