from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Optional

MONEY_Q = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Best-effort numeric coercion.
    Returns None for anything that is not a finite number (bools included).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, (int, float)):
        d = Decimal(str(value))
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            # Mirrors the upstream storefront payloads where "" means zero.
            return ZERO
        if "_" in raw:
            return None
        try:
            d = Decimal(raw)
        except InvalidOperation:
            return None
    else:
        return None
    if not d.is_finite():
        return None
    return d


def q_money(v: Decimal) -> Decimal:
    v = v or ZERO
    # Widen the context so very large amounts keep their cents instead of
    # overflowing the default 28-digit precision.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, v.adjusted() + 4)
        return v.quantize(MONEY_Q, rounding=ROUND_HALF_UP)


def non_negative(value: Any) -> Decimal:
    d = to_decimal(value)
    if d is None or d < 0:
        return ZERO
    return d


def to_amount(value: Any) -> Decimal:
    """
    Resolve an amount-like value (number, numeric string, or anything carrying
    an `amount` field) to a single Decimal. Unparseable input resolves to 0.
    """
    if isinstance(value, dict):
        if "amount" in value:
            return to_amount(value.get("amount"))
        return ZERO
    if value is not None and not isinstance(value, (str, int, float, Decimal)) and hasattr(value, "amount"):
        return to_amount(getattr(value, "amount"))
    d = to_decimal(value)
    return d if d is not None else ZERO
