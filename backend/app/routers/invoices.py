from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from decimal import Decimal
from typing import List, Optional

from ..validation import Money
from ..valuation import DECLARED_VALUE_MULTIPLIER, declare_invoice

router = APIRouter(prefix="/invoices", tags=["invoices"])


class InvoiceLineIn(BaseModel):
    sku: Optional[str] = None
    quantity: Decimal = Field(default=Decimal("1"))
    unit_price: Money = 0


class DeclaredValueIn(BaseModel):
    lines: List[InvoiceLineIn] = []
    shipping: Optional[Money] = None
    currency: Optional[str] = None


@router.post("/declared-value")
def declared_value(data: DeclaredValueIn):
    """
    Declared (customs) values for an international commercial invoice.
    """
    if not data.lines:
        raise HTTPException(status_code=400, detail="lines is required")
    for i, line in enumerate(data.lines):
        if line.quantity <= 0:
            raise HTTPException(status_code=400, detail=f"line {i + 1}: quantity must be > 0")
    result = declare_invoice(
        [line.model_dump() for line in data.lines],
        shipping=data.shipping,
        currency=data.currency,
    )
    return {**result, "multiplier": DECLARED_VALUE_MULTIPLIER}
