from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from datetime import datetime
from typing import Any, List, Optional

from ..db import get_conn, load_return_settings
from ..validation import Money, ReturnStatus
from ..returns.fees import calculate_return_fee
from ..returns.shipping import get_shipping_total
from ..returns.order_date import check_return_window, extract_order_date
from ..returns.item_attributes import get_item_attributes
from ..returns.status import STATUS_LABELS, is_open_return_status, status_label

router = APIRouter(prefix="/returns", tags=["returns"])


def _load_config() -> dict:
    with get_conn() as conn:
        with conn.cursor() as cur:
            return load_return_settings(cur)


@router.get("/config")
def get_returns_config():
    """Public-safe configuration for the customer returns page."""
    return _load_config()


@router.get("/statuses")
def list_return_statuses():
    return {"statuses": [{"status": s, "label": label} for s, label in STATUS_LABELS.items()]}


class ReturnFeeIn(BaseModel):
    shipping_amount: Money = 0
    # Omit to use the configured return fee.
    base_fee: Optional[Money] = None


@router.post("/fee")
def quote_return_fee(data: ReturnFeeIn):
    base_fee = data.base_fee
    source = "request"
    if base_fee is None:
        base_fee = _load_config()["return_fee"]
        source = "settings"
    calc = calculate_return_fee(base_fee, data.shipping_amount)
    return {**calc.as_dict(), "shipping_amount": data.shipping_amount, "base_fee_source": source}


class ShippingTotalIn(BaseModel):
    shipping_cost: Money = 0
    shipping_tax: Optional[Money] = None


@router.post("/shipping-total")
def shipping_total(data: ShippingTotalIn):
    return {"total": get_shipping_total(data.shipping_cost, data.shipping_tax)}


class ReturnEligibilityIn(BaseModel):
    order: dict
    now: Optional[datetime] = None


@router.post("/eligibility")
def return_eligibility(data: ReturnEligibilityIn):
    found = extract_order_date(data.order)
    if found.date is None:
        raise HTTPException(status_code=400, detail="order date not found")
    window_days = _load_config()["return_window_days"]
    check = check_return_window(found.date, now=data.now, window_days=window_days)
    return {
        "allowed": check.allowed,
        "days_elapsed": round(check.days_elapsed, 2),
        "window_days": check.window_days,
        "order_date": found.date.isoformat(),
        "order_date_source": found.source,
    }


class ExistingReturnsIn(BaseModel):
    existing_statuses: List[ReturnStatus] = []


@router.post("/can-create")
def can_create_return(data: ExistingReturnsIn):
    allow_multiple = bool(_load_config()["allow_multiple_requests"])
    open_statuses = [s for s in data.existing_statuses if is_open_return_status(s)]
    open_count = len(open_statuses)
    return {
        "has_existing_returns": open_count > 0,
        "open_returns": [{"status": s, "label": status_label(s)} for s in open_statuses],
        "allow_multiple_requests": allow_multiple,
        "can_create_new": open_count == 0 or allow_multiple,
    }


class ItemAttributesIn(BaseModel):
    item: Any = None


@router.post("/item-attributes")
def item_attributes(data: ItemAttributesIn):
    return get_item_attributes(data.item)
