from decimal import Decimal
from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from backend.app.validation import AssignmentStatus, Money, ReturnStatus, TrackingNumber


class _M(BaseModel):
    amount: Money = Decimal("0")
    tax: Optional[Money] = None
    status: Optional[ReturnStatus] = None
    assignment: Optional[AssignmentStatus] = None
    tracking: Optional[TrackingNumber] = None


def test_money_accepts_amount_like_shapes():
    assert _M(amount=12).amount == Decimal("12")
    assert _M(amount="12.50").amount == Decimal("12.50")
    assert _M(amount={"amount": "7"}).amount == Decimal("7")
    assert _M(amount="abc").amount == Decimal("0")
    assert _M(tax=None).tax is None
    assert _M(tax={"amount": 3}).tax == Decimal("3")


def test_status_types_normalize_case():
    m = _M(status=" Pending_Review ", assignment="PREPARING", tracking="  RR123456789SA ")
    assert m.status == "pending_review"
    assert m.assignment == "preparing"
    assert m.tracking == "RR123456789SA"


def test_unknown_return_status_is_rejected():
    with pytest.raises(ValidationError):
        _M(status="lost")


def test_assignment_status_rejects_internal_spaces():
    with pytest.raises(ValidationError):
        _M(assignment="under review")
