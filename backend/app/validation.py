from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BeforeValidator, StringConstraints

from .money import to_amount


def _to_lower_str(v):
    if v is None:
        return v
    return str(v).strip().lower()


def _to_stripped_str(v):
    if v is None:
        return v
    return str(v).strip()


# Accepts a number, a numeric string or an object carrying `amount`;
# anything unparseable becomes 0 instead of a validation error.
Money = Annotated[Decimal, BeforeValidator(to_amount)]

ReturnStatus = Annotated[
    Literal["pending_review", "approved", "rejected", "shipped", "delivered", "completed", "cancelled"],
    BeforeValidator(_to_lower_str),
]

# Assignment statuses are free-form in the order-prep tables; keep them as
# stable lowercase identifiers.
AssignmentStatus = Annotated[
    str,
    BeforeValidator(_to_lower_str),
    StringConstraints(min_length=1, max_length=64, pattern=r"^[a-z0-9][a-z0-9_-]*$"),
]

TrackingNumber = Annotated[str, BeforeValidator(_to_stripped_str), StringConstraints(min_length=1, max_length=64)]
