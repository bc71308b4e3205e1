from fastapi import APIRouter
from pydantic import BaseModel
from typing import Any, List

from ..assignment_statuses import ACTIVE_ASSIGNMENT_STATUSES, can_auto_assign
from ..order_prep_status import extract_salla_status, is_order_status_assignable, is_order_status_eligible
from ..validation import AssignmentStatus

router = APIRouter(prefix="/order-assignments", tags=["order-assignments"])


@router.get("/statuses")
def list_active_statuses():
    return {"active_statuses": list(ACTIVE_ASSIGNMENT_STATUSES)}


class AssignmentEligibilityIn(BaseModel):
    # Raw Salla order (or just its `status` block); see extract_salla_status.
    order: Any = None
    current_assignment_statuses: List[AssignmentStatus] = []


@router.post("/eligibility")
def assignment_eligibility(data: AssignmentEligibilityIn):
    payload = data.order if isinstance(data.order, dict) else {"status": data.order}
    status, sub_status = extract_salla_status(payload)
    blocked = not can_auto_assign(data.current_assignment_statuses)
    eligible = is_order_status_eligible(status, sub_status)
    assignable = is_order_status_assignable(status, sub_status)
    return {
        "eligible": eligible,
        "assignable": assignable and not blocked,
        "blocked_by_active_assignment": blocked,
        "status": status,
        "sub_status": sub_status,
    }
