from typing import Iterable, Optional

# Assignments in any of these states block auto-assignment of the order to
# another user until they are completed or removed.
ACTIVE_ASSIGNMENT_STATUSES = (
    "assigned",
    "preparing",
    "prepared",
    "shipped",
    "under_review",
    "under_review_reservation",
)


def is_active_assignment_status(status: Optional[str]) -> bool:
    return bool(status) and status in ACTIVE_ASSIGNMENT_STATUSES


def can_auto_assign(current_statuses: Optional[Iterable[Optional[str]]]) -> bool:
    return not any(is_active_assignment_status(s) for s in (current_statuses or []))
