from typing import Optional

STATUS_LABELS = {
    "pending_review": "قيد المراجعة",
    "approved": "مقبول",
    "rejected": "مرفوض",
    "shipped": "تم الشحن",
    "delivered": "تم التسليم",
    "completed": "مكتمل",
    "cancelled": "ملغي",
}

# Closed requests do not count when checking whether an order already has a return.
CLOSED_RETURN_STATUSES = frozenset({"cancelled", "rejected"})


def _norm(status: Optional[str]) -> str:
    return (status or "").strip().lower()


def status_label(status: Optional[str]) -> str:
    s = _norm(status)
    return STATUS_LABELS.get(s, s)


def is_open_return_status(status: Optional[str]) -> bool:
    s = _norm(status)
    return bool(s) and s not in CLOSED_RETURN_STATUSES
