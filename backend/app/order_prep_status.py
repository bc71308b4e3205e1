from __future__ import annotations

from typing import Any, Iterable, Optional

# Salla status ids for "new order" / "in preparation" (custom and original).
ALLOWED_ORDER_STATUS_IDS = frozenset({"449146439", "566146469", "1956875584", "1939592358"})
ALLOWED_ORDER_STATUS_SLUGS = frozenset({"under_review", "in_progress"})
ALLOWED_ORDER_STATUS_NAMES = frozenset(
    v.strip().lower()
    for v in (
        "طلب جديد",
        "new order",
        "under review",
        "جاري التجهيز",
        "in progress",
        "processing",
        "preparing",
        "قيد التنفيذ",
    )
)

ASSIGNABLE_ORDER_STATUS_IDS = frozenset({"449146439"})
ASSIGNABLE_ORDER_STATUS_NAMES = ("طلب جديد", "new order")


def _norm_status_id(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None


def _norm_status_name(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip().lower() or None


def _to_status_record(status: Any) -> Optional[dict]:
    if isinstance(status, dict):
        return status
    sid = _norm_status_id(status)
    return {"id": sid} if sid else None


def _is_set(value: Any) -> bool:
    # Empty mappings and lists still count as present; only blank scalars do not.
    if isinstance(value, (dict, list)):
        return True
    if isinstance(value, float) and value != value:
        return False
    return bool(value)


def _get(record: Optional[dict], *path: str) -> Any:
    cur: Any = record
    for key in path:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(key)
    return cur


def _id_candidates(record: dict, *, include_original_id: bool) -> list:
    out = [
        record.get("id"),
        record.get("status_id"),
        record.get("statusId"),
        record.get("code"),
        _get(record, "original", "id"),
    ]
    if include_original_id:
        out += [record.get("original_id"), record.get("originalId")]
    return out


def _name_candidates(record: dict) -> list:
    return [
        record.get("name"),
        record.get("name_en"),
        record.get("nameEn"),
        record.get("label"),
        record.get("status_name"),
        record.get("statusName"),
        _get(record, "translations", "ar", "name"),
        _get(record, "translations", "en", "name"),
    ]


def _has_recognized_name(names: Iterable[Any]) -> bool:
    return any(_norm_status_name(v) in ALLOWED_ORDER_STATUS_NAMES for v in names)


def _has_assignable_name(names: Iterable[Any]) -> bool:
    for v in names:
        n = _norm_status_name(v)
        if not n:
            continue
        if any(n == p or p in n for p in ASSIGNABLE_ORDER_STATUS_NAMES):
            return True
        if "طلب" in n and "جديد" in n:
            return True
        if "new" in n and "order" in n:
            return True
    return False


def is_allowed_order_status(status: Any) -> bool:
    record = _to_status_record(status)
    if not record:
        return False

    for cand in _id_candidates(record, include_original_id=True):
        sid = _norm_status_id(cand)
        if sid and sid in ALLOWED_ORDER_STATUS_IDS:
            return True

    names = _name_candidates(record)
    if _has_recognized_name(names):
        return True

    # A bare slug only counts when the payload carries no (unrecognized) name.
    has_any_name = any(isinstance(v, str) and v.strip() for v in names)
    for raw in (record.get("slug"), record.get("status"), record.get("code")):
        slug = raw.strip().lower() if isinstance(raw, str) else None
        if not slug or slug not in ALLOWED_ORDER_STATUS_SLUGS:
            continue
        return not has_any_name
    return False


def is_order_status_eligible(status: Any, sub_status: Any = None) -> bool:
    if not is_allowed_order_status(status):
        return False
    if _is_set(sub_status) and not is_allowed_order_status(sub_status):
        return False
    return True


def extract_salla_status(data: Any) -> tuple[Optional[dict], Optional[dict]]:
    data = data if isinstance(data, dict) else {}
    status = _to_status_record(data.get("status"))
    candidates = (
        _get(status, "sub_status"),
        _get(status, "subStatus"),
        data.get("sub_status"),
        data.get("subStatus"),
    )
    sub = next((c for c in candidates if _is_set(c)), None)
    return status, _to_status_record(sub)


def _matches_assignable(status: Any) -> bool:
    record = _to_status_record(status)
    if not record:
        return False
    for cand in _id_candidates(record, include_original_id=False):
        sid = _norm_status_id(cand)
        if sid and sid in ASSIGNABLE_ORDER_STATUS_IDS:
            return True
    return _has_assignable_name(_name_candidates(record))


def is_order_status_assignable(status: Any, sub_status: Any = None) -> bool:
    if _matches_assignable(status):
        return True
    return _is_set(sub_status) and _matches_assignable(sub_status)
