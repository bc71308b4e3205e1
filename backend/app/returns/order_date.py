from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional

DATE_OBJECT_KEYS = ("date", "datetime", "value", "timestamp")
RETURN_WINDOW_DAYS = 3
# ~1.5 minutes of tolerance on the window boundary.
RETURN_WINDOW_EPSILON_DAYS = 0.001

_NUMERIC_RE = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")


@dataclass
class OrderDateResult:
    date: Optional[datetime]
    source: Optional[str] = None
    raw_value: Any = None
    candidates: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ReturnWindowCheck:
    allowed: bool
    days_elapsed: float
    window_days: float


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _from_timestamp(ts: float) -> Optional[datetime]:
    if ts != ts or ts in (float("inf"), float("-inf")):
        return None
    # Values past 1e12 are already milliseconds.
    seconds = ts / 1000 if ts > 1e12 else ts
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_iso(raw: str) -> Optional[datetime]:
    candidate = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    try:
        return _as_utc(datetime.fromisoformat(candidate))
    except ValueError:
        pass
    if " " in candidate:
        try:
            return _as_utc(datetime.fromisoformat(candidate.replace(" ", "T", 1)))
        except ValueError:
            return None
    return None


def normalize_order_date_value(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if _NUMERIC_RE.match(raw):
            return _from_timestamp(float(raw))
        return _parse_iso(raw)
    if isinstance(value, (int, float, Decimal)):
        return _from_timestamp(float(value))
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, dict):
        for key in DATE_OBJECT_KEYS:
            nested = normalize_order_date_value(value.get(key))
            if nested:
                return nested
    return None


def _dig(order: dict, *path: str) -> Any:
    cur: Any = order
    for key in path:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(key)
    return cur


def extract_order_date(order: Optional[dict]) -> OrderDateResult:
    """
    Pick the most relevant date of a Salla order for return eligibility.
    The last update wins over creation; every probed candidate is echoed back
    so support staff can see why a date was (or was not) found.
    """
    if not order:
        return OrderDateResult(date=None)

    candidate_list = [
        ("date.updated", _dig(order, "date", "updated")),
        ("date.created", _dig(order, "date", "created")),
        ("updated_at", order.get("updated_at")),
        ("created_at", order.get("created_at")),
        ("updatedAt", order.get("updatedAt")),
        ("createdAt", order.get("createdAt")),
        ("updatedAtRemote", order.get("updatedAtRemote")),
        ("placedAt", order.get("placedAt")),
    ]
    candidates = {source: value for source, value in candidate_list}

    for source, value in candidate_list:
        dt = normalize_order_date_value(value)
        if dt:
            return OrderDateResult(date=dt, source=source, raw_value=value, candidates=candidates)

    return OrderDateResult(date=None, candidates=candidates)


def check_return_window(
    order_date: datetime,
    now: Optional[datetime] = None,
    window_days: float = RETURN_WINDOW_DAYS,
) -> ReturnWindowCheck:
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    days_elapsed = (now - _as_utc(order_date)).total_seconds() / 86400
    window = float(window_days)
    return ReturnWindowCheck(
        allowed=days_elapsed <= window + RETURN_WINDOW_EPSILON_DAYS,
        days_elapsed=days_elapsed,
        window_days=window,
    )
