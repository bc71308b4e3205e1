from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi import HTTPException

from backend.app.config import settings
from backend.app.routers import returns as returns_router


class _FakeSettingsCursor:
    def __init__(self, values=None):
        self.values = dict(values or {})
        self.keys_read = []
        self._row = None

    def execute(self, sql, params=None):
        text = " ".join(str(sql or "").lower().split())
        if "from settings where key" in text:
            key = params[0]
            self.keys_read.append(key)
            self._row = {"value": self.values[key]} if key in self.values else None
            return
        raise AssertionError(f"unexpected SQL in test cursor: {text}")

    def fetchone(self):
        return self._row

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class _FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor

    def cursor(self):
        return self._cursor

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def _use_settings(monkeypatch, values):
    cur = _FakeSettingsCursor(values)
    monkeypatch.setattr(returns_router, "get_conn", lambda: _FakeConn(cur))
    return cur


def _no_db():
    raise AssertionError("database should not be used")


def test_returns_config_reads_settings_table(monkeypatch):
    _use_settings(
        monkeypatch,
        {"return_fee": "20", "allow_multiple_return_requests": "true", "return_window_days": "5"},
    )
    res = returns_router.get_returns_config()
    assert res["return_fee"] == Decimal("20")
    assert res["allow_multiple_requests"] is True
    assert res["return_window_days"] == Decimal("5")


def test_returns_config_falls_back_when_rows_missing_or_invalid(monkeypatch):
    _use_settings(monkeypatch, {"return_fee": "free"})
    res = returns_router.get_returns_config()
    assert res["return_fee"] == Decimal("0")
    assert res["allow_multiple_requests"] is False
    assert res["return_window_days"] == settings.return_window_days


def test_unparseable_return_window_keeps_default(monkeypatch):
    _use_settings(monkeypatch, {"return_window_days": "three", "return_fee": "15"})
    res = returns_router.get_returns_config()
    assert res["return_window_days"] == settings.return_window_days
    assert res["return_fee"] == Decimal("15")



def test_fee_quote_uses_configured_fee_and_halves_for_paid_shipping(monkeypatch):
    cur = _use_settings(monkeypatch, {"return_fee": "20"})
    res = returns_router.quote_return_fee(returns_router.ReturnFeeIn(shipping_amount={"amount": "15"}))
    assert res["base_amount"] == Decimal("20")
    assert res["effective_fee"] == Decimal("10")
    assert res["base_fee_source"] == "settings"
    assert "return_fee" in cur.keys_read


def test_fee_quote_with_explicit_base_fee_skips_settings(monkeypatch):
    monkeypatch.setattr(returns_router, "get_conn", _no_db)
    res = returns_router.quote_return_fee(returns_router.ReturnFeeIn(base_fee=-5, shipping_amount=10))
    assert res["base_amount"] == 0
    assert res["effective_fee"] == 0
    assert res["base_fee_source"] == "request"


def test_shipping_total_endpoint(monkeypatch):
    monkeypatch.setattr(returns_router, "get_conn", _no_db)
    res = returns_router.shipping_total(returns_router.ShippingTotalIn(shipping_cost={"amount": 50}, shipping_tax={"amount": 10}))
    assert res["total"] == Decimal("60")
    res = returns_router.shipping_total(returns_router.ShippingTotalIn(shipping_cost=100, shipping_tax=0))
    assert res["total"] == Decimal("115")


def test_eligibility_within_configured_window(monkeypatch):
    _use_settings(monkeypatch, {"return_window_days": "3"})
    placed = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
    payload = returns_router.ReturnEligibilityIn(
        order={"date": {"updated": placed.isoformat()}},
        now=placed + timedelta(days=2),
    )
    res = returns_router.return_eligibility(payload)
    assert res["allowed"] is True
    assert res["days_elapsed"] == 2.0
    assert res["order_date_source"] == "date.updated"


def test_eligibility_rejects_stale_orders(monkeypatch):
    _use_settings(monkeypatch, {})
    placed = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
    payload = returns_router.ReturnEligibilityIn(order={"created_at": "1709287200"}, now=placed + timedelta(days=4))
    res = returns_router.return_eligibility(payload)
    assert res["allowed"] is False


def test_eligibility_requires_an_order_date(monkeypatch):
    monkeypatch.setattr(returns_router, "get_conn", _no_db)
    with pytest.raises(HTTPException) as ex:
        returns_router.return_eligibility(returns_router.ReturnEligibilityIn(order={"id": 1}))
    assert ex.value.status_code == 400
    assert "order date not found" in str(ex.value.detail)


def test_can_create_ignores_closed_requests(monkeypatch):
    _use_settings(monkeypatch, {"allow_multiple_return_requests": "false"})
    res = returns_router.can_create_return(returns_router.ExistingReturnsIn(existing_statuses=["cancelled", "Rejected"]))
    assert res["has_existing_returns"] is False
    assert res["can_create_new"] is True

    res = returns_router.can_create_return(returns_router.ExistingReturnsIn(existing_statuses=["pending_review"]))
    assert res["has_existing_returns"] is True
    assert res["open_returns"] == [{"status": "pending_review", "label": "قيد المراجعة"}]
    assert res["can_create_new"] is False


def test_can_create_when_multiple_requests_allowed(monkeypatch):
    _use_settings(monkeypatch, {"allow_multiple_return_requests": "TRUE"})
    res = returns_router.can_create_return(returns_router.ExistingReturnsIn(existing_statuses=["approved"]))
    assert res["can_create_new"] is True


def test_item_attributes_endpoint():
    res = returns_router.item_attributes(returns_router.ItemAttributesIn(item={"variant": {"name": "Beige / M"}}))
    assert res == {"color": "Beige", "size": "M"}
