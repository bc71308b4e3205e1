import os
from decimal import Decimal, InvalidOperation
from typing import Optional
from psycopg.rows import dict_row
from contextlib import contextmanager

# psycopg3 connection pooling lives in a separate package.
from psycopg_pool import ConnectionPool

from .config import settings

DATABASE_URL = os.getenv("APP_DATABASE_URL") or settings.db_url

def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default

# Pool sizing defaults are conservative for local/dev. Override in prod via env:
# - DB_POOL_MIN_SIZE / DB_POOL_MAX_SIZE
_POOL_MIN = _env_int("DB_POOL_MIN_SIZE", 1)
_POOL_MAX = _env_int("DB_POOL_MAX_SIZE", 5)

# Opened on app startup so importing the module never touches the network.
_pool = ConnectionPool(
    conninfo=DATABASE_URL,
    min_size=_POOL_MIN,
    max_size=_POOL_MAX,
    kwargs={"row_factory": dict_row},
    open=False,
)

@contextmanager
def _pooled_conn(pool: ConnectionPool):
    # `with get_conn() as conn:` commits on success, rolls back on exception
    # and returns the connection to the pool.
    with pool.connection() as conn:
        with conn:
            yield conn


def get_conn():
    return _pooled_conn(_pool)


def open_pool(wait: bool = False) -> None:
    _pool.open(wait=wait)


def close_pools() -> None:
    _pool.close()


def get_setting(cur, key: str) -> Optional[str]:
    cur.execute("SELECT value FROM settings WHERE key = %s", (key,))
    row = cur.fetchone()
    return row["value"] if row else None


def _setting_decimal(raw: Optional[str], default: Decimal, invalid: Decimal = Decimal("0")) -> Decimal:
    if raw is None:
        return default
    try:
        d = Decimal(str(raw).strip())
    except InvalidOperation:
        return invalid
    return d if d.is_finite() else invalid


def load_return_settings(cur) -> dict:
    """
    Return-request knobs stored in the key/value `settings` table.
    Missing rows fall back to env defaults. An unparseable fee reads as 0 while an
    unparseable window keeps the default window.
    """
    return {
        "return_fee": _setting_decimal(get_setting(cur, "return_fee"), settings.return_fee_default),
        "allow_multiple_requests": (get_setting(cur, "allow_multiple_return_requests") or "").strip().lower() == "true",
        "return_window_days": _setting_decimal(
            get_setting(cur, "return_window_days"),
            settings.return_window_days,
            invalid=settings.return_window_days,
        ),
    }
