#!/usr/bin/env python3
import argparse
import os
import sys
from decimal import Decimal, InvalidOperation

import psycopg
from psycopg.rows import dict_row


CREATE_SETTINGS_SQL = """
CREATE TABLE IF NOT EXISTS settings (
  key text PRIMARY KEY,
  value text NOT NULL,
  description text,
  updated_at timestamptz NOT NULL DEFAULT now()
)
"""

UPSERT_SQL = """
INSERT INTO settings (key, value, description, updated_at)
VALUES (%s, %s, %s, now())
ON CONFLICT (key) DO UPDATE
SET value = EXCLUDED.value,
    description = COALESCE(EXCLUDED.description, settings.description),
    updated_at = now()
"""


def _money_arg(raw: str) -> str:
    try:
        d = Decimal(raw)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {raw}")
    if not d.is_finite() or d < 0:
        raise argparse.ArgumentTypeError("must be a finite number >= 0")
    return str(d)


def build_rows(args) -> list[tuple[str, str, str]]:
    rows = []
    if args.return_fee is not None:
        rows.append(("return_fee", args.return_fee, "Base fee charged for a customer return"))
    if args.allow_multiple is not None:
        rows.append(
            (
                "allow_multiple_return_requests",
                "true" if args.allow_multiple else "false",
                "Allow more than one open return request per order",
            )
        )
    if args.window_days is not None:
        rows.append(("return_window_days", args.window_days, "Days after the last order update a return is accepted"))
    return rows


def main() -> int:
    ap = argparse.ArgumentParser(description="Create/update the return-request settings rows.")
    ap.add_argument("--db", default=os.getenv("DATABASE_URL"), help="Postgres URL (default: $DATABASE_URL)")
    ap.add_argument("--return-fee", type=_money_arg, default=None)
    ap.add_argument("--window-days", type=_money_arg, default=None)
    g = ap.add_mutually_exclusive_group()
    g.add_argument("--allow-multiple", dest="allow_multiple", action="store_true", default=None)
    g.add_argument("--single-only", dest="allow_multiple", action="store_false")
    ap.add_argument("--create-table", action="store_true", help="Create the settings table if missing")
    ap.add_argument("--dry-run", action="store_true")
    args = ap.parse_args()

    rows = build_rows(args)
    if not rows and not args.create_table:
        print("init_return_settings: nothing to do", file=sys.stderr)
        return 2
    if args.dry_run:
        for key, value, _ in rows:
            print(f"{key}={value}")
        return 0
    if not args.db:
        print("init_return_settings: missing DATABASE_URL", file=sys.stderr)
        return 2

    with psycopg.connect(args.db, row_factory=dict_row) as conn:
        with conn.transaction():
            with conn.cursor() as cur:
                if args.create_table:
                    cur.execute(CREATE_SETTINGS_SQL)
                for row in rows:
                    cur.execute(UPSERT_SQL, row)

    for key, value, _ in rows:
        print(f"{key}={value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
