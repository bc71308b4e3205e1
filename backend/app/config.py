import os
from decimal import Decimal, InvalidOperation
from typing import List

class Settings:
    def _split_csv(self, raw: str, *, default: List[str]) -> List[str]:
        parts = [p.strip() for p in (raw or "").split(",")]
        return [p for p in parts if p] or default

    def _decimal(self, name: str, default: str) -> Decimal:
        raw = (os.getenv(name) or "").strip() or default
        try:
            return Decimal(raw)
        except InvalidOperation:
            return Decimal(default)

    def __init__(self) -> None:
        self.env = os.getenv('APP_ENV', 'local')
        self.db_url = os.getenv('DATABASE_URL', 'postgresql://localhost/salla_backoffice')
        # Comma-separated list of allowed CORS origins for the back-office UI.
        self.cors_origins = self._split_csv(
            os.getenv("CORS_ORIGINS", "").strip(),
            default=["http://localhost:3000", "http://127.0.0.1:3000"],
        )
        self.api_version = os.getenv("APP_VERSION", "0.1.0").strip() or "0.1.0"
        # Fallbacks when the `settings` table has no row for the key.
        self.return_fee_default = self._decimal("RETURN_FEE_DEFAULT", "0")
        self.return_window_days = self._decimal("RETURN_WINDOW_DAYS", "3")

    @property
    def expose_errors(self) -> bool:
        return self.env in {"local", "dev"}

settings = Settings()
