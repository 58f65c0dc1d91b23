"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from rideshare_pnl.utils.utils import get_project_root

CURRENCY_SYMBOLS = {"LKR": "₨", "USD": "$", "EUR": "€", "GBP": "£"}


@dataclass(frozen=True)
class AppSettings:
    """Settings for the record store and presentation.

    Attributes:
        db_url: SQLAlchemy URL of the record store database.
        currency_code: Currency used when formatting amounts.
    """

    db_url: str
    currency_code: str = "LKR"

    @property
    def currency_symbol(self) -> str:
        """Return the display symbol for the configured currency."""
        return CURRENCY_SYMBOLS.get(self.currency_code, self.currency_code)

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from the environment and an optional .env file.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        db_url = os.getenv("RIDESHARE_DB_URL", "").strip()
        if not db_url:
            db_url = cls._default_db_url()
        currency = os.getenv("RIDESHARE_CURRENCY", "LKR").strip().upper()
        return cls(db_url=db_url, currency_code=currency or "LKR")

    @staticmethod
    def _default_db_url() -> str:
        """Return a SQLite URL under the project data/ directory."""
        db_path = get_project_root() / "data" / "rideshare.db"
        return f"sqlite:///{db_path}"


__all__ = ["AppSettings", "CURRENCY_SYMBOLS"]
