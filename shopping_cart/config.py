import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class CartConfig:
    database_url: str
    log_level: str
    strict_errors: bool
    echo_sql: bool


def validate_log_level(value: Optional[str]) -> str:
    v = (value or "INFO").strip().upper()
    if v not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value!r}, expected one of {', '.join(LOG_LEVELS)}")
    return v


def parse_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _load_dotenv_file() -> None:
    # .env at project root; real environment variables win
    path = Path(__file__).resolve().parents[1] / ".env"
    if path.exists():
        load_dotenv(path, override=False)


def strict_errors_from_env() -> bool:
    """CART_STRICT_ERRORS alone; other settings are not read or validated."""
    _load_dotenv_file()
    return parse_flag(os.getenv("CART_STRICT_ERRORS"))


def load_env() -> CartConfig:
    _load_dotenv_file()
    return CartConfig(
        database_url=os.getenv("DATABASE_URL", "sqlite:///data/cart.db"),
        log_level=validate_log_level(os.getenv("CART_LOG_LEVEL")),
        strict_errors=parse_flag(os.getenv("CART_STRICT_ERRORS")),
        echo_sql=parse_flag(os.getenv("CART_SQL_ECHO")),
    )
