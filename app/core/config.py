"""Central config — values come from the environment (.env is loaded here). Defaults live only in this module."""
import os
from dotenv import load_dotenv

from app.core.exceptions import ConfigurationError

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./properties.db"
LOG_FORMATS = ("standard", "json")

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def get_database_url() -> str:
    """SQLAlchemy URL — set DATABASE_URL in .env for MySQL/Postgres."""
    return (os.getenv("DATABASE_URL") or "").strip() or DEFAULT_DATABASE_URL


def get_sql_echo() -> bool:
    return _get_bool("SQL_ECHO")


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "").strip().upper() or "INFO"


def get_log_format() -> str:
    fmt = (os.getenv("LOG_FORMAT") or "").strip().lower() or "standard"
    if fmt not in LOG_FORMATS:
        raise ConfigurationError(f"LOG_FORMAT must be one of {LOG_FORMATS}, got {fmt!r}")
    return fmt


def get_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS") or "*"
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
