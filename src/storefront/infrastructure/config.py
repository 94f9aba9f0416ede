"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first (without
overriding variables that are already set).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    admin_password: str = "admin123"
    session_ttl_seconds: float = 86400.0
    cart_ttl_seconds: float = 86400.0
    order_expiry_hours: float = 48.0
    auto_confirm_payments: bool = False
    log_level: str = "INFO"
    exchange_api_base: str = "https://api.bybit.com"
    exchange_api_key: str = ""
    exchange_api_secret: str = ""
    exchange_timeout_seconds: float = 5.0

    @property
    def payment_checks_enabled(self) -> bool:
        return bool(self.exchange_api_key and self.exchange_api_secret)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from *environ* (defaults to ``os.environ`` after .env)."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    defaults = Settings()
    return Settings(
        data_dir=Path(environ.get("STOREFRONT_DATA_DIR", str(defaults.data_dir))),
        admin_password=environ.get("STOREFRONT_ADMIN_PASSWORD", defaults.admin_password),
        session_ttl_seconds=_positive_float(
            environ, "STOREFRONT_SESSION_TTL_SECONDS", defaults.session_ttl_seconds
        ),
        cart_ttl_seconds=_positive_float(
            environ, "STOREFRONT_CART_TTL_SECONDS", defaults.cart_ttl_seconds
        ),
        order_expiry_hours=_positive_float(
            environ, "STOREFRONT_ORDER_EXPIRY_HOURS", defaults.order_expiry_hours
        ),
        auto_confirm_payments=_flag(
            environ, "STOREFRONT_AUTO_CONFIRM_PAYMENTS", defaults.auto_confirm_payments
        ),
        log_level=environ.get("STOREFRONT_LOG_LEVEL", defaults.log_level).upper(),
        exchange_api_base=environ.get("EXCHANGE_API_BASE", defaults.exchange_api_base),
        exchange_api_key=environ.get("EXCHANGE_API_KEY", defaults.exchange_api_key),
        exchange_api_secret=environ.get("EXCHANGE_API_SECRET", defaults.exchange_api_secret),
        exchange_timeout_seconds=_positive_float(
            environ, "EXCHANGE_TIMEOUT_SECONDS", defaults.exchange_timeout_seconds
        ),
    )


def _positive_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
