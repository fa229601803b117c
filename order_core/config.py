"""
Settings from environment variables.

All variables are prefixed ORDER_CORE_. Every setting has a default so the
library works with an empty environment (in-memory store, cash payments).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

STORAGE_BACKENDS = ("memory", "json")
PAYMENT_METHODS = ("cash", "card")

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    storage: str = "memory"
    storage_path: str = "orders.json"
    payment: str = "cash"
    card_limit: float = 1000.0
    gateway_url: str = "https://payments.example.com"
    payment_sandbox: bool = True

    def __post_init__(self) -> None:
        if self.storage not in STORAGE_BACKENDS:
            raise ValueError(f"storage must be one of {STORAGE_BACKENDS}, got {self.storage!r}")
        if self.payment not in PAYMENT_METHODS:
            raise ValueError(f"payment must be one of {PAYMENT_METHODS}, got {self.payment!r}")


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from `environ` (defaults to os.environ). Raises ValueError on bad values."""
    env = os.environ if environ is None else environ
    defaults = Settings()

    raw_limit = env.get("ORDER_CORE_CARD_LIMIT")
    try:
        card_limit = float(raw_limit) if raw_limit is not None else defaults.card_limit
    except ValueError as e:
        raise ValueError(f"ORDER_CORE_CARD_LIMIT must be a number, got {raw_limit!r}") from e

    raw_sandbox = env.get("ORDER_CORE_PAYMENT_SANDBOX")
    sandbox = (
        _parse_bool("ORDER_CORE_PAYMENT_SANDBOX", raw_sandbox)
        if raw_sandbox is not None
        else defaults.payment_sandbox
    )

    return Settings(
        log_level=env.get("ORDER_CORE_LOG_LEVEL", defaults.log_level).upper(),
        storage=env.get("ORDER_CORE_STORAGE", defaults.storage).lower(),
        storage_path=env.get("ORDER_CORE_STORAGE_PATH", defaults.storage_path),
        payment=env.get("ORDER_CORE_PAYMENT", defaults.payment).lower(),
        card_limit=card_limit,
        gateway_url=env.get("ORDER_CORE_PAYMENT_GATEWAY_URL", defaults.gateway_url),
        payment_sandbox=sandbox,
    )
