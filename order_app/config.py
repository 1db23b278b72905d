from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from order_app.errors import ConfigError

DEFAULT_ORDER_ID_SEED = 1000
DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_KNOWN_KEYS = ("order_id_seed", "currency_symbol", "log_level")


def format_money(amount: Any, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Fixed-point rendering: 0.0000001 stays 0.0000001 and 100.00 keeps its zeros."""
    return f"{currency_symbol}{amount:f}"


@dataclass(frozen=True)
class Settings:
    order_id_seed: int = DEFAULT_ORDER_ID_SEED
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: str = DEFAULT_LOG_LEVEL
    config_path: Path | None = None


def _load_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    return value


def load_settings_file(path: Path) -> Dict[str, Any]:
    """
    Read the optional YAML settings file.

    Only the top-level keys order_id_seed, currency_symbol and log_level are
    recognised; anything else is rejected so typos do not go unnoticed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid settings file {path}: expected a YAML mapping at the top level.")

    unknown = sorted(str(k) for k in data if k not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Invalid settings file {path}: unknown keys {', '.join(unknown)}.")

    return dict(data)


def _to_seed(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"order_id_seed must be an integer, got {value!r}.")
    try:
        seed = int(str(value).strip())
    except ValueError:
        raise ConfigError(f"order_id_seed must be an integer, got {value!r}.") from None
    if seed < 0:
        raise ConfigError(f"order_id_seed must not be negative, got {seed}.")
    return seed


def _to_log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level: {value!r}.")
    return level


def get_settings() -> Settings:
    """
    Build the settings for one run.

    Environment variables:
        ORDER_APP_CONFIG:           Path to an optional YAML settings file.
        ORDER_APP_ORDER_ID_SEED:    Counter seed; the first order gets seed + 1.
        ORDER_APP_CURRENCY_SYMBOL:  Prefix printed before amounts.
        ORDER_APP_LOG_LEVEL:        Level for the stderr log handler.

    Environment variables take precedence over the settings file.
    """
    values: Dict[str, Any] = {}

    config_env = _load_env("ORDER_APP_CONFIG")
    config_path = Path(config_env) if config_env else None
    if config_path is not None:
        values.update(load_settings_file(config_path))

    for key in _KNOWN_KEYS:
        env_value = _load_env(f"ORDER_APP_{key.upper()}")
        if env_value is not None:
            values[key] = env_value

    currency_symbol = values.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL)
    if currency_symbol is None:
        currency_symbol = ""

    return Settings(
        order_id_seed=_to_seed(values.get("order_id_seed", DEFAULT_ORDER_ID_SEED)),
        currency_symbol=str(currency_symbol),
        log_level=_to_log_level(values.get("log_level", DEFAULT_LOG_LEVEL)),
        config_path=config_path,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
