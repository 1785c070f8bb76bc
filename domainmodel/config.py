"""Configuration file management for domainmodel.

The only configurable value is the exchange-rate table. Rates are read from
the [exchange_rates] table of an XDG config file and overlay the defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from domainmodel.domain.models import CurrencyCode
from domainmodel.domain.money import BASE_CURRENCY, EXCHANGE_RATES, validate_currency

logger = logging.getLogger(__name__)


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "domainmodel" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with the built-in exchange rates.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "exchange_rates": dict(EXCHANGE_RATES),
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def parse_exchange_rates(table: dict[str, Any]) -> dict[CurrencyCode, float]:
    """Overlay an [exchange_rates] table on the default rates.

    Args:
        table: Mapping of currency code to units per base currency unit.

    Returns:
        Complete rate table for every supported currency.

    Raises:
        InvalidCurrencyError: If a code is not supported.
        ValueError: If a rate is not a positive number, or the base rate is not 1.
    """
    rates = dict(EXCHANGE_RATES)

    for code, rate in table.items():
        currency = validate_currency(code)
        if isinstance(rate, bool) or not isinstance(rate, int | float) or rate <= 0:
            raise ValueError(f"Exchange rate for {code} must be a positive number, got {rate!r}")
        rates[currency] = float(rate)

    if rates[BASE_CURRENCY] != 1.0:
        raise ValueError(f"Exchange rate for base currency {BASE_CURRENCY} must be 1.0")

    return rates


def load_exchange_rates(config_path: Path | None = None) -> dict[CurrencyCode, float]:
    """Load exchange rates, falling back to the defaults without a config file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Complete rate table for every supported currency.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        logger.debug("No config at %s, using default exchange rates", config_path)
        return dict(EXCHANGE_RATES)

    config = load_config(config_path)
    logger.debug("Loading exchange rates from %s", config_path)
    return parse_exchange_rates(config.get("exchange_rates", {}))
