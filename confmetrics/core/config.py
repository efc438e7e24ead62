"""
Calculator and reporting settings.
Values default from CONFMETRICS_* environment variables (or a .env file).
"""

import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Settings shared by the calculator, reporter and CLI.

    Attributes:
        validate_counts: Reject negative counts with InvalidInputError
        decimals: Decimal places used when printing metrics
        log_level: Logging level name for scripts
    """

    validate_counts: bool = True
    decimals: int = 4
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        """Build a config from CONFMETRICS_* environment variables."""
        config = cls(
            validate_counts=_env_bool("CONFMETRICS_VALIDATE", cls.validate_counts),
            decimals=_env_int("CONFMETRICS_DECIMALS", cls.decimals),
            log_level=os.getenv("CONFMETRICS_LOG_LEVEL", cls.log_level).upper(),
        )
        if config.decimals < 0:
            raise ValueError("CONFMETRICS_DECIMALS must be non-negative")
        logger.debug(f"Loaded config: {config}")
        return config
