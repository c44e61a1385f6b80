"""
Configuration management for the recipe catalog.

This module centralizes environment variable loading from the .env file at the
project root. Import it before reading any CATALOG_* variable so local
development picks up .env while deployed builds use the platform environment.

load_dotenv() is safe to call when .env does not exist; it simply no-ops.

Environment Variables:
- CATALOG_ID_STRATEGY: Optional, "uuid" (default) or "counter"
- CATALOG_PREVIEW_LIMIT: Optional, recipes shown before "Show all" (default 6)
- CATALOG_CURRENCY_SYMBOL: Optional, prefix for displayed prices (default "R")
- CATALOG_LOG_LEVEL: Optional, logging level name (default "INFO")
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .ids import ID_STRATEGIES

DEFAULT_PREVIEW_LIMIT = 6


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Existing environment variables take precedence (override=False), so this
    is safe to call multiple times.
    """
    # recipe_catalog/config.py -> recipe_catalog/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class CatalogConfig:
    """Configuration for the recipe store and its listings."""

    @staticmethod
    def get_id_strategy() -> str:
        """
        Get the id generation strategy.

        Returns:
            "uuid" or "counter" (default: "uuid")

        Raises:
            RuntimeError: If CATALOG_ID_STRATEGY names an unknown strategy
        """
        strategy = os.getenv("CATALOG_ID_STRATEGY", "uuid").strip().lower()
        if strategy not in ID_STRATEGIES:
            raise RuntimeError(
                f"CATALOG_ID_STRATEGY must be one of {', '.join(ID_STRATEGIES)}, got {strategy!r}"
            )
        return strategy

    @staticmethod
    def get_preview_limit() -> int:
        """
        Get the number of recipes shown in the collapsed home listing.

        Returns:
            Non-negative integer (default: 6)

        Raises:
            RuntimeError: If CATALOG_PREVIEW_LIMIT is not a non-negative integer
        """
        raw = os.getenv("CATALOG_PREVIEW_LIMIT")
        if raw is None or not raw.strip():
            return DEFAULT_PREVIEW_LIMIT
        try:
            limit = int(raw)
        except ValueError:
            raise RuntimeError(f"CATALOG_PREVIEW_LIMIT must be an integer, got {raw!r}")
        if limit < 0:
            raise RuntimeError(f"CATALOG_PREVIEW_LIMIT must not be negative, got {limit}")
        return limit

    @staticmethod
    def get_currency_symbol() -> str:
        """Get the currency prefix for displayed prices (default: "R")."""
        return os.getenv("CATALOG_CURRENCY_SYMBOL", "R")

    @staticmethod
    def get_log_level() -> int:
        """
        Get the logging level.

        Returns:
            Numeric logging level (default: logging.INFO)

        Raises:
            RuntimeError: If CATALOG_LOG_LEVEL is not a known level name
        """
        name = os.getenv("CATALOG_LOG_LEVEL", "INFO").strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise RuntimeError(f"CATALOG_LOG_LEVEL must be a logging level name, got {name!r}")
        return level


def configure_logging() -> None:
    """Configure root logging at CATALOG_LOG_LEVEL. Call once at app start."""
    logging.basicConfig(
        level=CatalogConfig.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
