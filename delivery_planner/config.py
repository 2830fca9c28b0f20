"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- DPO_PLANNER_COST_PER_UNIT=7
- DPO_SHELL_PROMPT="> "
- DPO_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlannerConfig(BaseSettings):
    """Delivery plan configuration.

    Environment variables prefixed with DPO_PLANNER_.
    """

    model_config = SettingsConfigDict(env_prefix="DPO_PLANNER_")

    # Delivery cost charged per unit of route distance
    cost_per_unit: int = 5


class ShellConfig(BaseSettings):
    """Interactive shell configuration.

    Environment variables prefixed with DPO_SHELL_.
    """

    model_config = SettingsConfigDict(env_prefix="DPO_SHELL_")

    prompt: str = "Enter choice: "


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with DPO_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="DPO_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def apply(self) -> None:
        """Configure the root logger from these settings."""
        logging.basicConfig(level=self.level, format=self.format)


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.planner.cost_per_unit)

    Environment variables prefixed with DPO_.
    """

    model_config = SettingsConfigDict(env_prefix="DPO_")

    planner: PlannerConfig = Field(default_factory=PlannerConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
