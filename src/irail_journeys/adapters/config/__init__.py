"""Configuration adapters."""

from irail_journeys.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
