"""Configuration package."""

from ticker_dash.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
