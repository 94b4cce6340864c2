"""Configuration modules."""

from rfx_studio.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
