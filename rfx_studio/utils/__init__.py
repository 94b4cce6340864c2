"""Shared utilities."""

from rfx_studio.utils.logging import LoggerMixin, get_logger, setup_logging

__all__ = ["LoggerMixin", "get_logger", "setup_logging"]
