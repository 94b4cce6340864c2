"""API modules."""

from rfx_studio.api.app import create_app
from rfx_studio.api.routes import router

__all__ = ["create_app", "router"]
