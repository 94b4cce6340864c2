"""Persistence modules."""

from rfx_studio.store.json_store import (
    DocumentNotFoundError,
    JSONStore,
    StoreError,
    StoreSnapshot,
)

__all__ = ["DocumentNotFoundError", "JSONStore", "StoreError", "StoreSnapshot"]
