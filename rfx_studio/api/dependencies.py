"""API dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from rfx_studio.store.json_store import JSONStore
from rfx_studio.workspace.session import RFxWorkspace


@lru_cache()
def get_store() -> JSONStore:
    """Get or create the store for the configured data directory."""
    return JSONStore()


@lru_cache()
def get_workspace() -> RFxWorkspace:
    """Get or create the process-wide drafting workspace."""
    return RFxWorkspace(store=get_store())


# Type aliases for dependency injection
WorkspaceDep = Annotated[RFxWorkspace, Depends(get_workspace)]
