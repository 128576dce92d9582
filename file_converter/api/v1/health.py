"""Health check endpoint."""

import platform
import sys

from fastapi import APIRouter

from file_converter.config import VERSION
from file_converter.api.v1 import actions as actions_api

router = APIRouter()


@router.get("/health")
async def health_check():
    """Service status and the active storage backend."""
    store = actions_api.current_store()
    return {
        "status": "healthy" if store is not None else "starting",
        "storage_backend": store.backend if store is not None else None,
        "version": VERSION,
        "python_version": sys.version,
        "platform": platform.platform(),
    }
