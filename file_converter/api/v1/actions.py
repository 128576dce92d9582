"""Action endpoint: POST /actions/{action_name} with the input object as body."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from file_converter.actions.context import ActionContext
from file_converter.actions.errors import ActionError, NOT_FOUND
from file_converter.actions.server import server
from file_converter.auth.supabase_auth import AuthUser, get_current_user
from file_converter.storage.base import ConversionStore

logger = logging.getLogger(__name__)

router = APIRouter()

# Set by main.py during lifespan
_store: Optional[ConversionStore] = None


def set_store(store: Optional[ConversionStore]):
    global _store
    _store = store


def current_store() -> Optional[ConversionStore]:
    """The wired store, or None before startup."""
    return _store


def get_store() -> ConversionStore:
    if _store is None:
        raise HTTPException(status_code=503, detail="Storage not initialized")
    return _store


@router.get("/actions")
async def list_actions():
    """Names of every callable action."""
    return {"actions": sorted(server), "count": len(server)}


@router.post("/actions/{action_name}")
def call_action(
    action_name: str,
    payload: Any = Body(default=None),
    user: Optional[AuthUser] = Depends(get_current_user),
    store: ConversionStore = Depends(get_store),
):
    """Invoke a named action. ActionErrors are rendered by the app's handler."""
    action = server.get(action_name)
    if action is None:
        raise ActionError(NOT_FOUND, f"Unknown action: {action_name}")

    try:
        return action(payload, ActionContext(store=store, user=user))
    except ActionError:
        raise
    except Exception:
        logger.exception("Action %s failed", action_name)
        raise
