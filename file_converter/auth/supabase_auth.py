"""Supabase JWT resolution dependency for FastAPI."""

import logging
from typing import Optional

from fastapi import Header
from pydantic import BaseModel

from file_converter.db.supabase_client import get_auth_client

logger = logging.getLogger(__name__)


class AuthUser(BaseModel):
    id: str
    email: Optional[str] = None


def parse_bearer(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_user(authorization: str = Header(None)) -> Optional[AuthUser]:
    """Resolve the signed-in user from a Supabase JWT in the Authorization header.

    Returns None for a missing, malformed or rejected token; the action
    layer turns that into an UNAUTHORIZED error.
    """
    token = parse_bearer(authorization)
    if token is None:
        return None

    client = get_auth_client()
    try:
        user_response = client.auth.get_user(token)
    except Exception as e:
        logger.info("Rejected bearer token: %s", type(e).__name__)
        return None

    user = getattr(user_response, "user", None)
    if user is None:
        return None
    return AuthUser(id=str(user.id), email=getattr(user, "email", None))
