"""Per-request action context and the authorization guard."""

from dataclasses import dataclass
from typing import Optional

from file_converter.actions.errors import ActionError, UNAUTHORIZED
from file_converter.auth.supabase_auth import AuthUser
from file_converter.storage.base import ConversionStore


@dataclass
class ActionContext:
    store: ConversionStore
    user: Optional[AuthUser] = None


def require_user(context: ActionContext) -> AuthUser:
    if context.user is None:
        raise ActionError(UNAUTHORIZED, "You must be signed in to perform this action.")
    return context.user
