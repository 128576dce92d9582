"""Supabase client singletons (service role for tables, anon for auth)."""

from supabase import create_client, Client
from file_converter.config import settings

_client: Client | None = None
_auth_client: Client | None = None


def get_supabase() -> Client:
    """Get or create the Supabase client using service role key."""
    global _client
    if _client is None:
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set"
            )
        _client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )
    return _client


def get_auth_client() -> Client:
    """Get or create the anon-key client used to validate user JWTs."""
    global _auth_client
    if _auth_client is None:
        if not settings.supabase_url or not settings.supabase_anon_key:
            raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        _auth_client = create_client(settings.supabase_url, settings.supabase_anon_key)
    return _auth_client
