"""
Database client factory for Supabase.

The service-role client is the single long-lived storage handle of the
process. It is created explicitly from settings, handed to repositories
through the service container and released on application shutdown.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def create_supabase_client(settings: Settings) -> Client:
    """
    Build a new Supabase client with the service role key.

    Args:
        settings: Application settings holding the Supabase URL and key

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If the Supabase configuration is missing
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get the process-wide Supabase client, creating it on first use.

    Args:
        settings: Settings to build the client from; defaults to get_settings()

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        _service_client = create_supabase_client(settings or get_settings())
        logger.info("Supabase client created")

    return _service_client


def ping_database(client: Client) -> None:
    """
    Run a trivial query so an unreachable store fails fast.

    Raises:
        Whatever the client raises (postgrest APIError, httpx errors)
    """
    client.table("users").select("id").limit(1).execute()


def reset_client_cache() -> None:
    """
    Release the cached database client.

    Called on shutdown, and useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
