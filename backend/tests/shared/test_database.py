"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.config import Settings
from shared.database import (
    create_supabase_client,
    get_supabase_client,
    reset_client_cache,
)


class TestCreateSupabaseClient:
    @patch("shared.database.create_client")
    def test_creates_client_from_settings(self, mock_create):
        """Should create a client with the service role key."""
        settings = Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="test-key",
        )
        mock_create.return_value = MagicMock()

        client = create_supabase_client(settings)

        mock_create.assert_called_once_with("https://test.supabase.co", "test-key")
        assert client is mock_create.return_value

    def test_raises_without_config(self):
        """Should refuse to build a client without URL and key."""
        settings = Settings(_env_file=None, supabase_url="", supabase_service_role_key="")
        with pytest.raises(RuntimeError, match="configuration missing"):
            create_supabase_client(settings)


class TestSupabaseClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_get_supabase_client_caches_client(self, mock_settings, mock_create):
        """Should cache the client and not recreate it."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client1 = get_supabase_client()
        client2 = get_supabase_client()

        mock_create.assert_called_once()
        assert client1 is client2

    @patch("shared.database.get_settings")
    def test_get_supabase_client_raises_without_key(self, mock_settings):
        """Should raise if service role key is missing."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = ""

        with pytest.raises(RuntimeError, match="configuration missing"):
            get_supabase_client()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_reset_client_cache(self, mock_settings, mock_create):
        """Should reset the cache and allow new client creation."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.side_effect = [MagicMock(name="client1"), MagicMock(name="client2")]

        client1 = get_supabase_client()
        reset_client_cache()
        client2 = get_supabase_client()

        assert mock_create.call_count == 2
        assert client1 is not client2
