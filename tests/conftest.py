"""Pytest configuration and fixtures."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from embedcheck.config import Settings
from embedcheck.database.supabase_client import SupabaseClient
from embedcheck.services.huggingface_client import HuggingFaceClient


@pytest.fixture
def settings():
    """Settings with dummy credentials."""
    return Settings(
        huggingface_api_key="hf_test_token",
        supabase_url="https://example.supabase.co",
        supabase_anon_key="anon-key",
    )


@pytest.fixture
def make_supabase_mock():
    """Factory for mocks of the supabase-py query builder chain."""
    def _make(insert_data=None, select_data=None):
        client = MagicMock()
        table = client.table.return_value
        table.insert.return_value.execute.return_value = SimpleNamespace(
            data=insert_data if insert_data is not None else [{"id": 7, "content": "test"}]
        )
        table.select.return_value.limit.return_value.execute.return_value = SimpleNamespace(
            data=select_data if select_data is not None else [{"id": 1, "content": "test"}]
        )
        table.delete.return_value.eq.return_value.execute.return_value = SimpleNamespace(data=[{"id": 7}])
        return client
    return _make


@pytest.fixture
def supabase_mock(make_supabase_mock):
    return make_supabase_mock()


@pytest.fixture
def supabase_client(settings, supabase_mock):
    return SupabaseClient(settings, client=supabase_mock)


@pytest.fixture
def make_hf_client():
    """Factory for HuggingFaceClient backed by an httpx.MockTransport handler."""
    def _make(settings, handler):
        return HuggingFaceClient(settings, transport=httpx.MockTransport(handler))
    return _make
