"""
Tests for the row store client and its settings-based factory.
"""

import asyncio
import uuid

import httpx
import pytest

from sauna_directory.app.core.config import Settings
from sauna_directory.app.core.exceptions import ConfigurationError, StoreError
from sauna_directory.app.core.store import INVALID_TEXT_CODE, RowStoreClient, create_store_client, is_row_id

from conftest import make_sauna_row


def test_select_builds_postgrest_query(fake_store, store_client):
    fake_store.tables["saunas"] = [make_sauna_row("B"), make_sauna_row("A", has_lake_access=False)]

    rows = asyncio.run(
        store_client.select("saunas", filters={"has_lake_access": True, "setting": None}, order="name")
    )

    assert [row["name"] for row in rows] == ["B"]
    request = fake_store.requests[-1]
    assert request.url.path == "/rest/v1/saunas"
    assert request.url.params["has_lake_access"] == "eq.true"
    assert request.url.params["order"] == "name.asc"
    assert "setting" not in request.url.params
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["authorization"] == "Bearer anon-key"


def test_select_one_translates_no_rows_to_none(fake_store, store_client):
    assert asyncio.run(store_client.select_one("saunas", filters={"id": "missing"})) is None


def test_select_one_returns_the_row(fake_store, store_client):
    row = make_sauna_row("Centralbadet")
    fake_store.tables["saunas"] = [row]
    assert asyncio.run(store_client.select_one("saunas", filters={"id": row["id"]})) == row


def test_upstream_error_raises_store_error(fake_store, store_client):
    fake_store.fail_with = (500, {"code": "XX000", "message": "database is down"})

    with pytest.raises(StoreError) as excinfo:
        asyncio.run(store_client.select("saunas"))

    assert excinfo.value.message == "database is down"
    assert excinfo.value.status_code == 500
    assert excinfo.value.code == "XX000"


def test_select_one_propagates_other_errors(fake_store, store_client):
    fake_store.fail_with = (401, {"message": "Invalid API key"})
    with pytest.raises(StoreError):
        asyncio.run(store_client.select_one("saunas", filters={"id": "x"}))


def test_transport_failure_raises_store_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = RowStoreClient("https://example.supabase.co", "key", transport=httpx.MockTransport(handler))
    with pytest.raises(StoreError):
        asyncio.run(client.select("saunas"))


def test_update_requires_a_filter(store_client):
    with pytest.raises(StoreError):
        asyncio.run(store_client.update("saunas", {"name": "x"}, filters={}))


def test_insert_asks_for_representation(fake_store, store_client):
    rows = asyncio.run(store_client.insert("submissions", [{"type": "new_suggestion"}]))
    assert rows[0]["id"]
    assert fake_store.requests[-1].headers["prefer"] == "return=representation"


def test_factory_requires_url_and_key():
    with pytest.raises(ConfigurationError):
        create_store_client(Settings(supabase_url=None, supabase_key="key"))
    with pytest.raises(ConfigurationError):
        create_store_client(Settings(supabase_url="https://example.supabase.co", supabase_key=""))


def test_factory_uses_settings():
    config = Settings(supabase_url="https://example.supabase.co/", supabase_key="key", store_timeout=3)
    client = create_store_client(config)
    assert client.base_url == "https://example.supabase.co/rest/v1"
    asyncio.run(client.aclose())


def test_is_row_id():
    assert is_row_id(str(uuid.uuid4()))
    assert not is_row_id("does-not-exist")
    assert not is_row_id("")


def test_select_one_keeps_malformed_id_errors(store_client):
    with pytest.raises(StoreError) as excinfo:
        asyncio.run(store_client.select_one("saunas", filters={"id": "does-not-exist"}))
    assert excinfo.value.code == INVALID_TEXT_CODE
    assert excinfo.value.status_code == 400


def _client_answering(response):
    return RowStoreClient(
        "https://example.supabase.co", "key", transport=httpx.MockTransport(lambda request: response)
    )


def test_error_body_that_is_not_an_object():
    client = _client_answering(httpx.Response(502, json=["bad", "gateway"]))
    with pytest.raises(StoreError) as excinfo:
        asyncio.run(client.select("saunas"))
    assert excinfo.value.status_code == 502
    assert excinfo.value.code is None
    assert "bad" in excinfo.value.message


def test_plain_text_error_body():
    client = _client_answering(httpx.Response(503, text="upstream unavailable"))
    with pytest.raises(StoreError) as excinfo:
        asyncio.run(client.select("saunas"))
    assert excinfo.value.message == "upstream unavailable"


def test_malformed_success_body():
    client = _client_answering(httpx.Response(200, text="<html>proxy page</html>"))
    with pytest.raises(StoreError) as excinfo:
        asyncio.run(client.select("saunas"))
    assert excinfo.value.message == "Row store sent a malformed response"
