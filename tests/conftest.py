"""
Shared fixtures: an in-memory stand-in for the hosted PostgREST API.

``FakeRowStore.handler`` is plugged into ``httpx.MockTransport`` so the
real ``RowStoreClient`` and services run unchanged against it.
"""

import asyncio
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from sauna_directory.app.core.store import INVALID_TEXT_CODE, RowStoreClient, is_row_id

OBJECT_ACCEPT = "application/vnd.pgrst.object+json"
RESERVED_PARAMS = {"select", "order", "limit"}
UUID_COLUMNS = {"id", "sauna_id"}


def _as_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def make_sauna_row(name: str, **overrides: Any) -> Dict[str, Any]:
    """Return a complete ``saunas`` row as the store would send it."""
    row: Dict[str, Any] = {
        "id": str(uuid.uuid4()),
        "created_at": "2024-11-01T10:00:00+00:00",
        "name": name,
        "address": "Drottninggatan 1, Stockholm",
        "gmaps_url": None,
        "website": None,
        "booking_url": None,
        "phone": None,
        "opening_hours": {
            "monday": "09:00-21:00",
            "tuesday": "Closed",
            "wednesday": "09:00-21:00",
            "thursday": "09:00-21:00",
            "friday": "09:00-21:00",
            "saturday": "10:00-18:00",
            "sunday": "closed",
        },
        "pricing_details": "100 SEK",
        "booking_type": "Drop-in welcome",
        "heat_sources": ["Wood-fired"],
        "sauna_types": ["Finnish Dry"],
        "setting": "Lakeside",
        "has_lake_access": True,
        "amenities": None,
        "swimsuit_policy": None,
        "avg_rating": None,
        "review_count": 0,
    }
    row.update(overrides)
    return row


class FakeRowStore:
    """Very small PostgREST emulation covering the queries the services use."""

    def __init__(self) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {"saunas": [], "submissions": []}
        self.requests: List[httpx.Request] = []
        # (status, json body) returned for every request when set.
        self.fail_with: Optional[Tuple[int, Dict[str, Any]]] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            status_code, body = self.fail_with
            return httpx.Response(status_code, json=body)

        table = request.url.path.rsplit("/", 1)[-1]
        rows = self.tables.setdefault(table, [])
        params = dict(request.url.params)

        for column in UUID_COLUMNS & params.keys():
            value = params[column][len("eq."):]
            if not is_row_id(value):
                return httpx.Response(
                    400,
                    json={
                        "code": INVALID_TEXT_CODE,
                        "details": None,
                        "hint": None,
                        "message": f'invalid input syntax for type uuid: "{value}"',
                    },
                )

        if request.method == "GET":
            result = self._filter(rows, params)
            if "order" in params:
                column, direction = params["order"].split(".")
                result = sorted(result, key=lambda r: r[column], reverse=direction == "desc")
            if "limit" in params:
                result = result[: int(params["limit"])]
            if request.headers.get("accept") == OBJECT_ACCEPT:
                if len(result) != 1:
                    return httpx.Response(
                        406,
                        json={
                            "code": "PGRST116",
                            "details": f"The result contains {len(result)} rows",
                            "message": "JSON object requested, multiple (or no) rows returned",
                        },
                    )
                return httpx.Response(200, json=result[0])
            return httpx.Response(200, json=result)

        if request.method == "POST":
            created = []
            for item in json.loads(request.content):
                row = dict(item)
                row.setdefault("id", str(uuid.uuid4()))
                row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
                rows.append(row)
                created.append(row)
            return httpx.Response(201, json=created)

        if request.method == "PATCH":
            values = json.loads(request.content)
            updated = []
            for row in self._filter(rows, params):
                row.update(values)
                updated.append(row)
            return httpx.Response(200, json=updated)

        return httpx.Response(405, json={"message": "method not allowed"})

    @staticmethod
    def _filter(rows: List[Dict[str, Any]], params: Dict[str, str]) -> List[Dict[str, Any]]:
        filters = {
            column: value[len("eq."):]
            for column, value in params.items()
            if column not in RESERVED_PARAMS and value.startswith("eq.")
        }
        return [
            row for row in rows
            if all(_as_param(row.get(column)) == expected for column, expected in filters.items())
        ]


@pytest.fixture
def fake_store() -> FakeRowStore:
    return FakeRowStore()


@pytest.fixture
def store_client(fake_store: FakeRowStore):
    client = RowStoreClient(
        "https://example.supabase.co",
        "anon-key",
        timeout=5,
        transport=httpx.MockTransport(fake_store.handler),
    )
    yield client
    asyncio.run(client.aclose())
