"""
HTTP client for the hosted row store.

The directory keeps its data in a Supabase project, which exposes each
table through PostgREST at ``<url>/rest/v1/<table>``.  ``RowStoreClient``
wraps an ``httpx.AsyncClient`` with the small query vocabulary the
services need: equality filters, ordering, single-row fetches, inserts
and updates.  Credentials are passed in explicitly; use
``create_store_client`` to build one from the application settings.

Failures are raised as ``StoreError``.  The PostgREST "no rows"
condition on a single-row fetch is not an error and is returned as
``None``.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .config import Settings, settings as default_settings
from .exceptions import StoreError

logger = logging.getLogger(__name__)

# PostgREST error code for "JSON object requested, multiple (or no) rows returned".
NO_ROWS_CODE = "PGRST116"
# Postgres "invalid text representation", e.g. a malformed uuid in a filter.
INVALID_TEXT_CODE = "22P02"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_row_id(value: Any) -> bool:
    """Return whether ``value`` can be a primary key (rows are keyed by uuid)."""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class RowStoreClient:
    """Minimal async PostgREST client.

    Parameters
    ----------
    url : str
        Project URL, e.g. ``https://abc.supabase.co``.
    key : str
        API key sent both as ``apikey`` and as a bearer token.
    timeout : float
        Deadline in seconds applied to every request.
    transport : Optional[httpx.AsyncBaseTransport]
        Custom transport, mainly for tests (``httpx.MockTransport``).
    """

    def __init__(
        self,
        url: str,
        key: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not url or not key:
            raise ValueError("Row store url and key are required")
        self.base_url = url.rstrip("/") + "/rest/v1"
        headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RowStoreClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    async def select(
        self,
        table: str,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[str] = None,
        descending: bool = False,
        columns: str = "*",
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Return rows of ``table`` matching all equality ``filters``."""
        params: Dict[str, str] = {"select": columns}
        for column, value in (filters or {}).items():
            if value is not None:
                params[column] = f"eq.{_format_value(value)}"
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        if limit is not None:
            params["limit"] = str(limit)
        data = await self._request("GET", table, params=params)
        return data or []

    async def select_one(self, table: str, *, filters: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Return exactly one row or ``None`` when no row matches."""
        params = {"select": "*"}
        for column, value in filters.items():
            params[column] = f"eq.{_format_value(value)}"
        # Ask PostgREST for a single object; it answers 406/PGRST116 when
        # the filter matched nothing.
        headers = {"Accept": "application/vnd.pgrst.object+json"}
        try:
            return await self._request("GET", table, params=params, headers=headers)
        except StoreError as exc:
            if exc.code == NO_ROWS_CODE:
                return None
            raise

    async def insert(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert ``rows`` and return them as stored (with ids and timestamps)."""
        headers = {"Prefer": "return=representation"}
        data = await self._request("POST", table, json_body=rows, headers=headers)
        return data or []

    async def update(
        self, table: str, values: Dict[str, Any], *, filters: Mapping[str, Any]
    ) -> List[Dict[str, Any]]:
        """Update matching rows and return the updated representations."""
        if not filters:
            # PostgREST refuses unfiltered updates; fail before the round trip.
            raise StoreError("Refusing to update without a filter")
        params = {column: f"eq.{_format_value(value)}" for column, value in filters.items()}
        headers = {"Prefer": "return=representation"}
        data = await self._request("PATCH", table, params=params, json_body=values, headers=headers)
        return data or []

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    async def _request(
        self,
        method: str,
        table: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        logger.debug("Sending %s request to %s/%s", method, self.base_url, table)
        try:
            response = await self._client.request(
                method,
                f"/{table}",
                params=params,
                json=json_body,
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            logger.error("Row store request timed out: %s %s", method, table)
            raise StoreError(f"Row store request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.error("Row store request failed: %s", exc)
            raise StoreError(str(exc)) from exc

        if response.is_error:
            code = None
            message = ""
            try:
                payload = response.json()
            except ValueError:
                payload = None
                message = response.text
            if isinstance(payload, dict):
                code = payload.get("code")
                message = payload.get("message") or payload.get("details") or str(payload)
            elif payload is not None:
                message = str(payload)
            if not message:
                message = f"Row store responded with status {response.status_code}"
            if code != NO_ROWS_CODE:
                logger.error("Row store error (%s): %s", response.status_code, message)
            raise StoreError(message, status_code=response.status_code, code=code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("Row store sent a malformed body for %s %s", method, table)
            raise StoreError(
                "Row store sent a malformed response", status_code=response.status_code
            ) from exc


def create_store_client(config: Optional[Settings] = None, **kwargs: Any) -> RowStoreClient:
    """Build a ``RowStoreClient`` from settings, failing fast on missing secrets."""
    config = config or default_settings
    url, key = config.require_store()
    return RowStoreClient(url, key, timeout=config.store_timeout, **kwargs)
