"""
Sauna endpoints.

Read routes are public and back the listing page, the map and the
detail page.  ``POST`` and ``PATCH`` are administrative; authentication
is handled outside this service.  Every route answers with the
``{success, data, count, error, message}`` envelope.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from sauna_directory.app.api.dependencies import envelope, error_response, get_sauna_service
from sauna_directory.app.core.config import settings
from sauna_directory.app.core.exceptions import StoreError
from sauna_directory.app.schemas.sauna import BookingType, SaunaCreate, SaunaUpdate, Setting
from sauna_directory.app.services.sauna_service import SaunaService

logger = logging.getLogger(__name__)

router = APIRouter()


def _missing_slug() -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Sauna slug is required", "Please provide a valid sauna slug"
    )


def _missing_id() -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Sauna ID is required", "Please provide a valid sauna ID"
    )


@router.get("")
async def list_saunas(
    setting: Optional[Setting] = Query(None),
    booking_type: Optional[BookingType] = Query(None),
    has_lake_access: Optional[bool] = Query(None),
    service: SaunaService = Depends(get_sauna_service),
) -> JSONResponse:
    """Return all saunas ordered by name.

    - **setting**, **booking_type**, **has_lake_access**: optional
      equality filters.
    """
    try:
        saunas = await service.list_saunas(
            setting=setting, booking_type=booking_type, has_lake_access=has_lake_access
        )
    except StoreError as e:
        logger.exception("Error fetching saunas")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch saunas", e.message)
    return envelope(success=True, data=saunas, count=len(saunas))


@router.get("/map")
async def list_map_markers(service: SaunaService = Depends(get_sauna_service)) -> JSONResponse:
    """Return marker data (name, slug, approximate coordinates) for the map."""
    try:
        markers = await service.list_markers()
    except StoreError as e:
        logger.exception("Error fetching map markers")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch saunas", e.message)
    return envelope(success=True, data=markers, count=len(markers))


@router.get("/slug/", include_in_schema=False)
async def get_sauna_by_empty_slug() -> JSONResponse:
    return _missing_slug()


@router.get("/slug/{slug}")
async def get_sauna_by_slug(
    slug: str,
    service: SaunaService = Depends(get_sauna_service),
) -> JSONResponse:
    """Resolve a URL slug to a sauna and add open/closed details.

    Returns 404 if no sauna name matches the slug.
    """
    if not slug.strip():
        return _missing_slug()
    try:
        sauna = await service.get_sauna_by_slug(slug)
    except StoreError as e:
        logger.exception("Error fetching sauna by slug %s", slug)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch sauna", e.message)
    if sauna is None:
        return error_response(
            status.HTTP_404_NOT_FOUND, "Sauna not found", f"No sauna found with slug: {slug}"
        )
    return envelope(success=True, data=service.to_detail(sauna, timezone=settings.timezone))


@router.get("/{sauna_id}")
async def get_sauna(
    sauna_id: str,
    service: SaunaService = Depends(get_sauna_service),
) -> JSONResponse:
    """Retrieve a single sauna by its ID."""
    if not sauna_id.strip():
        return _missing_id()
    try:
        sauna = await service.get_sauna_by_id(sauna_id)
    except StoreError as e:
        logger.exception("Error fetching sauna %s", sauna_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch sauna", e.message)
    if sauna is None:
        return error_response(
            status.HTTP_404_NOT_FOUND, "Sauna not found", f"No sauna found with ID: {sauna_id}"
        )
    return envelope(success=True, data=sauna)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_sauna(
    sauna_in: SaunaCreate,
    service: SaunaService = Depends(get_sauna_service),
) -> JSONResponse:
    """Create a sauna (admin)."""
    try:
        sauna = await service.create_sauna(sauna_in)
    except StoreError as e:
        logger.exception("Error creating sauna %s", sauna_in.name)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create sauna", e.message)
    return envelope(status.HTTP_201_CREATED, success=True, data=sauna)


@router.patch("/{sauna_id}")
async def update_sauna(
    sauna_id: str,
    updates: SaunaUpdate,
    service: SaunaService = Depends(get_sauna_service),
) -> JSONResponse:
    """Update an existing sauna (admin).

    Partial updates are supported; unspecified fields remain unchanged.
    """
    if not sauna_id.strip():
        return _missing_id()
    try:
        sauna = await service.update_sauna(sauna_id, updates)
    except StoreError as e:
        logger.exception("Error updating sauna %s", sauna_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update sauna", e.message)
    if sauna is None:
        return error_response(
            status.HTTP_404_NOT_FOUND, "Sauna not found", f"No sauna found with ID: {sauna_id}"
        )
    return envelope(success=True, data=sauna)
