"""
FastAPI dependencies shared by the endpoint modules.

The application opens one ``RowStoreClient`` at startup and keeps it on
``app.state.store``.  Services are built per request around that client.
Tests replace ``get_sauna_service`` / ``get_submission_service`` through
``app.dependency_overrides``.
"""

from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..core.exceptions import ConfigurationError
from ..core.store import RowStoreClient
from ..schemas.common import ApiResponse
from ..services.sauna_service import SaunaService
from ..services.submission_service import SubmissionService


def get_store_client(request: Request) -> RowStoreClient:
    client: Optional[RowStoreClient] = getattr(request.app.state, "store", None)
    if client is None:
        raise ConfigurationError("Row store client is not initialised")
    return client


def get_sauna_service(client: RowStoreClient = Depends(get_store_client)) -> SaunaService:
    return SaunaService(client)


def get_submission_service(client: RowStoreClient = Depends(get_store_client)) -> SubmissionService:
    return SubmissionService(client)


def envelope(status_code: int = 200, **fields: Any) -> JSONResponse:
    """Build a JSON response in the ``{success, data, ...}`` envelope.

    Unset envelope keys are omitted; ``None`` values inside ``data``
    are kept so every record has the same shape.
    """
    response = ApiResponse(**fields)
    body: Dict[str, Any] = {
        key: value for key, value in response if value is not None
    }
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return envelope(status_code, success=False, error=error, message=message)
