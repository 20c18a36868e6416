"""
Submission endpoints.

Visitors post suggestions for new saunas and correction reports for
existing ones.  Submissions are stored as ``pending``; reviewing them
happens outside this API.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from sauna_directory.app.api.dependencies import (
    envelope,
    error_response,
    get_sauna_service,
    get_submission_service,
)
from sauna_directory.app.core.exceptions import StoreError
from sauna_directory.app.schemas.submission import SubmissionCreate, SubmissionStatus, SubmissionType
from sauna_directory.app.services.sauna_service import SaunaService
from sauna_directory.app.services.submission_service import SubmissionService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_submission(
    submission_in: SubmissionCreate,
    service: SubmissionService = Depends(get_submission_service),
    saunas: SaunaService = Depends(get_sauna_service),
) -> JSONResponse:
    """Submit a new sauna suggestion or a correction report.

    Correction reports must reference an existing sauna; an unknown
    ``sauna_id`` is rejected with 400.
    """
    try:
        if submission_in.sauna_id is not None:
            sauna = await saunas.get_sauna_by_id(submission_in.sauna_id)
            if sauna is None:
                return error_response(
                    status.HTTP_400_BAD_REQUEST,
                    "Unknown sauna",
                    f"No sauna found with ID: {submission_in.sauna_id}",
                )
        submission = await service.create_submission(submission_in)
    except StoreError as e:
        logger.exception("Error creating submission")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create submission", e.message)
    return envelope(status.HTTP_201_CREATED, success=True, data=submission)


@router.get("")
async def list_submissions(
    status_filter: Optional[SubmissionStatus] = Query(None, alias="status"),
    type_filter: Optional[SubmissionType] = Query(None, alias="type"),
    service: SubmissionService = Depends(get_submission_service),
) -> JSONResponse:
    """List submissions, newest first, optionally filtered by status and type."""
    try:
        submissions = await service.list_submissions(status=status_filter, submission_type=type_filter)
    except StoreError as e:
        logger.exception("Error fetching submissions")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch submissions", e.message)
    return envelope(success=True, data=submissions, count=len(submissions))


@router.get("/{submission_id}")
async def get_submission(
    submission_id: str,
    service: SubmissionService = Depends(get_submission_service),
) -> JSONResponse:
    """Retrieve a single submission by ID."""
    if not submission_id.strip():
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Submission ID is required", "Please provide a valid submission ID"
        )
    try:
        submission = await service.get_submission(submission_id)
    except StoreError as e:
        logger.exception("Error fetching submission %s", submission_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch submission", e.message)
    if submission is None:
        return error_response(
            status.HTTP_404_NOT_FOUND, "Submission not found", f"No submission found with ID: {submission_id}"
        )
    return envelope(success=True, data=submission)
