"""
Service layer for user submissions (suggestions and corrections).
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.store import RowStoreClient, is_row_id
from ..schemas.submission import (
    SubmissionCreate,
    SubmissionRead,
    SubmissionStatus,
    SubmissionType,
)

logger = logging.getLogger(__name__)

TABLE = "submissions"


class SubmissionService:
    """Read and create rows in the ``submissions`` table."""

    def __init__(self, client: RowStoreClient) -> None:
        self.client = client

    async def create_submission(self, data: SubmissionCreate) -> SubmissionRead:
        """Store a new submission with status ``pending``."""
        payload = data.model_dump(mode="json")
        payload["status"] = SubmissionStatus.PENDING.value
        payload["submitted_data"] = data.submitted_data.model_dump(mode="json", exclude_none=True)
        rows = await self.client.insert(TABLE, [payload])
        submission = SubmissionRead.model_validate(rows[0])
        logger.info("Received %s submission %s", submission.type.value, submission.id)
        return submission

    async def list_submissions(
        self,
        status: Optional[SubmissionStatus] = None,
        submission_type: Optional[SubmissionType] = None,
    ) -> List[SubmissionRead]:
        """Return submissions, newest first."""
        rows = await self.client.select(
            TABLE,
            filters={
                "status": status.value if status else None,
                "type": submission_type.value if submission_type else None,
            },
            order="created_at",
            descending=True,
        )
        return [SubmissionRead.model_validate(row) for row in rows]

    async def get_submission(self, submission_id: str) -> Optional[SubmissionRead]:
        if not is_row_id(submission_id):
            return None
        row = await self.client.select_one(TABLE, filters={"id": submission_id})
        return SubmissionRead.model_validate(row) if row else None
