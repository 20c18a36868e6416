"""
Pydantic models for user submissions.

Visitors can suggest a new sauna or report incorrect details about an
existing one.  Submissions start out ``pending`` and are reviewed by an
administrator outside of this API.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class SubmissionType(str, Enum):
    NEW_SUGGESTION = "new_suggestion"
    CORRECTION = "correction_report"


class SubmissionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SubmittedData(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    notes: Optional[str] = None
    incorrect_fields: Optional[List[str]] = None


class SubmissionCreate(BaseModel):
    """Schema for creating a submission."""

    type: SubmissionType
    sauna_id: Optional[str] = Field(None, description="Sauna the correction refers to")
    submitted_data: SubmittedData = Field(default_factory=SubmittedData)

    @model_validator(mode="after")
    def check_type_requirements(self) -> "SubmissionCreate":
        """A correction needs a sauna; a suggestion needs at least a name."""
        if self.type is SubmissionType.CORRECTION and not self.sauna_id:
            raise ValueError("sauna_id is required for a correction report")
        if self.type is SubmissionType.NEW_SUGGESTION:
            name = self.submitted_data.name
            if not name or not name.strip():
                raise ValueError("submitted_data.name is required for a new suggestion")
        return self


class SubmissionRead(BaseModel):
    """A stored submission."""

    id: str
    created_at: datetime
    type: SubmissionType
    status: SubmissionStatus
    sauna_id: Optional[str] = None
    submitted_data: SubmittedData

    model_config = {
        "from_attributes": True,
    }
