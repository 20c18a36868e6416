"""
Uniform response envelope.

Every API route answers with ``{success, data?, count?, error?,
message?}``.  Unset keys are left out of the JSON body.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ApiResponse(BaseModel):
    success: bool
    data: Optional[Any] = None
    count: Optional[int] = None
    error: Optional[str] = None
    message: Optional[str] = None
