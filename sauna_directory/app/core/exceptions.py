"""
Exception types shared across the application.

Only the boundaries raise these: configuration loading and row store
access.  The slug and opening hours helpers never raise.
"""

from typing import Optional


class ConfigurationError(RuntimeError):
    """Required configuration (such as the store credentials) is missing."""


class StoreError(Exception):
    """The row store rejected a request or could not be reached.

    ``status_code`` is the upstream HTTP status when one was received
    and ``code`` the PostgREST error code, if any.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
