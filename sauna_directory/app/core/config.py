"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first so that local development does not require exporting
variables by hand.  Defaults are provided for everything except the
row store credentials, which must always be supplied.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()


def _env(*names: str, default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty environment variable among ``names``."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Stockholm Sauna Directory")
    description: str = os.getenv(
        "PROJECT_DESCRIPTION", "The most comprehensive directory of saunas in Stockholm"
    )
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Hosted row store (Supabase / PostgREST).  The NEXT_PUBLIC_* names
    # are accepted so the same .env file can be shared with the web
    # frontend.
    supabase_url: Optional[str] = _env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
    supabase_key: Optional[str] = _env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY")

    # Upper bound in seconds for a single row store call.
    store_timeout: float = float(os.getenv("STORE_TIMEOUT", "10"))

    # Zone used when deciding whether a sauna is open right now.
    timezone: str = os.getenv("TIMEZONE", "Europe/Stockholm")

    def require_store(self) -> tuple[str, str]:
        """Return ``(url, key)`` for the row store or fail.

        Raises
        ------
        ConfigurationError
            If either the endpoint URL or the access key is missing.
        """
        if not self.supabase_url or not self.supabase_key:
            raise ConfigurationError(
                "Missing required Supabase environment variables "
                "(SUPABASE_URL and SUPABASE_ANON_KEY)"
            )
        return self.supabase_url, self.supabase_key


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
