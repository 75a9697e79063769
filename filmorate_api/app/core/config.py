"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Filmorate API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix for all routes.  Empty by default so that clients written
    # against the plain ``/users`` and ``/films`` paths keep working; set
    # e.g. ``API_PREFIX=/api/v1`` to mount the routers elsewhere.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Number of films returned by ``GET /films/popular`` when the client
    # does not pass ``count``.
    popular_default_count: int = int(os.getenv("POPULAR_DEFAULT_COUNT", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
