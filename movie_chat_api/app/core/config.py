"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
override them via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Movie Chat API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty string means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "movies.db")
    # Seconds to wait for a locked database before giving up.
    database_timeout: float = float(os.getenv("DATABASE_TIMEOUT", "5.0"))

    # Routes are mounted under this prefix.  Empty keeps ``/movies`` and
    # ``/chat`` at the root, which is what existing clients call.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Comma-separated list of allowed origins, or ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Prefix for ``backdrop_path`` and ``poster_path`` in catalog listings.
    image_base_url: str = os.getenv("IMAGE_BASE_URL", "https://image.tmdb.org/t/p/original")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8081"))

    def cors_origin_list(self) -> list[str]:
        """Return ``cors_origins`` split into a list."""
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
