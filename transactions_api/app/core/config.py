"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all: it listens on port
4005, keeps its data in ``roxiler.db`` next to the package and seeds
itself from the public product transaction dataset.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Transactions API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Address and port used by ``run.py`` when serving with uvicorn.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4005"))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the package directory by ``core.db``; ``:memory:`` is
    # passed to SQLite untouched.
    database_url: str = os.getenv("DATABASE_URL", "roxiler.db")

    # Remote JSON array used to populate the ``products`` table at startup.
    seed_url: str = os.getenv(
        "SEED_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    )
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "true")
    seed_timeout: float = float(os.getenv("SEED_TIMEOUT", "15"))

    # Month name used when a request does not carry a ``month`` parameter.
    default_month: str = os.getenv("DEFAULT_MONTH", "march")

    # Comma‑separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Optional mount point for the routes, e.g. ``/api``.  Empty means root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
