"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with no configuration at all: SQLite file in the
working directory (or on the mounted data disk when present), strict
account mode, CORS open to every origin.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

ACCOUNT_MODES = ("strict", "auto_register")

DATABASE_FILENAME = "database.sqlite"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Explicit path to the SQLite file.  When empty the location is
    # chosen by ``resolve_database_path``.
    database_path: str = os.getenv("DATABASE_PATH", "")

    # Mount point of the persistent disk in hosted deployments.  If the
    # directory exists the database file is placed inside it.
    data_dir: str = os.getenv("DATA_DIR", "/var/data")

    # ``strict``: accounts are created only by POST /api/register.
    # ``auto_register``: the first login with an unknown email creates
    # the account and /api/register is not exposed.
    account_mode: str = os.getenv("ACCOUNT_MODE", "strict").lower()

    # Comma‑separated list of allowed origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Upper bound on request bodies.  Post uploads may carry inline
    # base64 images, hence the generous default of 50 MB.
    max_body_bytes: int = int(os.getenv("MAX_BODY_BYTES", str(50 * 1024 * 1024)))

    # Optional directory with a front‑end to serve at ``/``.
    static_dir: Optional[str] = os.getenv("STATIC_DIR") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def resolve_database_path(config: Settings) -> str:
    """Compute the path to the SQLite database file.

    An explicit ``database_path`` always wins.  Otherwise the file is
    placed in ``data_dir`` when that directory exists (deployment with
    a mounted disk) and in the current working directory when it does
    not (local development).
    """
    if config.database_path:
        return str(Path(config.database_path).expanduser().resolve())
    if config.data_dir and os.path.isdir(config.data_dir):
        return str(Path(config.data_dir) / DATABASE_FILENAME)
    return str((Path.cwd() / DATABASE_FILENAME).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
