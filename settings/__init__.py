"""Application settings."""

import os
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database
DB_PATH = os.getenv("GOVERNANCE_DB_PATH", "governance.duckdb")

# Logging
LOG_DIR = Path(os.getenv("GOVERNANCE_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("GOVERNANCE_LOG_LEVEL", "INFO")

# Access policy
# Users without a contract may access any practice unless this is switched off.
ALLOW_UNSCOPED_ACCESS = _env_bool("ALLOW_UNSCOPED_ACCESS", True)
COMMITTEE_ADMIN_ROLES = ("Admin", "Editor")

# Stage resolution
# Stage key used for status text that matches no known phrase.
UNKNOWN_STATUS_STAGE = os.getenv("UNKNOWN_STATUS_STAGE", "completed")

# Dashboard
DASHBOARD_MAX_WORKERS = int(os.getenv("DASHBOARD_MAX_WORKERS", "4"))
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
