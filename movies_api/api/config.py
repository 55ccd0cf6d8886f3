"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:8080",
    "http://localhost:1234",
    "http://movies.com",
    "http://midu.dev",
)


def get_seed_path() -> str:
    """Get seed dataset path from env or the packaged default."""
    return os.getenv("MOVIES_SEED_PATH", "") or str(
        Path(__file__).resolve().parents[1] / "data" / "movies.json"
    )


def get_allowed_origins() -> list[str]:
    """Get CORS allow-list from comma-separated env or defaults."""
    raw = os.getenv("ALLOWED_ORIGINS", "")
    if not raw.strip():
        return list(DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT", "1234"))
