"""
API configuration loaded from environment or defaults.
"""

import os
from typing import List, Optional


def get_mongodb_uri() -> str:
    """Get MongoDB connection string from env or default."""
    return os.getenv("MONGODB_URI", "mongodb://localhost:27017")


def get_database_name() -> str:
    """Get MongoDB database name."""
    return os.getenv("MONGODB_DB", "movie_db")


def get_mongodb_timeout_ms() -> int:
    """Get server selection timeout in milliseconds."""
    return int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))


def get_firebase_service_key() -> Optional[str]:
    """Get base64-encoded Firebase service account JSON, if configured."""
    return os.getenv("FIREBASE_SERVICE_KEY") or None


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_log_dir() -> str:
    """Get directory for log files."""
    return os.getenv("LOG_DIR", "logs")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT", "3000"))


def get_cors_origins() -> List[str]:
    """Get allowed CORS origins (comma-separated)."""
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
