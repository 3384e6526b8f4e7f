"""
Configuration and logging setup.

Loads settings from the .env file in the backend directory and
falls back to the process environment and built-in defaults.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv


# Load .env from backend directory
_backend_dir = Path(__file__).parent.parent.parent
_env_path = _backend_dir / ".env"
load_dotenv(_env_path)

DEFAULT_UPSTREAM_URL = "https://lego.isscatering.dk"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def get_upstream_url() -> str:
    """Get the canteen site base URL, without trailing slash."""
    return os.getenv("LUNCH_UPSTREAM_URL", DEFAULT_UPSTREAM_URL).rstrip("/")


def get_request_timeout() -> float:
    """Get the upstream request timeout in seconds."""
    value = os.getenv("LUNCH_REQUEST_TIMEOUT")
    if not value:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"LUNCH_REQUEST_TIMEOUT must be a number, got {value!r}")
    if timeout <= 0:
        raise ValueError(f"LUNCH_REQUEST_TIMEOUT must be positive, got {value!r}")
    return timeout


def get_host() -> str:
    return os.getenv("HOST", DEFAULT_HOST)


def get_port() -> int:
    value = os.getenv("PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {value!r}")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def configure_logging(log_level: str = None) -> None:
    """Configure root logging for the service."""
    level = (log_level or get_log_level()).upper()
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(__name__).info(f"Logging configured at {level} level")
