import logging
import os

from dotenv import load_dotenv

from command_proxy.http_client import DEFAULT_BASE_URL

DEFAULT_APP_URL = "http://localhost:5173"


def load_environment():
    """Load environment variables from .env file."""
    env_path = os.path.join(os.getcwd(), ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)


def get_backend_url() -> str:
    """Resolve the research backend base address, preferring ANGSTROM_API_URL."""

    return os.getenv("ANGSTROM_API_URL", DEFAULT_BASE_URL).rstrip("/")


def get_app_url() -> str:
    """Address of the web UI loaded into the desktop window."""

    return os.getenv("DESKTOP_APP_URL", DEFAULT_APP_URL)


def get_log_level() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO
