"""Configuration helpers for the Flask application."""

import os
from typing import Any, Dict

from dotenv import load_dotenv

DATA_SOURCES = ("memory", "mongo")


def load_environment() -> None:
    """Load environment variables from a .env file when available."""
    load_dotenv()


def get_data_settings() -> Dict[str, Any]:
    """Return customer data source settings derived from environment variables."""
    source = os.environ.get("REWARDS_DATA_SOURCE", "memory").strip().lower()
    if source not in DATA_SOURCES:
        raise RuntimeError(f"REWARDS_DATA_SOURCE must be one of {', '.join(DATA_SOURCES)}, got {source!r}")
    settings: Dict[str, Any] = {
        "source": source,
        "collection": os.environ.get("REWARDS_COLLECTION", "customers"),
    }
    if source == "mongo":
        uri = os.environ.get("MONGODB_URI")
        if not uri:
            raise RuntimeError("MONGODB_URI must be set when REWARDS_DATA_SOURCE=mongo")
        settings["mongo_uri"] = uri
        settings["mongo_db"] = os.environ.get("MONGODB_DB")
    return settings


def get_server_settings() -> Dict[str, Any]:
    return {
        "client_origin": os.environ.get("CLIENT_ORIGIN", "http://localhost:5173").rstrip("/"),
        "log_level": os.environ.get("LOG_LEVEL", "INFO").strip().upper(),
        "port": int(os.environ.get("PORT", "8000")),
        "debug": os.environ.get("FLASK_DEBUG", "1") in ("1", "true", "True"),
    }
