"""Database helpers and index management."""

from typing import Any, Dict, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.errors import ConfigurationError


def get_mongo_client(uri: str) -> MongoClient:
    return MongoClient(uri, tlsAllowInvalidCertificates=False)


def get_database(client: MongoClient, db_name: Optional[str] = None):
    if db_name:
        return client[db_name]
    try:
        return client.get_default_database()
    except ConfigurationError as exc:
        raise RuntimeError("Database name must be provided via connection string or MONGODB_DB") from exc


def ensure_indexes(database: Any, collection: str = "customers") -> None:
    customers = database[collection]
    customers.create_index([("id", ASCENDING)], unique=True, name="id_1")
    customers.create_index([("name", ASCENDING)], name="name_1")


def connect(settings: Dict[str, Any]):
    """Open the configured database and make sure its indexes exist."""
    client = get_mongo_client(settings["mongo_uri"])
    database = get_database(client, settings.get("mongo_db"))
    ensure_indexes(database, settings.get("collection", "customers"))
    return database
