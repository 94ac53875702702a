"""Core utilities for the reward program server."""

from .config import get_data_settings, get_server_settings, load_environment
from .database import connect, ensure_indexes, get_database, get_mongo_client
from .errors import STATUS_BY_KIND, ErrorKind, InvalidInput, NoData, NotFound, RewardsError
from .utils import month_key, parse_customer_id, parse_month, to_date, to_decimal

__all__ = [
    "load_environment",
    "get_data_settings",
    "get_server_settings",
    "connect",
    "ensure_indexes",
    "get_database",
    "get_mongo_client",
    "STATUS_BY_KIND",
    "ErrorKind",
    "InvalidInput",
    "NoData",
    "NotFound",
    "RewardsError",
    "month_key",
    "parse_customer_id",
    "parse_month",
    "to_date",
    "to_decimal",
]
