"""Shared parsing and formatting helpers."""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from .errors import InvalidInput

MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")
CUSTOMER_ID_PATTERN = re.compile(r"[0-9]+")
# ISO date, optionally followed by a "T" or space separated time part
DATE_PATTERN = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2})"
    r"(?:[T ][0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:\.[0-9]+)?)?(?:Z|[+-][0-9]{2}:?[0-9]{2})?)?"
)
# ids are stored as BSON int64
MAX_CUSTOMER_ID = 2 ** 63 - 1


def month_key(value: date) -> str:
    return f"{int(value.year):04d}-{int(value.month):02d}"


def parse_month(raw: Any) -> date:
    """Parse a ``YYYY-MM`` token into the first day of that month."""
    match = MONTH_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise InvalidInput("Invalid month format. Use yyyy-MM.")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise InvalidInput("Invalid month format. Use yyyy-MM.")
    return date(year, month, 1)


def parse_customer_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise InvalidInput(f"Invalid customer id: {raw}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if len(text) > 19 or CUSTOMER_ID_PATTERN.fullmatch(text) is None:
            raise InvalidInput(f"Invalid customer id: {raw}")
        value = int(text)
    if not 0 < value <= MAX_CUSTOMER_ID:
        raise InvalidInput(f"Invalid customer id: {raw}")
    return value


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        # floats go through str() so 120.1 stays 120.1 rather than its binary expansion
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        match = DATE_PATTERN.fullmatch(value.strip())
        if match is not None:
            try:
                return datetime.strptime(match.group(1), "%Y-%m-%d").date()
            except ValueError as exc:
                raise ValueError(f"Invalid transaction date: {value!r}") from exc
    raise ValueError(f"Invalid transaction date: {value!r}")
