# mock_customers.py
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Tuple

from pymongo.collection import Collection

from reward_program.db import customer_to_document
from reward_program.models import Customer, Transaction

logger = logging.getLogger(__name__)


def _txns(*rows: Tuple[date, int]) -> Tuple[Transaction, ...]:
    return tuple(Transaction(date=d, amount=Decimal(amount)) for d, amount in rows)


# Amounts cover every tier: under $50, the $50-$100 band, and above $100.
MOCK_CUSTOMERS: Tuple[Customer, ...] = (
    Customer(1, "Ashok", _txns(
        (date(2024, 3, 1), 120),
        (date(2025, 3, 10), 220),
        (date(2025, 4, 5), 75),
        (date(2025, 5, 15), 200),
    )),
    Customer(2, "Kumar", _txns(
        (date(2025, 3, 10), 60),
        (date(2025, 4, 20), 110),
        (date(2025, 4, 21), 90),
        (date(2025, 6, 29), 190),
    )),
    Customer(3, "Ram", _txns(
        (date(2024, 4, 10), 60),
        (date(2024, 5, 20), 110),
        (date(2025, 6, 21), 90),
        (date(2025, 9, 29), 190),
    )),
    Customer(4, "Leela", _txns(
        (date(2024, 2, 11), 60),
        (date(2025, 5, 21), 110),
        (date(2025, 8, 26), 90),
        (date(2025, 9, 28), 190),
    )),
    Customer(5, "Chinta", _txns(
        (date(2025, 5, 10), 45),
        (date(2025, 5, 15), 50),
        (date(2025, 5, 20), 51),
    )),
)


def seed_mock_customers(
    db,
    *,
    customers: Iterable[Customer] = MOCK_CUSTOMERS,
    collection: str = "customers",
) -> int:
    """Upsert the mock customers keyed by id. Existing documents are left untouched. Returns inserted count."""
    coll: Collection = db[collection]
    inserted = 0
    total = 0
    for customer in customers:
        res = coll.update_one(
            {"id": customer.id},
            {"$setOnInsert": customer_to_document(customer)},
            upsert=True,
        )
        if res.upserted_id is not None:
            inserted += 1
        total += 1
    logger.info("seeded %d of %d mock customers into %s", inserted, total, collection)
    return inserted
