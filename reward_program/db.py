# db.py
from __future__ import annotations

import abc
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from bson.decimal128 import Decimal128
from pymongo import ASCENDING
from pymongo.collection import Collection

from reward_program.core.utils import to_date, to_decimal
from reward_program.models import Customer, Transaction

logger = logging.getLogger(__name__)


class CustomerProvider(abc.ABC):
    """Read-only source of customers and their transactions."""

    @abc.abstractmethod
    def list_customers(self) -> Iterable[Customer]:
        raise NotImplementedError

    @abc.abstractmethod
    def find_customer(self, customer_id: int) -> Optional[Customer]:
        raise NotImplementedError


class InMemoryCustomerProvider(CustomerProvider):
    def __init__(self, customers: Iterable[Customer]) -> None:
        self._customers: Tuple[Customer, ...] = tuple(customers)

    def list_customers(self) -> Tuple[Customer, ...]:
        return self._customers

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        return next((c for c in self._customers if c.id == customer_id), None)


# ---------- Mongo documents ----------

def _amount_from_document(raw: Any):
    if isinstance(raw, Decimal128):
        raw = raw.to_decimal()
    if raw is None:
        raise ValueError("Transaction is missing an amount")
    return to_decimal(raw)


def transaction_from_document(doc: Dict[str, Any]) -> Transaction:
    return Transaction(date=to_date(doc.get("date")), amount=_amount_from_document(doc.get("amount")))


def customer_from_document(doc: Dict[str, Any]) -> Customer:
    """
    Convert a stored customer document into a Customer.
    Expected shape: {"id": int, "name": str, "transactions": [{"date", "amount"}]}.
    """
    raw_id = doc.get("id")
    if isinstance(raw_id, bool) or not isinstance(raw_id, int):
        raise ValueError(f"Customer document has no integer id: {doc.get('_id')!r}")
    name = doc.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Customer {raw_id} has no name")
    transactions = tuple(transaction_from_document(txn) for txn in doc.get("transactions") or [])
    return Customer(id=raw_id, name=name, transactions=transactions)


def customer_to_document(customer: Customer) -> Dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "transactions": [
            {
                # BSON stores datetimes, not bare dates
                "date": datetime(txn.date.year, txn.date.month, txn.date.day),
                "amount": Decimal128(txn.amount),
            }
            for txn in customer.transactions
        ],
    }


class MongoCustomerProvider(CustomerProvider):
    """Customers read from a MongoDB collection; queries never write."""

    PROJECTION = {"_id": 0, "id": 1, "name": 1, "transactions": 1}

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def list_customers(self) -> List[Customer]:
        cursor = self.collection.find({}, self.PROJECTION).sort([("id", ASCENDING)])
        customers = [customer_from_document(doc) for doc in cursor]
        logger.debug("loaded %d customers from %s", len(customers), self.collection.name)
        return customers

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        doc = self.collection.find_one({"id": customer_id}, self.PROJECTION)
        if doc is None:
            return None
        return customer_from_document(doc)
