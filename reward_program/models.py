from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Transaction:
    date: date
    amount: Decimal


@dataclass(frozen=True)
class Customer:
    id: int
    name: str
    transactions: Tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class MonthlyRewardResult:
    customer_id: int
    customer_name: str
    month: str
    points: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customerId": self.customer_id,
            "customerName": self.customer_name,
            "month": self.month,
            "rewardPoints": self.points,
        }


@dataclass(frozen=True)
class CustomerRewardSummary:
    customer_id: int
    customer_name: str
    monthly_points: Dict[str, int] = field(default_factory=dict)
    total_points: int = 0

    def to_dict(self, include_name: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"customerId": self.customer_id}
        if include_name:
            payload["customerName"] = self.customer_name
        payload["monthlyPoints"] = dict(self.monthly_points)
        payload["totalPoints"] = self.total_points
        return payload
