from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, Mapping

from reward_program.core.errors import NoData, NotFound
from reward_program.core.utils import month_key, parse_customer_id, parse_month
from reward_program.db import CustomerProvider
from reward_program.models import Customer, CustomerRewardSummary, MonthlyRewardResult, Transaction

from .calculator import calculate_points

logger = logging.getLogger(__name__)


def points_by_month(transactions: Iterable[Transaction]) -> Dict[str, int]:
    totals: Dict[str, int] = defaultdict(int)
    for txn in transactions:
        totals[month_key(txn.date)] += calculate_points(txn.amount)
    return dict(totals)


def summarize_customer(customer: Customer) -> CustomerRewardSummary:
    monthly = points_by_month(customer.transactions)
    return CustomerRewardSummary(
        customer_id=customer.id,
        customer_name=customer.name,
        monthly_points=monthly,
        total_points=sum(monthly.values()),
    )


def rewards_by_name(summaries: Mapping[int, CustomerRewardSummary]) -> Dict[str, CustomerRewardSummary]:
    """Re-key summaries by customer name; on a name clash the later customer wins."""
    by_name: Dict[str, CustomerRewardSummary] = {}
    for summary in summaries.values():
        previous = by_name.get(summary.customer_name)
        if previous is not None:
            logger.warning(
                "customer name %r shared by ids %s and %s; keeping %s",
                summary.customer_name,
                previous.customer_id,
                summary.customer_id,
                summary.customer_id,
            )
        by_name[summary.customer_name] = summary
    return by_name


class RewardsService:
    """Reward point queries over a read-only customer provider."""

    def __init__(self, provider: CustomerProvider) -> None:
        self.provider = provider

    def _get_customer(self, customer_id) -> Customer:
        cid = parse_customer_id(customer_id)
        customer = self.provider.find_customer(cid)
        if customer is None:
            raise NotFound(f"Customer not found with ID: {cid}")
        return customer

    def calculate_monthly_reward_for_customer(self, customer_id, month: str) -> MonthlyRewardResult:
        target = parse_month(month)
        customer = self._get_customer(customer_id)
        key = month_key(target)

        points = sum(
            calculate_points(txn.amount)
            for txn in customer.transactions
            if (txn.date.year, txn.date.month) == (target.year, target.month)
        )
        return MonthlyRewardResult(
            customer_id=customer.id,
            customer_name=customer.name,
            month=key,
            points=points,
        )

    def calculate_customer_rewards(self, customer_id) -> CustomerRewardSummary:
        return summarize_customer(self._get_customer(customer_id))

    def calculate_all_rewards(self) -> Dict[int, CustomerRewardSummary]:
        customers = list(self.provider.list_customers())
        if not customers:
            raise NoData("No customer data available.")

        result: Dict[int, CustomerRewardSummary] = {}
        for customer in customers:
            result[customer.id] = summarize_customer(customer)
        logger.debug("computed rewards for %d customers", len(result))
        return result
