"""Reward point routes."""

from typing import Any, Dict

from flask import Blueprint, jsonify, request

from reward_program.core import InvalidInput
from reward_program.services import RewardsService, rewards_by_name

KEY_BY_CHOICES = ("name", "id")


def parse_key_by(default: str = "name") -> str:
    raw = request.args.get("keyBy", default)
    value = str(raw).strip().lower()
    if value not in KEY_BY_CHOICES:
        raise InvalidInput("keyBy must be one of: name, id")
    return value


def register_reward_routes(bp: Blueprint, service: RewardsService) -> None:
    @bp.get("/allCustomers")
    def all_rewards():
        """
        Monthly and total points for every customer.
        GET /rewards/allCustomers            -> {"Ashok": {"customerId": 1, "monthlyPoints": {...}, "totalPoints": 655}}
        GET /rewards/allCustomers?keyBy=id   -> {"1": {"customerId": 1, "customerName": "Ashok", ...}}
        """
        key_by = parse_key_by()
        summaries = service.calculate_all_rewards()

        payload: Dict[str, Any]
        if key_by == "id":
            payload = {str(cid): summary.to_dict() for cid, summary in summaries.items()}
        else:
            payload = {
                name: summary.to_dict(include_name=False)
                for name, summary in rewards_by_name(summaries).items()
            }
        return jsonify(payload)

    @bp.get("/<customer_id>")
    def customer_rewards(customer_id: str):
        summary = service.calculate_customer_rewards(customer_id)
        return jsonify(summary.to_dict())

    @bp.get("/<customer_id>/transactions/<month>")
    def monthly_reward(customer_id: str, month: str):
        """
        Points earned by one customer in one calendar month.
        GET /rewards/1/transactions/2025-04
        -> {"customerId": 1, "customerName": "Ashok", "month": "2025-04", "rewardPoints": 25}
        """
        result = service.calculate_monthly_reward_for_customer(customer_id, month)
        return jsonify(result.to_dict())
