from .calculator import calculate_points
from .rewards import RewardsService, points_by_month, rewards_by_name, summarize_customer

__all__ = [
    "calculate_points",
    "RewardsService",
    "points_by_month",
    "rewards_by_name",
    "summarize_customer",
]
