"""Blueprint factory for API routes."""

from flask import Blueprint

from reward_program.services import RewardsService

from .rewards import register_reward_routes


def create_rewards_blueprint(service: RewardsService) -> Blueprint:
    bp = Blueprint("rewards", __name__, url_prefix="/rewards")

    register_reward_routes(bp, service)

    return bp
