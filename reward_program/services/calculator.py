from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from reward_program.core.utils import to_decimal

LOWER_THRESHOLD = Decimal(50)
UPPER_THRESHOLD = Decimal(100)
UPPER_TIER_MULTIPLIER = Decimal(2)


def calculate_points(amount: Union[Decimal, int, float, str]) -> int:
    """Reward points earned by a single purchase.

    No points up to $50, one point per dollar between $50 and $100, and two
    points per dollar above $100. The middle band is always counted in full
    once the amount passes $100. Fractions are floored on the point value.
    """
    value = to_decimal(amount)
    if value <= LOWER_THRESHOLD:
        return 0
    if value <= UPPER_THRESHOLD:
        return math.floor(value - LOWER_THRESHOLD)
    middle_band = int(UPPER_THRESHOLD - LOWER_THRESHOLD)
    return middle_band + math.floor((value - UPPER_THRESHOLD) * UPPER_TIER_MULTIPLIER)
