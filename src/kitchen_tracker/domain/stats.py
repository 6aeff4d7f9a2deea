"""Domain rules for kitchen statistics."""

from decimal import ROUND_CEILING, ROUND_HALF_UP
from enum import Enum

ELABORATE_MIN_INGREDIENTS = 5
ELABORATE_MIN_PREP_TIME = 60


class RoundingPolicy(Enum):
    """Rounding applied to the elaborate dish percentage."""

    NEAREST = "nearest"
    CEILING = "ceiling"

    @property
    def decimal_mode(self) -> str:
        if self is RoundingPolicy.CEILING:
            return ROUND_CEILING
        return ROUND_HALF_UP
