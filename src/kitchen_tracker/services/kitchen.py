"""Kitchen service tracking dish orders and preparation statistics."""

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from kitchen_tracker.domain.bag import ArrayBag
from kitchen_tracker.domain.dishes import Cuisine, Dish
from kitchen_tracker.domain.stats import (
    ELABORATE_MIN_INGREDIENTS,
    ELABORATE_MIN_PREP_TIME,
    RoundingPolicy,
)

logger = logging.getLogger(__name__)

_WHOLE = Decimal("1")
_HUNDREDTH = Decimal("0.01")


class ReportSink(Protocol):
    """Text output target for kitchen reports."""

    def write(self, text: str, /) -> object:
        """Write text to the sink."""


@dataclass(frozen=True)
class KitchenReport:
    """Snapshot of per-cuisine counts and preparation statistics."""

    cuisine_counts: dict[Cuisine, int]
    average_prep_time: int
    elaborate_percentage: float

    def render(self) -> str:
        """Render the report in its plain-text layout."""
        lines = [
            f"{cuisine.value}: {self.cuisine_counts.get(cuisine, 0)}"
            for cuisine in Cuisine
        ]
        lines.append("")
        lines.append(f"AVERAGE PREP TIME: {self.average_prep_time}")
        lines.append(f"ELABORATE DISHES: {self.elaborate_percentage:.2f}%")
        return "\n".join(lines) + "\n"


class KitchenService:
    """Collection of dishes with incrementally maintained statistics.

    The preparation time sum and elaborate dish count are updated alongside
    every insertion and removal and are never recomputed from the contents.
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        min_ingredients: int = ELABORATE_MIN_INGREDIENTS,
        min_prep_time: int = ELABORATE_MIN_PREP_TIME,
        rounding: RoundingPolicy = RoundingPolicy.NEAREST,
    ) -> None:
        self._dishes: ArrayBag[Dish] = ArrayBag(capacity)
        self._min_ingredients = min_ingredients
        self._min_prep_time = min_prep_time
        self.rounding = rounding
        self._total_prep_time = 0
        self._elaborate_count = 0

    @property
    def capacity(self) -> int | None:
        return self._dishes.capacity

    @property
    def min_ingredients(self) -> int:
        """Minimum ingredient count for an elaborate dish."""
        return self._min_ingredients

    @property
    def min_prep_time(self) -> int:
        """Minimum preparation time for an elaborate dish."""
        return self._min_prep_time

    def __len__(self) -> int:
        return len(self._dishes)

    def __contains__(self, dish: object) -> bool:
        return dish in self._dishes

    def dishes(self) -> list[Dish]:
        """Return a snapshot of the dishes currently in the kitchen."""
        return self._dishes.to_list()

    def is_elaborate(self, dish: Dish) -> bool:
        """Return True if the dish has enough ingredients and prep time."""
        return (
            dish.ingredient_count >= self._min_ingredients
            and dish.prep_time >= self._min_prep_time
        )

    def new_order(self, dish: Dish) -> bool:
        """Add a dish unless it is already present or the kitchen is full."""
        if not self._dishes.add(dish):
            logger.debug("Rejected order for %s", dish.name)
            return False
        self._track(dish)
        return True

    def serve_dish(self, dish: Dish) -> bool:
        """Remove a dish from the kitchen, if present."""
        if not self._dishes.remove(dish):
            return False
        self._untrack(dish)
        return True

    def prep_time_sum(self) -> int:
        """Return the total preparation time of all dishes."""
        return self._total_prep_time

    def average_prep_time(self) -> int:
        """Return the average preparation time rounded half up, 0 when empty."""
        count = len(self._dishes)
        if count == 0:
            return 0
        average = Decimal(self._total_prep_time) / Decimal(count)
        return int(average.quantize(_WHOLE, rounding=ROUND_HALF_UP))

    def elaborate_dish_count(self) -> int:
        """Return the number of elaborate dishes."""
        return self._elaborate_count

    def elaborate_percentage(self) -> float:
        """Return the share of elaborate dishes as a percentage.

        The value is rounded to two decimal places using the configured
        rounding policy. An empty kitchen reports 0.0.
        """
        count = len(self._dishes)
        if count == 0:
            return 0.0
        percentage = Decimal(self._elaborate_count * 100) / Decimal(count)
        return float(
            percentage.quantize(_HUNDREDTH, rounding=self.rounding.decimal_mode)
        )

    def tally_cuisine_types(self, cuisine_type: str) -> int:
        """Return the number of dishes of the given cuisine label."""
        cuisine = Cuisine.from_label(cuisine_type)
        if cuisine is None:
            return 0
        return sum(1 for dish in self._dishes if dish.cuisine_type is cuisine)

    def release_dishes_below_prep_time(self, threshold: int) -> int:
        """Remove dishes with preparation time below the threshold."""
        removed = self._release(lambda dish: dish.prep_time < threshold)
        logger.debug("Released %d dishes below %d minutes", removed, threshold)
        return removed

    def release_dishes_of_cuisine_type(self, cuisine_type: str) -> int:
        """Remove all dishes of the given cuisine label."""
        cuisine = Cuisine.from_label(cuisine_type)
        if cuisine is None:
            return 0
        removed = self._release(lambda dish: dish.cuisine_type is cuisine)
        logger.debug("Released %d %s dishes", removed, cuisine.value)
        return removed

    def build_report(self) -> KitchenReport:
        """Return the current report data."""
        counts = dict.fromkeys(Cuisine, 0)
        for dish in self._dishes:
            counts[dish.cuisine_type] += 1
        return KitchenReport(
            cuisine_counts=counts,
            average_prep_time=self.average_prep_time(),
            elaborate_percentage=self.elaborate_percentage(),
        )

    def kitchen_report(self, sink: ReportSink | None = None) -> None:
        """Write the kitchen report to the sink, stdout by default."""
        target = sink if sink is not None else sys.stdout
        target.write(self.build_report().render())

    def _release(self, predicate: Callable[[Dish], bool]) -> int:
        removed = self._dishes.remove_where(predicate)
        for dish in removed:
            self._untrack(dish)
        return len(removed)

    def _track(self, dish: Dish) -> None:
        self._total_prep_time += dish.prep_time
        if self.is_elaborate(dish):
            self._elaborate_count += 1

    def _untrack(self, dish: Dish) -> None:
        self._total_prep_time -= dish.prep_time
        if self.is_elaborate(dish):
            self._elaborate_count -= 1
