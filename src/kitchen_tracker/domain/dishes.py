"""Domain models for dishes prepared in the kitchen."""

from dataclasses import dataclass
from enum import Enum


class Cuisine(Enum):
    """Closed set of cuisine types, in canonical report order."""

    ITALIAN = "ITALIAN"
    MEXICAN = "MEXICAN"
    CHINESE = "CHINESE"
    INDIAN = "INDIAN"
    AMERICAN = "AMERICAN"
    FRENCH = "FRENCH"
    OTHER = "OTHER"

    @classmethod
    def from_label(cls, label: str) -> "Cuisine | None":
        """Return the cuisine for an exact, case-sensitive label, if any."""
        return _CUISINES_BY_LABEL.get(label)


_CUISINES_BY_LABEL: dict[str, Cuisine] = {entry.value: entry for entry in Cuisine}


@dataclass(frozen=True)
class Dish:
    """Represents a dish order in the kitchen."""

    name: str
    ingredients: tuple[str, ...]
    prep_time: int
    price: float
    cuisine_type: Cuisine

    @property
    def ingredient_count(self) -> int:
        return len(self.ingredients)
