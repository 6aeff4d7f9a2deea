"""Validated input models for incoming dish orders."""

from pydantic import BaseModel, Field, TypeAdapter

from kitchen_tracker.domain.dishes import Cuisine, Dish


class DishOrder(BaseModel):
    """Single dish order as received from an external source."""

    name: str = Field(min_length=1)
    ingredients: list[str] = Field(default_factory=list)
    prep_time: int = Field(ge=0)
    price: float = Field(default=0.0, ge=0.0)
    cuisine_type: Cuisine

    def to_dish(self) -> Dish:
        """Convert the order into an immutable dish record."""
        return Dish(
            name=self.name,
            ingredients=tuple(self.ingredients),
            prep_time=self.prep_time,
            price=self.price,
            cuisine_type=self.cuisine_type,
        )


_ORDER_LIST = TypeAdapter(list[DishOrder])


def parse_orders(raw: str | bytes) -> list[DishOrder]:
    """Validate a JSON array of dish orders."""
    return _ORDER_LIST.validate_json(raw)
