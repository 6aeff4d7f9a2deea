"""Tests for dish order validation."""

import json

import pytest
from pydantic import ValidationError

from kitchen_tracker.domain.dishes import Cuisine, Dish
from kitchen_tracker.domain.orders import DishOrder, parse_orders


def test_order_converts_to_dish() -> None:
    order = DishOrder(
        name="Ramen",
        ingredients=["noodles", "broth", "egg"],
        prep_time=45,
        price=14.0,
        cuisine_type="OTHER",
    )

    assert order.to_dish() == Dish(
        name="Ramen",
        ingredients=("noodles", "broth", "egg"),
        prep_time=45,
        price=14.0,
        cuisine_type=Cuisine.OTHER,
    )


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Pie", "prep_time": 30, "cuisine_type": "DESSERT"},
        {"name": "Pie", "prep_time": 30, "cuisine_type": "american"},
        {"name": "Pie", "prep_time": -1, "cuisine_type": "AMERICAN"},
        {"name": "", "prep_time": 30, "cuisine_type": "AMERICAN"},
        {"name": "Pie", "prep_time": 30, "price": -2, "cuisine_type": "AMERICAN"},
    ],
)
def test_invalid_orders_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        DishOrder.model_validate(payload)


def test_parse_orders_from_json() -> None:
    raw = json.dumps(
        [
            {
                "name": "Pho",
                "ingredients": ["rice noodles", "beef", "star anise"],
                "prep_time": 240,
                "cuisine_type": "OTHER",
            },
            {"name": "Nachos", "prep_time": 15, "cuisine_type": "MEXICAN"},
        ]
    )

    orders = parse_orders(raw)

    assert [order.name for order in orders] == ["Pho", "Nachos"]
    assert orders[1].price == 0.0
    assert orders[1].to_dish().ingredient_count == 0


def test_cuisine_lookup_is_exact() -> None:
    assert Cuisine.from_label("FRENCH") is Cuisine.FRENCH
    assert Cuisine.from_label("French") is None
    assert [entry.value for entry in Cuisine] == [
        "ITALIAN",
        "MEXICAN",
        "CHINESE",
        "INDIAN",
        "AMERICAN",
        "FRENCH",
        "OTHER",
    ]
