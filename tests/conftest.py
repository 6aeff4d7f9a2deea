"""Shared test fixtures."""

from pathlib import Path

import pytest

from kitchen_tracker.config import Settings
from kitchen_tracker.domain.dishes import Cuisine, Dish
from kitchen_tracker.main import SAMPLE_MENU
from kitchen_tracker.services.kitchen import KitchenService


def make_dish(
    name: str = "Dish",
    *,
    ingredient_count: int = 3,
    prep_time: int = 30,
    price: float = 10.0,
    cuisine_type: Cuisine = Cuisine.OTHER,
) -> Dish:
    """Build a dish with placeholder ingredients."""
    return Dish(
        name=name,
        ingredients=tuple(f"ingredient-{index}" for index in range(ingredient_count)),
        prep_time=prep_time,
        price=price,
        cuisine_type=cuisine_type,
    )


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def sample_dishes() -> list[Dish]:
    return [order.to_dish() for order in SAMPLE_MENU]


@pytest.fixture
def kitchen() -> KitchenService:
    return KitchenService(capacity=100)


@pytest.fixture
def stocked_kitchen(
    kitchen: KitchenService, sample_dishes: list[Dish]
) -> KitchenService:
    for dish in sample_dishes:
        assert kitchen.new_order(dish)
    return kitchen
