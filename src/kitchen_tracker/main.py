"""Console entry point printing a kitchen report."""

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from kitchen_tracker.app_logging import configure_logging
from kitchen_tracker.config import Settings
from kitchen_tracker.containers import build_container
from kitchen_tracker.domain.dishes import Cuisine
from kitchen_tracker.domain.orders import DishOrder, parse_orders

logger = logging.getLogger(__name__)

SAMPLE_MENU: list[DishOrder] = [
    DishOrder(
        name="Lasagna",
        ingredients=["pasta", "beef", "tomato", "ricotta", "mozzarella", "basil"],
        prep_time=90,
        price=18.5,
        cuisine_type=Cuisine.ITALIAN,
    ),
    DishOrder(
        name="Bruschetta",
        ingredients=["bread", "tomato", "garlic", "olive oil"],
        prep_time=15,
        price=7.0,
        cuisine_type=Cuisine.ITALIAN,
    ),
    DishOrder(
        name="Mole Poblano",
        ingredients=[
            "chicken",
            "ancho chile",
            "chocolate",
            "sesame",
            "almonds",
            "raisins",
            "cinnamon",
            "onion",
        ],
        prep_time=120,
        price=21.0,
        cuisine_type=Cuisine.MEXICAN,
    ),
    DishOrder(
        name="Tacos al Pastor",
        ingredients=["pork", "pineapple", "tortilla", "onion", "cilantro", "achiote"],
        prep_time=75,
        price=12.0,
        cuisine_type=Cuisine.MEXICAN,
    ),
    DishOrder(
        name="Guacamole",
        ingredients=["avocado", "lime", "onion", "cilantro", "jalapeno"],
        prep_time=10,
        price=6.5,
        cuisine_type=Cuisine.MEXICAN,
    ),
    DishOrder(
        name="Peking Duck",
        ingredients=[
            "duck",
            "maltose",
            "five spice",
            "pancakes",
            "scallion",
            "cucumber",
            "hoisin",
        ],
        prep_time=150,
        price=32.0,
        cuisine_type=Cuisine.CHINESE,
    ),
    DishOrder(
        name="Fried Rice",
        ingredients=["rice", "egg", "scallion", "soy sauce", "peas"],
        prep_time=20,
        price=9.0,
        cuisine_type=Cuisine.CHINESE,
    ),
    DishOrder(
        name="Butter Chicken",
        ingredients=[
            "chicken",
            "butter",
            "tomato",
            "cream",
            "garam masala",
            "ginger",
            "garlic",
            "yogurt",
            "fenugreek",
        ],
        prep_time=60,
        price=16.0,
        cuisine_type=Cuisine.INDIAN,
    ),
    DishOrder(
        name="Cheeseburger",
        ingredients=["bun", "beef", "cheddar", "lettuce", "pickles"],
        prep_time=30,
        price=11.0,
        cuisine_type=Cuisine.AMERICAN,
    ),
    DishOrder(
        name="Coq au Vin",
        ingredients=[
            "chicken",
            "red wine",
            "lardons",
            "mushrooms",
            "pearl onions",
            "thyme",
            "garlic",
        ],
        prep_time=100,
        price=24.0,
        cuisine_type=Cuisine.FRENCH,
    ),
    DishOrder(
        name="Crepes",
        ingredients=["flour", "milk", "egg", "butter"],
        prep_time=25,
        price=8.0,
        cuisine_type=Cuisine.FRENCH,
    ),
    DishOrder(
        name="Paella",
        ingredients=["rice", "saffron", "shrimp", "mussels", "chorizo", "peppers"],
        prep_time=70,
        price=26.0,
        cuisine_type=Cuisine.OTHER,
    ),
    DishOrder(
        name="Hummus",
        ingredients=["chickpeas", "tahini", "lemon", "garlic"],
        prep_time=41,
        price=6.0,
        cuisine_type=Cuisine.OTHER,
    ),
]


def load_orders(path: Path) -> list[DishOrder]:
    """Read and validate dish orders from a JSON file."""
    return parse_orders(path.read_bytes())


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Fill a kitchen with orders and print its report."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        container = build_container(settings)
    except ValidationError as exc:
        configure_logging()
        logger.error("Invalid settings: %s", exc)
        return 1
    configure_logging(container.settings.log_level)

    if args:
        try:
            orders = load_orders(Path(args[0]))
        except (OSError, ValidationError) as exc:
            logger.error("Could not load orders from %s: %s", args[0], exc)
            return 1
    else:
        orders = SAMPLE_MENU

    kitchen = container.kitchen_service
    for order in orders:
        if not kitchen.new_order(order.to_dish()):
            logger.warning("Order for %s was not accepted", order.name)

    print("Kitchen Tracker")
    print()
    kitchen.kitchen_report()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
