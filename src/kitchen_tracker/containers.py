"""Dependency container wiring for the application."""

from dataclasses import dataclass

from kitchen_tracker.config import Settings
from kitchen_tracker.services.kitchen import KitchenService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    kitchen_service: KitchenService


def build_kitchen(settings: Settings) -> KitchenService:
    """Create an empty kitchen configured from settings."""
    return KitchenService(
        capacity=settings.kitchen_capacity,
        min_ingredients=settings.elaborate_min_ingredients,
        min_prep_time=settings.elaborate_min_prep_time,
        rounding=settings.elaborate_rounding,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        kitchen_service=build_kitchen(resolved_settings),
    )
