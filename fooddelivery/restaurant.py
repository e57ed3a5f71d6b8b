"""In-memory registry of restaurants, their menus and food ratings."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


class ServiceError(Exception):
    """Raised when a service request cannot be fulfilled."""


@dataclass
class Restaurant:
    """A restaurant with its menu and per-item average ratings."""

    id: str
    name: str
    cuisine: str
    food_items: list[str] = field(default_factory=list)
    ratings: dict[str, float] = field(default_factory=dict)
    total_ratings: dict[str, int] = field(default_factory=dict)


class RestaurantService:
    """Keeps restaurants in the order they were added."""

    def __init__(self) -> None:
        self._restaurants: dict[str, Restaurant] = {}

    def list_restaurants(self, cuisine: str) -> list[str]:
        """Return the ids of restaurants serving exactly this cuisine."""
        return [
            restaurant_id
            for restaurant_id, restaurant in self._restaurants.items()
            if restaurant.cuisine == cuisine
        ]

    def _lookup(self, restaurant_id: str) -> Restaurant:
        try:
            return self._restaurants[restaurant_id]
        except KeyError:
            raise ServiceError("restaurant not found") from None

    def get_restaurant_details(self, restaurant_id: str) -> Restaurant:
        """Return the restaurant with this id."""
        return self._lookup(restaurant_id)

    def add_restaurant(self, name: str, cuisine: str, food_items) -> str:
        """Register a restaurant and return its newly generated id."""
        restaurant_id = str(uuid.uuid4())
        items = list(food_items)
        self._restaurants[restaurant_id] = Restaurant(
            id=restaurant_id,
            name=name,
            cuisine=cuisine,
            food_items=items,
            ratings={item: 0.0 for item in items},
            total_ratings={item: 0 for item in items},
        )
        return restaurant_id

    def add_rating(self, restaurant_id: str, food_item: str, rating: float) -> float:
        """Fold a rating into the food item's running average and return it."""
        restaurant = self._lookup(restaurant_id)
        count = restaurant.total_ratings.get(food_item, 0)
        total = restaurant.ratings.get(food_item, 0.0) * count + rating
        count += 1
        average = total / count
        restaurant.total_ratings[food_item] = count
        restaurant.ratings[food_item] = average
        return average

    def get_rating(self, restaurant_id: str, food_item: str) -> float:
        """Return the average rating of a food item, 0.0 if never rated."""
        return self._lookup(restaurant_id).ratings.get(food_item, 0.0)