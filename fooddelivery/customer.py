"""Customer-facing front of the food delivery services."""

from __future__ import annotations

from fooddelivery.restaurant import ServiceError


class CustomerService:
    """Lets customers browse menus, order food and review it."""

    def __init__(self, order_client, ratings_client) -> None:
        self._order_client = order_client
        self._ratings_client = ratings_client

    def get_menu(self, cuisine: str) -> list[str]:
        """Return all food items offered for the cuisine."""
        try:
            return self._order_client.get_menu(cuisine)
        except ServiceError as err:
            raise ServiceError(f"error in getting menu: {err}") from err

    def place_food_order(self, food_item: str, quantity: int, cuisine: str) -> str:
        """Place an order and return its id."""
        try:
            return self._order_client.place_order(food_item, quantity, cuisine)
        except ServiceError as err:
            raise ServiceError(f"error in placing order: {err}") from err

    def review_food_item(self, order_id: str, food_item: str, rating: float) -> float:
        """Rate the food item of an order; return the item's new average."""
        try:
            return self._ratings_client.submit_rating(order_id, food_item, rating)
        except ServiceError as err:
            raise ServiceError(f"error in submitting ratings: {err}") from err