"""Rating submission for food items of placed orders."""

from __future__ import annotations

from fooddelivery.restaurant import ServiceError


class RatingsService:
    """Records ratings at the restaurant that served an order."""

    def __init__(self, restaurant_client, order_client) -> None:
        self._restaurant_client = restaurant_client
        self._order_client = order_client

    def submit_rating(self, order_id: str, food_item: str, rating: float) -> float:
        """Rate a food item of an order; return the item's new average."""
        try:
            order = self._order_client.get_order_details(order_id)
        except ServiceError as err:
            raise ServiceError(f"error in getting order details: {err}") from err
        try:
            return self._restaurant_client.add_rating(
                order.restaurant_id, food_item, rating
            )
        except ServiceError as err:
            raise ServiceError(f"error in submitting ratings: {err}") from err