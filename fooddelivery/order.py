"""Order placement on top of a restaurant registry."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from fooddelivery.restaurant import ServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Order:
    """A placed order for one food item at one restaurant."""

    id: str
    restaurant_id: str
    food_item: str
    quantity: int
    customer_id: str = ""


class OrderService:
    """Places orders at restaurants found through a restaurant client."""

    def __init__(self, restaurant_client) -> None:
        self._restaurant_client = restaurant_client
        self._orders: list[Order] = []

    def _restaurants(self, cuisine: str):
        try:
            restaurant_ids = self._restaurant_client.list_restaurants(cuisine)
        except ServiceError as err:
            raise ServiceError(f"error in getting restaurants: {err}") from err
        for restaurant_id in restaurant_ids:
            try:
                details = self._restaurant_client.get_restaurant_details(restaurant_id)
            except ServiceError as err:
                raise ServiceError(
                    f"error in getting restaurant details: {err}"
                ) from err
            yield restaurant_id, details

    def place_order(self, food_item: str, quantity: int, cuisine: str) -> str:
        """Order the first matching food item of the cuisine; return the order id."""
        logger.info(
            "Placing order for %s cuisine and %s food item", cuisine, food_item
        )
        wanted = food_item.casefold()
        for restaurant_id, details in self._restaurants(cuisine):
            for item in details.food_items:
                logger.debug("Is food item %s equal to %s", item, food_item)
                if item.casefold() == wanted:
                    order_id = str(uuid.uuid4())
                    self._orders.append(
                        Order(
                            id=order_id,
                            restaurant_id=restaurant_id,
                            food_item=item,
                            quantity=int(quantity),
                        )
                    )
                    logger.info("Returning success")
                    return order_id
        raise ServiceError(
            f"could not place order as food item {food_item} not found"
        )

    def get_menu(self, cuisine: str) -> list[str]:
        """Return every food item of every restaurant serving the cuisine."""
        return [
            item
            for _, details in self._restaurants(cuisine)
            for item in details.food_items
        ]

    def get_order_details(self, order_id: str) -> Order:
        """Return the order with this id."""
        for order in self._orders:
            if order.id == order_id:
                return order
        raise ServiceError("order not found")