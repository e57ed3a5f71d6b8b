import pytest

from fooddelivery.order import Order, OrderService
from fooddelivery.restaurant import RestaurantService, ServiceError


@pytest.fixture
def setup():
    restaurants = RestaurantService()
    dawat = restaurants.add_restaurant(
        "Dawat", "Indian", ["Butter Chicken", "Paneer Tikka", "Biryani", "Naan", "Raita"]
    )
    khwab = restaurants.add_restaurant(
        "Khwab", "Indian", ["Dal Makhani", "Paneer Tikka", "Jalebi"]
    )
    halal = restaurants.add_restaurant("Hooda Halal", "Halal", ["Falafel Wrap"])
    return OrderService(restaurants), restaurants, dawat, khwab, halal


class _BrokenDetails:
    def list_restaurants(self, cuisine):
        return ["missing"]

    def get_restaurant_details(self, restaurant_id):
        raise ServiceError("restaurant not found")


class _BrokenList:
    def list_restaurants(self, cuisine):
        raise ServiceError("unavailable")


def test_get_menu_concatenates_in_order(setup):
    service, _, _, _, _ = setup
    assert service.get_menu("Indian") == [
        "Butter Chicken", "Paneer Tikka", "Biryani", "Naan", "Raita",
        "Dal Makhani", "Paneer Tikka", "Jalebi",
    ]


def test_get_menu_unknown_cuisine_is_empty(setup):
    service, _, _, _, _ = setup
    assert service.get_menu("Thai") == []


def test_place_order_picks_first_restaurant(setup):
    service, _, dawat, _, _ = setup
    order_id = service.place_order("Paneer Tikka", 2, "Indian")
    details = service.get_order_details(order_id)
    assert details == Order(
        id=order_id, restaurant_id=dawat, food_item="Paneer Tikka", quantity=2
    )


def test_place_order_is_case_insensitive(setup):
    service, _, _, khwab, _ = setup
    order_id = service.place_order("jalebi", 10, "Indian")
    details = service.get_order_details(order_id)
    assert details.food_item == "Jalebi"
    assert details.restaurant_id == khwab
    assert details.quantity == 10


def test_place_order_ids_are_unique(setup):
    service, _, _, _, _ = setup
    first = service.place_order("Naan", 1, "Indian")
    second = service.place_order("Naan", 1, "Indian")
    assert first != second
    assert service.get_order_details(first).id == first


def test_place_order_wrong_cuisine_fails(setup):
    service, _, _, _, _ = setup
    with pytest.raises(ServiceError, match="food item Falafel Wrap not found"):
        service.place_order("Falafel Wrap", 1, "Indian")


def test_unknown_order_raises(setup):
    service, _, _, _, _ = setup
    with pytest.raises(ServiceError, match="order not found"):
        service.get_order_details("nope")


def test_details_error_is_wrapped():
    service = OrderService(_BrokenDetails())
    with pytest.raises(ServiceError, match="error in getting restaurant details"):
        service.get_menu("Indian")


def test_list_error_is_wrapped():
    service = OrderService(_BrokenList())
    with pytest.raises(ServiceError, match="error in getting restaurants: unavailable"):
        service.place_order("Naan", 1, "Indian")