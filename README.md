# fooddelivery

A small set of cooperating food-ordering services that run in one process:

- `fooddelivery.restaurant.RestaurantService` keeps restaurants, their
  cuisines and menus, and a running average rating for each food item.
  Restaurants are `Restaurant` dataclasses with `id`, `name`, `cuisine`,
  `food_items`, `ratings` and `total_ratings`.
- `fooddelivery.order.OrderService` builds menus for a cuisine and places
  orders at the first restaurant that serves the requested item. Item names
  match without regard to case. Placed orders are `Order` dataclasses.
- `fooddelivery.ratings.RatingsService` looks up an order and records a
  rating for the restaurant that served it.
- `fooddelivery.customer.CustomerService` is the front end a customer uses.
  It gets menus, places orders and reviews food items.

Every failure raises `fooddelivery.restaurant.ServiceError`, with a message
that says which step failed (for example `restaurant not found`,
`order not found`, or `could not place order as food item ... not found`),
prefixed by each service the error passed through.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from fooddelivery.restaurant import RestaurantService
from fooddelivery.order import OrderService
from fooddelivery.ratings import RatingsService
from fooddelivery.customer import CustomerService

restaurants = RestaurantService()
dawat_id = restaurants.add_restaurant("Dawat", "Indian", ["Butter Chicken", "Naan"])
restaurants.add_restaurant("Khwab", "Indian", ["Dal Makhani", "Roti"])

orders = OrderService(restaurants)
ratings = RatingsService(restaurants, orders)
customer = CustomerService(orders, ratings)

menu = customer.get_menu("Indian")
# ['Butter Chicken', 'Naan', 'Dal Makhani', 'Roti']

order_id = customer.place_food_order(menu[0], 10, "Indian")
customer.review_food_item(order_id, menu[0], 3)
# 3.0  (the item's new average)

restaurants.get_rating(dawat_id, "Butter Chicken")
# 3.0
```

Other calls:

- `RestaurantService.list_restaurants(cuisine)` returns the ids of the
  restaurants with exactly that cuisine, in the order they were added.
- `RestaurantService.get_restaurant_details(restaurant_id)` returns the
  `Restaurant`.
- `RestaurantService.add_rating(restaurant_id, food_item, rating)` folds a
  rating into the item's average and returns the new average.
- `OrderService.get_order_details(order_id)` returns the `Order`.

`fooddelivery.config` holds the default host names and ports of the four
services, and `get_server_address(host, port)` joins a host and a port into a
`host:port` string.

## What this package does not do

The services are plain Python objects wired to each other in one process.
There is no network server, no remote client, no command to start a service,
and no tracing. Nothing is stored: restaurants, orders and ratings live in
memory and are gone when the process ends. The addresses in
`fooddelivery.config` are only strings; nothing in the package listens on or
connects to them.

## Running the tests

```
pytest
```