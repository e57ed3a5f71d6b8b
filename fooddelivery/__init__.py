"""In-process food ordering services: restaurants, orders, ratings and customers."""

__version__ = "0.1.0"
__all__ = ["config", "restaurant", "order", "ratings", "customer"]