from .restaurant_routes import create_restaurant_bp
from .restaurant_service import RestaurantRepository

__all__ = [
    "create_restaurant_bp",
    "RestaurantRepository",
]
