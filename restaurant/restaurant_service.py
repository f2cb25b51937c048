"""Storage access for restaurants.

``RestaurantRepository`` wraps a SQLAlchemy session (normally the
request-scoped ``db.session``) and is handed to the blueprint factory, so the
route handlers never reach for a global engine.
"""

from typing import Optional
import logging

from models import Restaurant
from utils import utcnow

logger = logging.getLogger(__name__)

# ids outside a signed 64-bit INTEGER can never be stored
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class RestaurantRepository:
    def __init__(self, session):
        self.session = session

    def get_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        if not MIN_ID <= restaurant_id <= MAX_ID:
            return None
        return self.session.get(Restaurant, restaurant_id)

    def create(self, fields) -> Restaurant:
        """Persist a new restaurant; id and created_at are assigned here."""
        restaurant = Restaurant(**fields)
        restaurant.created_at = utcnow()
        self.session.add(restaurant)
        self._commit("create restaurant")
        return restaurant

    def update(self, restaurant: Restaurant, fields) -> Restaurant:
        """Overlay the given fields onto ``restaurant`` and stamp updated_at.

        Attributes not present in ``fields`` keep their current value.
        """
        for key, value in fields.items():
            setattr(restaurant, key, value)
        restaurant.updated_at = utcnow()
        self._commit(f"update restaurant {restaurant.id}")
        return restaurant

    def delete(self, restaurant: Restaurant) -> None:
        self.session.delete(restaurant)
        self._commit(f"delete restaurant {restaurant.id}")

    def _commit(self, action: str) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.exception("Failed to %s", action)
            raise
