from typing import Any

from flask import Blueprint, Response, jsonify, request, url_for

from restaurant.restaurant_service import RestaurantRepository
from restaurant.serializers import decode_restaurant_fields, serialize_restaurant
from utils import save_log


def empty_response(status: int) -> Response:
    return Response(status=status)


def create_restaurant_bp(repository: RestaurantRepository, url_prefix: str = "/api") -> Blueprint:
    """Build the restaurant CRUD blueprint around ``repository``."""
    restaurant_bp = Blueprint("restaurant", __name__, url_prefix=f"{url_prefix.rstrip('/')}/restaurant")

    @restaurant_bp.route("", methods=["POST"])
    def create_restaurant() -> Any:
        """Create a restaurant
        ---
        tags:
          - restaurant
        parameters:
          - in: body
            name: body
            required: true
            description: Restaurant data to create
            schema:
              $ref: '#/definitions/RestaurantInput'
        responses:
          201:
            description: Restaurant created
            headers:
              Location:
                type: string
                description: URL of the created restaurant
            schema:
              $ref: '#/definitions/Restaurant'
        """
        fields = decode_restaurant_fields(request.get_json(force=True, silent=True))
        restaurant = repository.create(fields)
        save_log(f"Restaurant {restaurant.id} created: {restaurant.name}")

        location = url_for("restaurant.show_restaurant", restaurant_id=restaurant.id, _external=True)
        response = jsonify(serialize_restaurant(restaurant))
        response.status_code = 201
        response.headers["Location"] = location
        return response

    @restaurant_bp.route("/<int(signed=True):restaurant_id>", methods=["GET"])
    def show_restaurant(restaurant_id: int) -> Any:
        """Show a restaurant by id
        ---
        tags:
          - restaurant
        parameters:
          - in: path
            name: restaurant_id
            type: integer
            required: true
            description: Id of the restaurant to show
        responses:
          200:
            description: Restaurant found
            schema:
              $ref: '#/definitions/Restaurant'
          404:
            description: Restaurant not found
        """
        restaurant = repository.get_by_id(restaurant_id)
        if restaurant is None:
            return empty_response(404)
        return jsonify(serialize_restaurant(restaurant)), 200

    @restaurant_bp.route("/<int(signed=True):restaurant_id>", methods=["PUT"])
    def edit_restaurant(restaurant_id: int) -> Any:
        """Update a restaurant by id
        Only the fields present in the body are changed.
        ---
        tags:
          - restaurant
        parameters:
          - in: path
            name: restaurant_id
            type: integer
            required: true
            description: Id of the restaurant to update
          - in: body
            name: body
            required: true
            description: New restaurant data
            schema:
              $ref: '#/definitions/RestaurantInput'
        responses:
          204:
            description: Restaurant updated
          404:
            description: Restaurant not found
        """
        restaurant = repository.get_by_id(restaurant_id)
        if restaurant is None:
            return empty_response(404)

        fields = decode_restaurant_fields(request.get_json(force=True, silent=True))
        repository.update(restaurant, fields)
        save_log(f"Restaurant {restaurant_id} updated: {', '.join(sorted(fields)) or 'no fields'}")
        return empty_response(204)

    @restaurant_bp.route("/<int(signed=True):restaurant_id>", methods=["DELETE"])
    def delete_restaurant(restaurant_id: int) -> Any:
        """Delete a restaurant by id
        ---
        tags:
          - restaurant
        parameters:
          - in: path
            name: restaurant_id
            type: integer
            required: true
            description: Id of the restaurant to delete
        responses:
          204:
            description: Restaurant deleted
          404:
            description: Restaurant not found
        """
        restaurant = repository.get_by_id(restaurant_id)
        if restaurant is None:
            return empty_response(404)

        repository.delete(restaurant)
        save_log(f"Restaurant {restaurant_id} deleted")
        return empty_response(204)

    return restaurant_bp
