import pytest

from app import create_app
from extensions import db
from restaurant import RestaurantRepository


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "PROPAGATE_EXCEPTIONS": False,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
    })
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def repository(app):
    with app.app_context():
        yield RestaurantRepository(db.session)


@pytest.fixture()
def created(client):
    """A restaurant created through the API; returns the response body."""
    response = client.post("/api/restaurant", json={"name": "A", "description": "B"})
    assert response.status_code == 201
    return response.get_json()
