def test_echo_endpoint_ignores_body(client):
    response = client.post("/api/test", json={"foo": "bar", "number": 42})

    assert response.status_code == 200
    assert response.get_json() == {"result": "success"}


def test_echo_endpoint_accepts_any_body(client):
    response = client.post("/api/test", data="whatever", content_type="text/plain")

    assert response.status_code == 200
    assert response.get_json() == {"result": "success"}


def test_index_reports_status(client):
    body = client.get("/").get_json()

    assert body["status"] == "ok"
    assert body["version"]


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.data == b"OK"


def test_custom_api_prefix():
    from app import create_app

    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "API_PREFIX": "/v2",
    })
    client = app.test_client()

    assert client.post("/v2/test", json={}).status_code == 200
    created = client.post("/v2/restaurant", json={"name": "A", "description": "B"})
    assert created.status_code == 201
    assert created.headers["Location"].endswith(f"/v2/restaurant/{created.get_json()['id']}")


def test_no_signing_key_is_configured(app):
    assert app.config["SECRET_KEY"] is None
