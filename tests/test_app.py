"""
Tests for application-level wiring: health check, error handlers and the
optional echo endpoint.
"""
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shopapi.models.product import Product
from shopapi.routers.debug import router as debug_router


def test_health_check(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_storage_error_is_500(client: TestClient, engine):
    Product.__table__.drop(engine)

    response = client.get("/products")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal storage error"}


def test_malformed_errors_do_not_echo_input(client: TestClient):
    response = client.post("/categories", json={"name": ["secret-value"]})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors
    assert all(set(err) == {"loc", "msg", "type"} for err in errors)
    assert "secret-value" not in response.text


def test_echo_endpoint_is_off_by_default(client: TestClient):
    assert client.post("/debug/echo", content="hello").status_code == 404


def test_echo_returns_raw_body():
    app = FastAPI()
    app.include_router(debug_router)
    client = TestClient(app)

    response = client.post("/debug/echo", content='{"raw": true}')

    assert response.status_code == 200
    assert response.text == '{"raw": true}'
