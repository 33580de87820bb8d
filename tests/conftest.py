"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database: the app's session
dependency is overridden so routes, services and repositories all run
for real against it.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from shopapi.main import app
from shopapi.database import build_engine, create_db_and_tables, get_session


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def category(client):
    response = client.post("/categories", json={"name": "Books"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def product(client, category):
    response = client.post(
        "/products",
        json={
            "name": "Go Guide",
            "description": "Learn Go",
            "price": 29.99,
            "category_id": category["id"],
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def cart(client):
    response = client.post("/carts")
    assert response.status_code == 201
    return response.json()
