import os

# Must be set before the shared config module is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from shared.core.auth import create_user_token
from shared.core.database import Base, SessionLocal, engine
from shared.models.users import Users
from auth_service.app.main import app as auth_app
from inventory_service.app.main import app as inventory_app

ITEMS_URL = "/api/inventory/items"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def user(db_session):
    db_user = Users(full_name="Dana Store", email="dana@example.com")
    db_user.set_password("secret-pass-1")
    db_session.add(db_user)
    db_session.commit()
    db_session.refresh(db_user)
    return db_user


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def client():
    with TestClient(inventory_app) as test_client:
        yield test_client


@pytest.fixture
def auth_client():
    with TestClient(auth_app) as test_client:
        yield test_client


@pytest.fixture
def make_item(client, auth_headers):
    def _make_item(**overrides):
        payload = {
            "itemName": "Widget",
            "unit": "pcs",
            "sellingPrice": 5,
            "initialStock": 20,
            "initialPurchasePrice": 2.5,
            "reorderPoint": 5,
        }
        payload.update(overrides)
        response = client.post(ITEMS_URL, json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["item"]

    return _make_item
