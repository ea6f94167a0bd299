"""Test configuration helpers."""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# Environment phải được set trước khi import personacart (settings + engine
# được tạo lúc import).
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="personacart-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'personacart.db'}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["SEED_PRODUCTS"] = "true"

from fastapi.testclient import TestClient  # noqa: E402

from personacart.db.init_db import drop_tables, initialize_database  # noqa: E402
from personacart.db.seed import SAMPLE_PRODUCTS  # noqa: E402
from personacart.main import app  # noqa: E402
from personacart.web.schemas.product import ProductResponse  # noqa: E402
from personacart.web.utils.database import engine  # noqa: E402


async def _reset_database() -> None:
    await drop_tables(engine)
    await initialize_database(engine, seed=True)


@pytest.fixture
def client():
    """TestClient trên database SQLite sạch, đã seed catalog."""
    asyncio.run(_reset_database())
    with TestClient(app) as test_client:
        yield test_client


def register_user(client: TestClient, username: str = "family", password: str = "secret123") -> dict:
    response = client.post("/api/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(client: TestClient):
    """Đăng ký user, trả về Authorization headers."""
    def _make_user(username: str = "family", password: str = "secret123") -> dict:
        return register_user(client, username, password)
    return _make_user


@pytest.fixture
def auth_headers(make_user) -> dict:
    return make_user()


@pytest.fixture
def sample_products() -> list[ProductResponse]:
    return [
        ProductResponse(
            id=product_id,
            name=name,
            category=category,
            price=price,
            sizes=sizes,
            gender=gender,
            brand=brand,
        )
        for product_id, name, category, price, sizes, gender, brand in SAMPLE_PRODUCTS
    ]
