"""Pytest configuration and shared fixtures.

This module provides:
- Settings pointing at a throwaway SQLite database per test
- An application/TestClient pair with the lifespan running
- A fake Razorpay gateway injected through create_app
- Small helpers for seeding canteens, items and students over HTTP
"""

import os
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List, Optional

# campus_canteen.main builds a module-level app from the environment on import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from campus_canteen.config import Settings
from campus_canteen.main import create_app

TEST_JWT_SECRET = "test-jwt-secret"
TEST_KEY_ID = "rzp_test_key"
TEST_KEY_SECRET = "test-key-secret"
TEST_WEBHOOK_SECRET = "test-webhook-secret"


# ============================================================================
# PAYMENT GATEWAY FAKE
# ============================================================================


class FakeGateway:
    """Stands in for RazorpayClient; records create_order calls."""

    configured = True

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None
        self.closed = False

    async def create_order(self, amount, currency="INR", receipt=None, notes=None):
        self.calls.append({"amount": amount, "currency": currency, "receipt": receipt, "notes": notes})
        if self.error is not None:
            raise self.error
        return {
            "id": "order_TEST123",
            "entity": "order",
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "status": "created",
        }

    async def aclose(self) -> None:
        self.closed = True


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================


def build_settings(db_path: Path, **overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "DATABASE_URL": f"sqlite+aiosqlite:///{db_path}",
        "DB_CREATE_ALL": True,
        "JWT_SECRET": TEST_JWT_SECRET,
        "BCRYPT_ROUNDS": 4,
        "RAZORPAY_KEY_ID": TEST_KEY_ID,
        "RAZORPAY_KEY_SECRET": TEST_KEY_SECRET,
        "RAZORPAY_WEBHOOK_SECRET": TEST_WEBHOOK_SECRET,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def make_app(tmp_path: Path, gateway: FakeGateway) -> Callable[..., FastAPI]:
    """Factory for apps with overridden settings, e.g. make_app(JWT_SECRET=None)."""

    def factory(**overrides: Any) -> FastAPI:
        return create_app(build_settings(tmp_path / "test.db", **overrides), payment_gateway=gateway)

    return factory


@pytest.fixture
def client(make_app: Callable[..., FastAPI]) -> Generator[TestClient, None, None]:
    with TestClient(make_app()) as test_client:
        yield test_client


# ============================================================================
# DATA HELPERS
# ============================================================================


@pytest.fixture
def create_canteen(client: TestClient) -> Callable[..., Dict[str, Any]]:
    def factory(name: str = "Main Canteen", ratings: Optional[float] = None) -> Dict[str, Any]:
        response = client.post("/canteens", json={"name": name, "ratings": ratings})
        assert response.status_code == 201, response.text
        return response.json()

    return factory


@pytest.fixture
def create_item(client: TestClient) -> Callable[..., Dict[str, Any]]:
    def factory(canteen_id: int, **fields: Any) -> Dict[str, Any]:
        payload = {"name": "Idli", "price": 30, "isVeg": True}
        payload.update(fields)
        response = client.post(f"/canteens/{canteen_id}/items", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return factory


@pytest.fixture
def student_payload() -> Dict[str, Any]:
    return {
        "name": "Asha Rao",
        "email": "Asha.Rao@Campus.edu ",
        "number": 9876543210,
        "password": "s3cret-pass",
        "branch": "CSE",
        "rollNumber": "21CS042",
    }
