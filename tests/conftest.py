"""Pytest fixtures for testing"""

import pytest
import numpy as np
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient
from runway_gateway.api.main import create_app
from runway_gateway.api.dependencies import get_rng
from runway_gateway.domain.models import Transaction, TransactionKind


# Fixed evaluation instant: 2026-03-10 18:00 UTC
NOW = datetime(2026, 3, 10, 18, 0, tzinfo=timezone.utc)


def epoch_millis(instant: datetime) -> int:
    return int(instant.timestamp() * 1000)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source so simulations are reproducible"""
    return np.random.default_rng(20260310)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a seeded random source"""
    app = create_app()
    app.dependency_overrides[get_rng] = lambda: np.random.default_rng(7)
    return TestClient(app)


@pytest.fixture
def steady_expenses() -> list[Transaction]:
    """One expense of 1000 on each of the last 10 days, today included"""
    return [
        Transaction(
            transaction_id=f"exp_{day}",
            kind=TransactionKind.EXPENSE,
            amount=1000.0,
            note="Groceries",
            timestamp=NOW - timedelta(days=day, hours=6),
        )
        for day in range(10)
    ]


@pytest.fixture
def steady_snapshot() -> dict:
    """Sync-style payload equivalent to steady_expenses plus an income entry"""
    transactions = [
        {
            "id": f"exp_{day}",
            "type": "expense",
            "amount": 1000,
            "note": "Groceries",
            "timestamp": epoch_millis(NOW - timedelta(days=day, hours=6)),
        }
        for day in range(10)
    ]
    transactions.append(
        {
            "id": "inc_0",
            "type": "income",
            "amount": 50000,
            "note": "Salary",
            "timestamp": epoch_millis(NOW - timedelta(days=3)),
        }
    )
    return {
        "balance": 100000,
        "buffer": 10000,
        "transactions": transactions,
        "planned": [],
        "now": epoch_millis(NOW),
    }
