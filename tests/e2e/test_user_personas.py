"""
E2E tests for user personas going through the full HTTP surface.

User personas:
- user_new: Fresh account with no spending history, sustainable expected
- user_frugal: Small irregular spending against a large balance, healthy or better
- user_tight: Heavy daily spending, danger expected
- user_overdrawn: Balance already under the safety buffer, critical expected
- user_renter: Comfortable history but a large rent payment coming up
- user_impulse: Considering a big purchase, scenario verdict expected
"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient
from conftest import NOW, epoch_millis


def expense(txn_id: str, amount: float, days_ago: int, hour: int = 13) -> dict:
    instant = (NOW - timedelta(days=days_ago)).replace(hour=hour)
    return {"id": txn_id, "type": "expense", "amount": amount, "note": "", "timestamp": epoch_millis(instant)}


def irregular_history() -> list[dict]:
    """Three weeks of lumpy spending: groceries, a bill, idle days"""
    return [
        expense("g1", 1200, 20),
        expense("g2", 800, 16),
        expense("bill", 2500, 14, hour=9),
        expense("g3", 950, 9),
        expense("coffee", 150, 9, hour=17),
        expense("g4", 1100, 4),
        expense("g5", 300, 1),
    ]


@pytest.mark.integration
def test_user_new_sustainable(client: TestClient):
    """
    user_new: No history at all
    Expected: Sustainable, unbounded runway
    """
    response = client.post("/v1/forecast", json={"balance": 20000, "buffer": 5000, "now": epoch_millis(NOW)})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "SUSTAINABLE"
    assert data["runway_unbounded"] is True
    assert data["burn_rate"] == 0.0


@pytest.mark.integration
def test_user_frugal_healthy(client: TestClient):
    """
    user_frugal: ~335/day irregular spend, 200k balance
    Expected: Well over 90 days of runway, low risk
    """
    response = client.post(
        "/v1/forecast",
        json={"balance": 200000, "buffer": 20000, "transactions": irregular_history(), "now": epoch_millis(NOW)},
    )

    data = response.json()
    assert data["status"] in ("HEALTHY", "SUSTAINABLE")
    assert data["risk_score"] == 0
    assert data["runway_days"] > 90
    assert data["runway_range"]["min"] <= data["runway_days"] <= data["runway_range"]["max"]


@pytest.mark.integration
def test_user_tight_danger(client: TestClient):
    """
    user_tight: Spends ~2000/day against 30k
    Expected: Danger, maximum risk
    """
    history = [expense(f"d{day}", 2000, day) for day in range(14)]

    response = client.post(
        "/v1/forecast",
        json={"balance": 30000, "buffer": 0, "transactions": history, "now": epoch_millis(NOW)},
    )

    data = response.json()
    assert data["status"] == "DANGER"
    assert data["risk_score"] == 100
    assert data["runway_days"] < 30
    assert data["zero_date"] is not None


@pytest.mark.integration
def test_user_overdrawn_critical(client: TestClient):
    """
    user_overdrawn: 3k balance, 5k buffer
    Expected: Critical regardless of the simulation
    """
    response = client.post(
        "/v1/forecast",
        json={"balance": 3000, "buffer": 5000, "transactions": irregular_history(), "now": epoch_millis(NOW)},
    )

    assert response.json()["status"] == "CRITICAL_BELOW_BUFFER"


@pytest.mark.integration
def test_user_renter_obligation_shortens_runway(client: TestClient):
    """
    user_renter: Same history, with and without a 40k rent payment in 10 days
    Expected: The rent takes a visible bite out of the runway
    """
    base = {"balance": 60000, "buffer": 0, "transactions": irregular_history(), "now": epoch_millis(NOW)}
    rent = {"id": "rent", "title": "Rent", "amount": 40000, "date": (NOW.date() + timedelta(days=10)).isoformat()}

    without_rent = client.post("/v1/forecast", json=base).json()
    with_rent = client.post("/v1/forecast", json={**base, "planned": [rent]}).json()

    assert with_rent["runway_days"] < without_rent["runway_days"]


@pytest.mark.integration
def test_user_impulse_purchase_scenario(client: TestClient):
    """
    user_impulse: 200k balance, considering a 150k purchase
    Expected: Runway shrinks sharply, advice reflects the loss
    """
    response = client.post(
        "/v1/scenario",
        json={
            "balance": 200000,
            "buffer": 20000,
            "transactions": irregular_history(),
            "now": epoch_millis(NOW),
            "spends": [{"amount": 150000}],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["delta"]["cost"] == 150000.0
    assert data["simulated"]["runway_days"] < data["baseline"]["runway_days"]
    assert data["analysis"]["risk_level"] in ("Critical", "High", "Medium")
