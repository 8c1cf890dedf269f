"""
E2E tests for gig-worker personas through the HTTP API.

User personas:
- worker_fulltime: Drives for four platforms, high income, best rate tier
- worker_parttime: One platform, modest income, high rate tier
- worker_new: Never submitted a profile, cannot borrow
- worker_overreach: Asks for more than the pool holds
- lender_pair: Two providers funding the same pool
"""

import pytest
from fastapi.testclient import TestClient


ADMIN = "GADMIN"
LENDER_A = "GLENDERA"
LENDER_B = "GLENDERB"


def headers(address: str) -> dict:
    return {"X-Caller-Address": address}


def submit_profile(client: TestClient, user: str, total: int, monthly: int, platforms: list) -> dict:
    response = client.put(
        f"/v1/profiles/{user}",
        json={"total_income": total, "avg_monthly_income": monthly, "gig_platforms": platforms},
        headers=headers(user),
    )
    assert response.status_code == 200
    return response.json()


def borrow(client: TestClient, user: str, amount: int, collateral: int, duration: int = 30 * 86_400):
    return client.post(
        "/v1/loans",
        json={"borrower": user, "amount": amount, "collateral": collateral, "duration": duration},
        headers=headers(user),
    )


@pytest.fixture
def pool(client: TestClient) -> TestClient:
    """Initialized protocol funded by two lenders (total 15_000)"""
    client.post("/v1/protocol/initialize", json={"admin": ADMIN})
    client.post("/v1/liquidity", json={"provider": LENDER_A, "amount": 10_000}, headers=headers(LENDER_A))
    client.post("/v1/liquidity", json={"provider": LENDER_B, "amount": 5_000}, headers=headers(LENDER_B))
    return client


@pytest.mark.integration
def test_worker_fulltime_best_rate(pool: TestClient):
    """
    worker_fulltime: 60k total, 5k/month, four platforms
    Expected: 300 + 200 + 100 + 100 = 700 -> 1000 bps
    """
    profile = submit_profile(pool, "worker_fulltime", 60_000, 5_000, ["uber", "lyft", "doordash", "instacart"])
    assert profile["credit_score"] == 700

    response = borrow(pool, "worker_fulltime", 3_000, 4_500)
    assert response.status_code == 201
    assert response.json()["interest_rate"] == 1000


@pytest.mark.integration
def test_worker_parttime_high_rate(pool: TestClient):
    """
    worker_parttime: 15k total, 1.25k/month, one platform
    Expected: 300 + 100 + 25 = 425 -> 2000 bps
    """
    profile = submit_profile(pool, "worker_parttime", 15_000, 1_250, ["rappi"])
    assert profile["credit_score"] == 425

    response = borrow(pool, "worker_parttime", 500, 750)
    assert response.status_code == 201
    assert response.json()["interest_rate"] == 2000


@pytest.mark.integration
def test_worker_new_without_profile(pool: TestClient):
    """worker_new: no profile -> 404 and pool untouched"""
    response = borrow(pool, "worker_new", 500, 750)

    assert response.status_code == 404
    assert pool.get("/v1/liquidity").json()["total_liquidity"] == 15_000


@pytest.mark.integration
def test_worker_overreach(pool: TestClient):
    """worker_overreach: pool of 15_000 cannot fund 15_001"""
    submit_profile(pool, "worker_overreach", 60_000, 5_000, ["uber"])

    assert borrow(pool, "worker_overreach", 15_001, 30_000).status_code == 409
    assert borrow(pool, "worker_overreach", 15_000, 22_500).status_code == 201
    assert pool.get("/v1/liquidity").json()["total_liquidity"] == 0


@pytest.mark.integration
def test_lender_pair_and_borrowers_share_pool(pool: TestClient):
    """Pool total equals deposits minus originated principal across personas"""
    submit_profile(pool, "worker_a", 30_000, 2_500, ["uber", "lyft"])
    submit_profile(pool, "worker_b", 10_000, 900, [])

    loan_ids = [
        borrow(pool, "worker_a", 2_000, 3_000).json()["loan_id"],
        borrow(pool, "worker_b", 1_000, 1_500).json()["loan_id"],
        borrow(pool, "worker_a", 4_000, 6_000).json()["loan_id"],
    ]

    assert loan_ids == [0, 1, 2]
    assert pool.get("/v1/liquidity").json()["total_liquidity"] == 15_000 - 7_000
    assert pool.get("/v1/protocol").json()["loan_counter"] == 3
    assert len(pool.get(f"/v1/liquidity/{LENDER_A}").json()["deposits"]) == 1
    assert len(pool.get(f"/v1/liquidity/{LENDER_B}").json()["deposits"]) == 1
