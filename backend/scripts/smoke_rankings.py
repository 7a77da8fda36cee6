"""Smoke test script for the ranking API.

Runs basic ranking queries against a locally running server:

    uvicorn ranking_api.main:app --port 8000
    python scripts/smoke_rankings.py [base_url] [user]
"""

import asyncio
import sys

import httpx

DEFAULT_BASE_URL = "http://localhost:8000/atcoder-api/v3"
METRICS = ("ac", "streak", "rated_point_sum")


async def smoke_test(base_url: str, user: str):
    """Run smoke tests against local API."""
    client = httpx.AsyncClient(base_url=base_url, timeout=30.0)

    print("Running smoke tests...")

    try:
        print("1. Testing readiness endpoint...")
        response = await client.get("/ready")
        assert response.status_code == 200, response.text
        print("   ✓ Database reachable")

        for i, metric in enumerate(METRICS, start=2):
            print(f"{i}. Testing {metric} ranking...")
            response = await client.get(f"/{metric}_ranking", params={"from": 0, "to": 10})
            assert response.status_code == 200, response.text
            entries = response.json()
            counts = [e["count"] for e in entries]
            assert counts == sorted(counts, reverse=True), "ranking is not in descending order"

            response = await client.get(f"/{metric}_ranking", params={"from": 0, "to": 1001})
            assert response.status_code == 400, "oversized window was not rejected"

            response = await client.get(f"/user/{metric}_rank", params={"user": user})
            assert response.status_code in (200, 404), response.text
            if response.status_code == 200:
                print(f"   ✓ {user}: {response.json()}")
            else:
                print(f"   ✓ {user} has no {metric} record")

        print("\nAll smoke tests passed!")

    except Exception as e:
        print(f"\nSmoke test failed: {e}")
        sys.exit(1)
    finally:
        await client.aclose()


if __name__ == "__main__":
    base = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL
    user_id = sys.argv[2] if len(sys.argv) > 2 else "tourist"
    asyncio.run(smoke_test(base, user_id))
