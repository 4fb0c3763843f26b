"""Health & Readiness Checks."""


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["status"] == "ready"


async def test_readiness_fails_when_store_unavailable(failing_client):
    res = await failing_client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "store_unavailable"
