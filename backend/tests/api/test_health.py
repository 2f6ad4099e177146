"""Health Probe - liveness response."""


async def test_health_reports_status_and_count(client, seeded_repository):
    res = await client.get("/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["peaks"] == 6
