"""Health and greeting routes."""

import blog_api.infrastructure.database as db_module


async def test_root_health(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["service"] == "blog-backend"
    assert set(body) == {"status", "timestamp", "version", "service"}


async def test_versioned_health(client):
    res = await client.get("/api/v1/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_ready_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_503_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_hello(client):
    res = await client.get("/api/v1/hello")
    assert res.status_code == 200
    body = res.json()
    assert body["meta"] == {
        "service": "blog-backend", "language": "Python", "framework": "FastAPI",
    }
    assert body["greeting"]["message"] == "Hello from blog-backend!"


async def test_custom_hello_with_name(client):
    res = await client.get("/api/v1/hello/custom", params={"name": "Kohta"})
    assert res.status_code == 200
    body = res.json()
    assert body["greeting"]["message"] == "Hello Kohta, welcome to blog-backend!"
    assert body["meta"] == {"service": "blog-backend", "type": "custom_greeting"}


async def test_custom_hello_without_name(client):
    body = (await client.get("/api/v1/hello/custom")).json()
    assert body["greeting"]["message"] == "Hello there, welcome to blog-backend!"


async def test_custom_hello_rejects_overlong_name(client):
    res = await client.get("/api/v1/hello/custom", params={"name": "x" * 101})
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "query.name"
