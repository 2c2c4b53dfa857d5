import pytest


async def _create(client, **overrides):
    payload = {"name": "Rex", "species": "dog", "age": 3, "owner": "Ana"}
    payload.update(overrides)
    resp = await client.post("/pets", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.mark.asyncio
async def test_create_and_get_pet(client):
    created = await _create(client)

    assert created["id"] == 1
    assert created["name"] == "Rex"
    assert created["created_at"].endswith("Z")

    resp = await client.get(f"/pets/{created['id']}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["code"] == 0
    assert body["data"]["species"] == "dog"


@pytest.mark.asyncio
async def test_list_pets_filters_and_paginates(client):
    await _create(client, name="Rex", species="dog")
    await _create(client, name="Tom", species="cat")
    await _create(client, name="Fido", species="Dog")

    resp = await client.get("/pets", params={"species": "dog"})
    data = resp.json()["data"]
    assert data["total"] == 2
    assert [p["name"] for p in data["items"]] == ["Rex", "Fido"]

    resp = await client.get("/pets", params={"skip": 1, "limit": 1})
    data = resp.json()["data"]
    assert data["total"] == 3
    assert [p["name"] for p in data["items"]] == ["Tom"]


@pytest.mark.asyncio
async def test_update_pet_changes_only_sent_fields(client):
    created = await _create(client)

    resp = await client.put(f"/pets/{created['id']}", json={"age": 4})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["age"] == 4
    assert data["name"] == "Rex"
    assert data["owner"] == "Ana"


@pytest.mark.asyncio
async def test_delete_pet(client):
    created = await _create(client)

    resp = await client.delete(f"/pets/{created['id']}")
    assert resp.status_code == 200

    resp = await client.get(f"/pets/{created['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("GET", {}),
        ("PUT", {"json": {"age": 1}}),
        ("DELETE", {}),
    ],
)
async def test_unknown_pet_is_404(client, method, kwargs):
    resp = await client.request(method, "/pets/999", **kwargs)

    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == 20101
    assert body["error"]["type"] == "PetNotFound"
    assert body["error"]["details"] == {"pet_id": 999}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, field",
    [
        ({"species": "dog"}, "name"),
        ({"name": "", "species": "dog"}, "name"),
        ({"name": "Rex", "species": "dog", "age": -1}, "age"),
    ],
)
async def test_invalid_payload_is_422(client, payload, field):
    resp = await client.post("/pets", json=payload)

    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == 10003
    assert body["error"]["field"] == field


@pytest.mark.asyncio
async def test_blank_name_is_rejected_by_domain_rules(client):
    resp = await client.post("/pets", json={"name": "   ", "species": "dog"})

    assert resp.status_code == 422
    assert resp.json()["error"]["type"] == "DomainValidationError"


@pytest.mark.asyncio
async def test_each_app_has_its_own_store(client):
    from main import create_app
    from core.config import Settings
    import httpx

    await _create(client)

    other = create_app(Settings(_env_file=None, NODE_ENV="test"))
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=other), base_url="http://t") as c:
        resp = await c.get("/pets")
    assert resp.json()["data"]["total"] == 0


@pytest.mark.asyncio
async def test_handlers_receive_body_parsed_by_middleware(client, monkeypatch):
    from api.middleware.json_body import JSONBodyMiddleware

    parsed = []

    def _parse(body):
        parsed.append(body)
        return {"name": "Parsed", "species": "cat"}

    monkeypatch.setattr(JSONBodyMiddleware, "_parse", staticmethod(_parse))

    resp = await client.post("/pets", json={"name": "Rex", "species": "dog"})

    assert resp.status_code == 201
    assert len(parsed) == 1
    data = resp.json()["data"]
    assert data["name"] == "Parsed"
    assert data["species"] == "cat"


@pytest.mark.asyncio
async def test_update_with_null_clears_optional_field(client):
    created = await _create(client)

    resp = await client.put(f"/pets/{created['id']}", json={"owner": None})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["owner"] is None
    assert data["name"] == "Rex"
    assert data["age"] == 3


@pytest.mark.asyncio
async def test_update_with_null_required_field_is_422(client):
    created = await _create(client)

    resp = await client.put(f"/pets/{created['id']}", json={"name": None})

    assert resp.status_code == 422
    assert resp.json()["error"]["field"] == "name"


@pytest.mark.asyncio
async def test_create_without_json_body_is_422(client):
    resp = await client.post("/pets", content=b"name=Rex", headers={"Content-Type": "text/plain"})

    assert resp.status_code == 422
    assert resp.json()["code"] == 10003


@pytest.mark.asyncio
async def test_non_object_json_body_is_422(client):
    resp = await client.post("/pets", json=["Rex", "dog"])

    assert resp.status_code == 422
    assert resp.json()["error"]["type"] == "ValidationError"
