from httpx import AsyncClient


async def _register_and_login(client: AsyncClient, username: str) -> tuple[dict, int]:
    res = await client.post("/api/v1/auth/register", json={
        "username": username, "email": f"{username}@example.com", "password": "testpass"
    })
    login = await client.post("/api/v1/auth/login", json={"username": username, "password": "testpass"})
    return {"Authorization": f"Bearer {login.json()['access_token']}"}, res.json()["id"]


async def test_create_and_list_pets(client: AsyncClient):
    headers, user_id = await _register_and_login(client, "ana")
    res = await client.post("/api/v1/pets", json={"name": "Rex", "type": "dog", "age": 3}, headers=headers)
    assert res.status_code == 201
    pet = res.json()
    assert pet["name"] == "Rex"
    assert pet["type"] == "dog"
    assert pet["user_id"] == user_id

    await client.post("/api/v1/pets", json={"name": "Mia", "type": "cat"}, headers=headers)
    res = await client.get("/api/v1/pets", headers=headers)
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Rex", "Mia"]


async def test_get_pet_is_public(client: AsyncClient):
    headers, _ = await _register_and_login(client, "ana")
    pet = (await client.post("/api/v1/pets", json={"name": "Rex", "type": "dog"}, headers=headers)).json()

    res = await client.get(f"/api/v1/pets/{pet['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Rex"

    res = await client.get("/api/v1/pets/999999")
    assert res.status_code == 404
    assert res.json()["message"] == "Pet not found"


async def test_create_pet_rejects_unknown_type(client: AsyncClient):
    headers, _ = await _register_and_login(client, "ana")
    res = await client.post("/api/v1/pets", json={"name": "Polly", "type": "parrot"}, headers=headers)
    assert res.status_code == 400


async def test_create_pet_requires_auth(client: AsyncClient):
    res = await client.post("/api/v1/pets", json={"name": "Rex", "type": "dog"})
    assert res.status_code == 401


async def test_update_pet_partial(client: AsyncClient):
    headers, _ = await _register_and_login(client, "ana")
    pet = (await client.post(
        "/api/v1/pets", json={"name": "Rex", "type": "dog", "breed": "Beagle"}, headers=headers
    )).json()

    res = await client.put(f"/api/v1/pets/{pet['id']}", json={"weight": 12}, headers=headers)
    assert res.status_code == 200
    data = res.json()
    assert data["weight"] == 12
    assert data["breed"] == "Beagle"
    assert data["name"] == "Rex"


async def test_update_pet_rejects_null_name(client: AsyncClient):
    headers, _ = await _register_and_login(client, "ana")
    pet = (await client.post("/api/v1/pets", json={"name": "Rex", "type": "dog"}, headers=headers)).json()
    res = await client.put(f"/api/v1/pets/{pet['id']}", json={"name": None}, headers=headers)
    assert res.status_code == 400


async def test_only_owner_can_change_pet(client: AsyncClient):
    ana_headers, _ = await _register_and_login(client, "ana")
    bob_headers, _ = await _register_and_login(client, "bob")
    pet = (await client.post("/api/v1/pets", json={"name": "Rex", "type": "dog"}, headers=ana_headers)).json()

    res = await client.put(f"/api/v1/pets/{pet['id']}", json={"name": "Stolen"}, headers=bob_headers)
    assert res.status_code == 403
    res = await client.delete(f"/api/v1/pets/{pet['id']}", headers=bob_headers)
    assert res.status_code == 403


async def test_delete_pet(client: AsyncClient):
    headers, _ = await _register_and_login(client, "ana")
    pet = (await client.post("/api/v1/pets", json={"name": "Rex", "type": "dog"}, headers=headers)).json()

    res = await client.delete(f"/api/v1/pets/{pet['id']}", headers=headers)
    assert res.status_code == 200
    res = await client.delete(f"/api/v1/pets/{pet['id']}", headers=headers)
    assert res.status_code == 404
