from httpx import AsyncClient


async def test_register(client: AsyncClient):
    res = await client.post("/api/v1/auth/register", json={
        "username": "ana",
        "email": "ana@x.com",
        "password": "securepassword",
        "first_name": "Ana",
        "last_name": "Lima",
    })
    assert res.status_code == 201
    data = res.json()
    assert data["username"] == "ana"
    assert data["email"] == "ana@x.com"
    assert data["first_name"] == "Ana"
    assert "password" not in data
    assert "hashed_password" not in data


async def test_register_duplicate_email(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "alice", "email": "alice@example.com", "password": "pw123"
    })
    res = await client.post("/api/v1/auth/register", json={
        "username": "alice2", "email": "alice@example.com", "password": "pw123"
    })
    assert res.status_code == 400
    assert res.json()["message"] == "Email already registered"


async def test_register_duplicate_username(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "alice", "email": "alice@example.com", "password": "pw123"
    })
    res = await client.post("/api/v1/auth/register", json={
        "username": "alice", "email": "other@example.com", "password": "pw123"
    })
    assert res.status_code == 400
    assert res.json()["message"] == "Username already taken"


async def test_register_invalid_body(client: AsyncClient):
    res = await client.post("/api/v1/auth/register", json={"username": "nomail", "password": "pw"})
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid data provided"
    assert any(err["loc"][-1] == "email" for err in body["error"])


async def test_login(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "bob", "email": "bob@example.com", "password": "testpass"
    })
    res = await client.post("/api/v1/auth/login", json={"username": "bob", "password": "testpass"})
    assert res.status_code == 200
    data = res.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["user"]["username"] == "bob"
    assert "password" not in data["user"]


async def test_login_wrong_password(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "carol", "email": "carol@example.com", "password": "correct"
    })
    res = await client.post("/api/v1/auth/login", json={"username": "carol", "password": "wrong"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid credentials"


async def test_login_unknown_user(client: AsyncClient):
    res = await client.post("/api/v1/auth/login", json={"username": "ghost", "password": "pw"})
    assert res.status_code == 401


async def test_me(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "dave", "email": "dave@example.com", "password": "pw"
    })
    login = await client.post("/api/v1/auth/login", json={"username": "dave", "password": "pw"})
    token = login.json()["access_token"]
    res = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    assert res.json()["email"] == "dave@example.com"
    assert "password" not in res.json()


async def test_me_unauthenticated(client: AsyncClient):
    res = await client.get("/api/v1/auth/me")
    assert res.status_code == 401

    res = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert res.status_code == 401


async def test_logout_ends_session(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "eve", "email": "eve@example.com", "password": "pw"
    })
    login = await client.post("/api/v1/auth/login", json={"username": "eve", "password": "pw"})
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    res = await client.post("/api/v1/auth/logout", headers=headers)
    assert res.status_code == 200
    assert res.json()["message"] == "Logged out successfully"

    res = await client.get("/api/v1/auth/me", headers=headers)
    assert res.status_code == 401
    res = await client.post("/api/v1/auth/logout", headers=headers)
    assert res.status_code == 401


async def test_sessions_are_independent(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "fay", "email": "fay@example.com", "password": "pw"
    })
    first = await client.post("/api/v1/auth/login", json={"username": "fay", "password": "pw"})
    second = await client.post("/api/v1/auth/login", json={"username": "fay", "password": "pw"})
    first_headers = {"Authorization": f"Bearer {first.json()['access_token']}"}
    second_headers = {"Authorization": f"Bearer {second.json()['access_token']}"}

    await client.post("/api/v1/auth/logout", headers=first_headers)
    res = await client.get("/api/v1/auth/me", headers=second_headers)
    assert res.status_code == 200
