"""API tests for /api/users."""

from conftest import users_in_db


class TestCreateUser:
    async def test_creation_succeeds_with_a_fresh_username(self, client, app):
        users_at_start = await users_in_db(app)
        new_user = {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}

        response = await client.post("/api/users", json=new_user)
        assert response.status_code == 201
        assert response.headers["content-type"].startswith("application/json")

        users_at_end = await users_in_db(app)
        assert len(users_at_end) == len(users_at_start) + 1
        assert new_user["username"] in [user.username for user in users_at_end]

    async def test_response_never_contains_password(self, client, app):
        new_user = {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}
        body = (await client.post("/api/users", json=new_user)).json()
        assert set(body) == {"id", "username", "name", "blogs"}
        assert body["blogs"] == []

        stored = next(user for user in await users_in_db(app) if user.username == "mluukkai")
        assert stored.password_hash != "salainen"

    async def test_users_with_invalid_username_are_not_created(self, client, app):
        users_at_start = await users_in_db(app)
        new_user = {"username": "1", "name": "Matti Luukkainen", "password": "salainen"}

        response = await client.post("/api/users", json=new_user)
        assert response.status_code == 400
        assert "User validation failed" in response.json()["error"]
        assert await users_in_db(app) == users_at_start

    async def test_users_with_invalid_password_are_not_created(self, client, app):
        users_at_start = await users_in_db(app)
        new_user = {"username": "luke", "name": "Matti Luukkainen", "password": "1"}

        response = await client.post("/api/users", json=new_user)
        assert response.status_code == 400
        assert "invalid password" in response.json()["error"]
        assert await users_in_db(app) == users_at_start

    async def test_missing_password_is_invalid_password(self, client):
        response = await client.post("/api/users", json={"username": "luke"})
        assert response.status_code == 400
        assert response.json()["error"] == "invalid password"

    async def test_duplicate_username_is_rejected(self, client, app):
        users_at_start = await users_in_db(app)
        response = await client.post("/api/users", json={"username": "test", "password": "another"})
        assert response.status_code == 400
        assert "User validation failed" in response.json()["error"]
        assert "unique" in response.json()["error"]
        assert len(await users_in_db(app)) == len(users_at_start)


class TestListUsers:
    async def test_users_are_returned_with_blog_summaries(self, client, auth_headers):
        blog = {"title": "Owned", "author": "Me", "url": "http://example.com", "likes": 4}
        created = (await client.post("/api/blogs", json=blog, headers=auth_headers)).json()

        response = await client.get("/api/users")
        assert response.status_code == 200
        users = response.json()
        assert len(users) == 1
        assert users[0]["username"] == "test"
        assert users[0]["blogs"] == [
            {"id": created["id"], "title": "Owned", "author": "Me", "url": "http://example.com", "likes": 4}
        ]
        assert "password_hash" not in users[0]
