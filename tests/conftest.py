"""Shared pytest fixtures.

Every test gets a fresh in-memory MongoDB, one registered user and two
ownerless blogs, mirroring the state the API tests expect.
"""

from collections.abc import AsyncGenerator

import mongomock.collection
import pytest
from bson import BSON
from bson.binary import UuidRepresentation
from bson.codec_options import CodecOptions
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from bloglist.app import App
from bloglist.config import Config
from bloglist.core.modules.blog.models import Blog
from bloglist.core.modules.user.models import User
from bloglist.web.server import create_fastapi_app

TEST_USERNAME = "test"
TEST_PASSWORD = "test"

INITIAL_BLOGS = [
    {"title": "TESTBLOG-1", "author": "TEST AUTHOR 1", "url": "URL", "likes": 1},
    {"title": "TESTBLOG-2", "author": "TEST AUTHOR 2", "url": "URL", "likes": 1},
]

STANDARD_UUID_OPTIONS = CodecOptions(uuid_representation=UuidRepresentation.STANDARD)


class StandardUuidBSON(BSON):
    """BSON check used by mongomock, encoding native UUIDs like the production client does."""

    @classmethod
    def encode(cls, document, check_keys=False, codec_options=STANDARD_UUID_OPTIONS):
        return super().encode(document, check_keys=check_keys, codec_options=codec_options)


@pytest.fixture(autouse=True)
def standard_uuid_encoding(monkeypatch):
    """mongomock validates writes with the default UNSPECIFIED uuid representation."""
    monkeypatch.setattr(mongomock.collection, "BSON", StandardUuidBSON)


async def blogs_in_db(app: App) -> list[Blog]:
    return await app.core.services.blog.get_all_blogs()


async def users_in_db(app: App) -> list[User]:
    return await app.core.services.user.get_all_users()


@pytest.fixture
def config() -> Config:
    return Config(
        database_url="mongodb://localhost/bloglist_test",
        jwt_secret_key="test-secret-key-with-enough-length",
        bcrypt_rounds=4,
        _env_file=None,
    )


@pytest.fixture
async def app(config: Config) -> AsyncGenerator[App]:
    app = App(config, mongo_client=AsyncMongoMockClient())
    async with app.lifespan():
        yield app


@pytest.fixture
async def test_user(app: App) -> User:
    return await app.core.services.user.create_user(TEST_USERNAME, "Test User", TEST_PASSWORD)


@pytest.fixture
async def initial_blogs(app: App) -> list[Blog]:
    blogs = [Blog.model_validate(data) for data in INITIAL_BLOGS]
    await app.core.database.get_collection("blogs").insert_many([blog.to_mongo() for blog in blogs])
    return blogs


@pytest.fixture
def auth_headers(app: App, test_user: User) -> dict[str, str]:
    token = app.core.services.token.create_token(test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def other_user_headers(app: App) -> dict[str, str]:
    """Headers for a second user who owns nothing."""
    user = await app.core.services.user.create_user("intruder", None, "secret")
    token = app.core.services.token.create_token(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(app: App, config: Config, test_user: User, initial_blogs: list[Blog]) -> AsyncGenerator[AsyncClient]:
    fastapi_app = create_fastapi_app(app, config)
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as ac:
        yield ac
