from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from bloglist.core.core import Service
from bloglist.core.modules.user.models import BlogSummary, User, UserView
from bloglist.core.modules.user.password import check_password, hash_password
from bloglist.core.modules.user.validators import validate_password, validate_username
from bloglist.errors import AuthenticationError, NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def _duplicate_username_error(username: str) -> ValidationError:
    return ValidationError(f"User validation failed: username: Error, expected `username` to be unique. Value: `{username}`")


class UserService(Service):
    """Manages user accounts and their owned blog references."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")

    async def get_user(self, user_id: UUID) -> User:
        """Get user by ID."""
        user = await self._collection.find_one({"_id": user_id})
        if user is None:
            raise NotFoundError(f"User '{user_id}' not found")
        return User.model_validate(user)

    async def find_user_by_username(self, username: str) -> User | None:
        user = await self._collection.find_one({"username": username})
        return None if user is None else User.model_validate(user)

    async def has_username(self, username: str) -> bool:
        """Check if username exists."""
        return await self.find_user_by_username(username) is not None

    async def get_all_users(self) -> list[User]:
        return await User.list_cursor(self._collection.find())

    async def get_users_by_ids(self, user_ids: list[UUID]) -> dict[UUID, User]:
        users = await User.list_cursor(self._collection.find({"_id": {"$in": user_ids}}))
        return {user.id: user for user in users}

    async def get_all_with_blog_summary(self) -> list[UserView]:
        """Get all users with their owned blogs joined in as summaries."""
        users = await self.get_all_users()
        blog_ids = [blog_id for user in users for blog_id in user.blogs]
        blogs = await self.core.services.blog.get_blogs_by_ids(blog_ids)

        result = []
        for user in users:
            summaries = [
                BlogSummary(id=blog.id, title=blog.title, author=blog.author, url=blog.url, likes=blog.likes)
                for blog_id in user.blogs
                if (blog := blogs.get(blog_id)) is not None
            ]
            result.append(UserView.from_domain(user, summaries))
        return result

    async def create_user(self, username: str, name: str | None, password: str | None) -> User:
        """Create user with hashed password.

        The password is checked first so that a bad password is reported as such
        even when the username is also invalid.
        """
        password = validate_password(password)
        username = validate_username(username)
        if await self.has_username(username):
            raise _duplicate_username_error(username)

        password_hash = hash_password(password, self.core.config.bcrypt_rounds)
        user = User(username=username, name=name, password_hash=password_hash)
        try:
            await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError:
            # Lost the race against a concurrent registration of the same username
            raise _duplicate_username_error(username) from None

        logger.info("user_created", user_id=str(user.id), username=username)
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """Return the user matching the credentials or raise AuthenticationError."""
        username = username.strip()
        user = await self.find_user_by_username(username)
        if user is None or not check_password(password, user.password_hash):
            logger.info("login_failed", username=username)
            raise AuthenticationError("invalid username or password")
        return user

    async def add_blog(self, user_id: UUID, blog_id: UUID) -> None:
        """Append a blog reference to the owner's blog list."""
        await self._collection.update_one({"_id": user_id}, {"$push": {"blogs": blog_id}})

    async def remove_blog(self, user_id: UUID, blog_id: UUID) -> None:
        await self._collection.update_one({"_id": user_id}, {"$pull": {"blogs": blog_id}})

    async def on_start(self) -> None:
        """Create the unique username index."""
        await self._collection.create_index([("username", 1)], unique=True)
        logger.debug("user_service_started")
