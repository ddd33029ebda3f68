from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from pymongo import AsyncMongoClient

from bloglist.config import Config
from bloglist.core.core import Core
from bloglist.core.modules.blog.models import BlogView
from bloglist.core.modules.token.models import AuthToken
from bloglist.core.modules.user.models import UserView
from bloglist.errors import AuthenticationError

# Anyone may like a blog; every other field is reserved for the owner
PUBLIC_UPDATE_FIELDS = frozenset({"likes"})


class LoginResult(BaseModel):
    token: str
    username: str
    name: str | None


class App:
    """Facade for all application operations, validates permissions before delegating to Core."""

    def __init__(self, config: Config, mongo_client: AsyncMongoClient[dict[str, Any]] | None = None) -> None:
        self._core = Core(config, mongo_client)

    @property
    def core(self) -> Core:
        return self._core

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def verify_auth_token(self, auth_token: AuthToken) -> None:
        """Check token signature and expiry. Raises AuthenticationError with the reason."""
        self._core.services.token.get_claims(auth_token)

    async def login(self, username: str, password: str) -> LoginResult:
        """Authenticate user and issue a signed token."""
        user = await self._core.services.user.authenticate(username, password)
        token = self._core.services.token.create_token(user)
        return LoginResult(token=token, username=user.username, name=user.name)

    async def get_all_users(self) -> list[UserView]:
        """Get all users with their blogs."""
        return await self._core.services.user.get_all_with_blog_summary()

    async def create_user(self, username: str, name: str | None, password: str | None) -> UserView:
        """Register a new user."""
        user = await self._core.services.user.create_user(username, name, password)
        return UserView.from_domain(user)

    async def get_all_blogs(self) -> list[BlogView]:
        """Get all blogs with their owners."""
        return await self._core.services.blog.get_all_with_owner_summary()

    async def get_blog(self, blog_id: UUID) -> BlogView:
        return await self._core.services.blog.get_with_owner_summary(blog_id)

    async def create_blog(
        self, auth_token: AuthToken, title: str, url: str, author: str | None, likes: int | None
    ) -> BlogView:
        """Create blog owned by the current user."""
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        blog = await self._core.services.blog.create_blog(current_user.id, title, url, author, likes)
        return await self._core.services.blog.get_with_owner_summary(blog.id)

    async def update_blog(self, auth_token: AuthToken | None, blog_id: UUID, changes: dict[str, Any]) -> BlogView:
        """Update blog fields. Changing anything besides likes requires ownership."""
        blog = await self._core.services.blog.get_blog(blog_id)
        if set(changes) - PUBLIC_UPDATE_FIELDS:
            if auth_token is None:
                raise AuthenticationError
            await self._core.services.access.ensure_blog_owner(auth_token, blog)
        await self._core.services.blog.update_blog(blog.id, changes)
        return await self._core.services.blog.get_with_owner_summary(blog.id)

    async def delete_blog(self, auth_token: AuthToken, blog_id: UUID) -> None:
        """Delete blog (owner only)."""
        blog = await self._core.services.blog.get_blog(blog_id)
        await self._core.services.access.ensure_blog_owner(auth_token, blog)
        await self._core.services.blog.delete_blog(blog)
