from typing import Any
from uuid import UUID

import structlog
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from bloglist.core.core import Service
from bloglist.core.modules.blog.models import Blog, BlogView
from bloglist.core.modules.user.models import UserSummary
from bloglist.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "author", "url", "likes"})


class BlogService(Service):
    """Manages blog posts and their owner references."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("blogs")

    async def on_start(self) -> None:
        """Create index for owner lookup."""
        await self._collection.create_index([("user_id", 1)])

    async def get_blog(self, blog_id: UUID) -> Blog:
        blog = await self._collection.find_one({"_id": blog_id})
        if blog is None:
            raise NotFoundError(f"Blog '{blog_id}' not found")
        return Blog.model_validate(blog)

    async def get_all_blogs(self) -> list[Blog]:
        return await Blog.list_cursor(self._collection.find())

    async def get_blogs_by_ids(self, blog_ids: list[UUID]) -> dict[UUID, Blog]:
        blogs = await Blog.list_cursor(self._collection.find({"_id": {"$in": blog_ids}}))
        return {blog.id: blog for blog in blogs}

    async def get_all_with_owner_summary(self) -> list[BlogView]:
        """Get all blogs with their owners joined in as summaries."""
        blogs = await self.get_all_blogs()
        return await self._with_owner_summary(blogs)

    async def get_with_owner_summary(self, blog_id: UUID) -> BlogView:
        blog = await self.get_blog(blog_id)
        views = await self._with_owner_summary([blog])
        return views[0]

    async def create_blog(
        self, user_id: UUID, title: str, url: str, author: str | None = None, likes: int | None = None
    ) -> Blog:
        """Create blog owned by the user and record it in the user's blog list."""
        blog = Blog(title=title, author=author, url=url, likes=likes or 0, user_id=user_id)
        await self._collection.insert_one(blog.to_mongo())
        await self.core.services.user.add_blog(user_id, blog.id)
        logger.info("blog_created", blog_id=str(blog.id), user_id=str(user_id))
        return blog

    async def update_blog(self, blog_id: UUID, changes: dict[str, Any]) -> Blog:
        """Apply a partial update to the blog's mutable fields."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Blog validation failed: cannot update {', '.join(sorted(unknown))}")
        if not changes:
            return await self.get_blog(blog_id)

        updated = await self._collection.find_one_and_update(
            {"_id": blog_id}, {"$set": changes}, return_document=ReturnDocument.AFTER
        )
        if updated is None:
            raise NotFoundError(f"Blog '{blog_id}' not found")
        return Blog.model_validate(updated)

    async def delete_blog(self, blog: Blog) -> None:
        """Delete the blog and drop it from its owner's blog list."""
        await self._collection.delete_one({"_id": blog.id})
        if blog.user_id is not None:
            await self.core.services.user.remove_blog(blog.user_id, blog.id)
        logger.info("blog_deleted", blog_id=str(blog.id))

    async def _with_owner_summary(self, blogs: list[Blog]) -> list[BlogView]:
        owner_ids = list({blog.user_id for blog in blogs if blog.user_id is not None})
        owners = await self.core.services.user.get_users_by_ids(owner_ids)

        views = []
        for blog in blogs:
            owner = owners.get(blog.user_id) if blog.user_id is not None else None
            views.append(BlogView.from_domain(blog, UserSummary.from_domain(owner) if owner else None))
        return views
