from bloglist.core.core import Service
from bloglist.core.modules.blog.models import Blog
from bloglist.core.modules.token.models import AuthToken
from bloglist.core.modules.user.models import User
from bloglist.errors import AccessDeniedError, AuthenticationError, NotFoundError


class AccessService(Service):
    async def ensure_authenticated(self, auth_token: AuthToken) -> User:
        """Ensure the token is valid and its user still exists."""
        claims = self.core.services.token.get_claims(auth_token)
        try:
            return await self.core.services.user.get_user(claims.id)
        except NotFoundError:
            raise AuthenticationError from None

    async def ensure_blog_owner(self, auth_token: AuthToken, blog: Blog) -> User:
        """Ensure the authenticated user owns the blog, raise AccessDeniedError if not."""
        user = await self.ensure_authenticated(auth_token)
        if blog.user_id != user.id:
            raise AccessDeniedError("only the creator can modify or delete a blog")
        return user
