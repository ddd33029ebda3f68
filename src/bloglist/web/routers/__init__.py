from bloglist.web.routers.blogs import router as blogs_router
from bloglist.web.routers.login import router as login_router
from bloglist.web.routers.users import router as users_router

__all__ = [
    "blogs_router",
    "login_router",
    "users_router",
]
