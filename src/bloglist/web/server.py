from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from bloglist.app import App
from bloglist.config import Config
from bloglist.errors import UserError
from bloglist.web.error_handlers import general_exception_handler, request_validation_error_handler, user_error_handler
from bloglist.web.openapi import set_custom_openapi
from bloglist.web.routers import blogs_router, login_router, users_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(title="Bloglist API", lifespan=lifespan)

    # Set eagerly so the app is usable by transports that skip lifespan events
    app.state.app = app_instance
    app.state.config = config

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(blogs_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(login_router, prefix="/api")

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
