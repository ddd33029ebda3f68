from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, cast
from urllib.parse import urlparse

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from bloglist.config import Config


class Service:
    """Base class for services with direct database access."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self.database = database
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    from bloglist.core.modules.access.service import AccessService  # noqa: PLC0415
    from bloglist.core.modules.blog.service import BlogService  # noqa: PLC0415
    from bloglist.core.modules.token.service import TokenService  # noqa: PLC0415
    from bloglist.core.modules.user.service import UserService  # noqa: PLC0415

    user: UserService
    blog: BlogService
    token: TokenService
    access: AccessService

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []
        self._database = database

        # Service configuration: (attribute_name, module_path, class_name)
        # Order matters for initialization - user indexes must exist before blogs reference users
        service_configs = [
            ("user", "bloglist.core.modules.user.service", "UserService"),
            ("blog", "bloglist.core.modules.blog.service", "BlogService"),
            ("token", "bloglist.core.modules.token.service", "TokenService"),
            ("access", "bloglist.core.modules.access.service", "AccessService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(database)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, database, and all service instances.

    The mongo client can be injected (tests pass an in-memory client). A client
    created here from ``config.database_url`` is owned by the core and closed
    on shutdown; an injected one is left to its creator.
    """

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]]
    database: AsyncDatabase[dict[str, Any]]
    services: Services

    def __init__(self, config: Config, mongo_client: AsyncMongoClient[dict[str, Any]] | None = None) -> None:
        self.config = config
        self._owns_client = mongo_client is None
        if mongo_client is None:
            mongo_client = AsyncMongoClient(config.database_url, uuidRepresentation="standard")
        self.mongo_client = mongo_client
        self.database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
        self.services = Services(self.database)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services and close the MongoDB connection if this core opened it."""
        await self.services.stop_all()
        if self._owns_client:
            await self.mongo_client.aclose()
