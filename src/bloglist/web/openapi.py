from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Bloglist API",
            version="0.1.0",
            summary="Blog list with user registration and token authentication",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "Token obtained from POST /api/login",
            },
        }

        openapi_schema["security"] = [{"BearerAuth": []}]

        # Remove security from public endpoints
        public_endpoints = {
            ("GET", "/health"),
            ("GET", "/api/blogs"),
            ("GET", "/api/blogs/{blog_id}"),
            ("PUT", "/api/blogs/{blog_id}"),
            ("GET", "/api/users"),
            ("POST", "/api/users"),
            ("POST", "/api/login"),
        }

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in public_endpoints:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"error": "invalid password", "type": "validation_error"},
                {"error": "token missing or invalid", "type": "authentication_error"},
                {"error": "only the creator can modify or delete a blog", "type": "access_denied"},
            ]
        }
    }
