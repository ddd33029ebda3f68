"""Signed token models."""

from typing import NewType
from uuid import UUID

from pydantic import BaseModel

AuthToken = NewType("AuthToken", str)


class TokenClaims(BaseModel):
    """Identity asserted by a verified token."""

    id: UUID  # User ID
    username: str
