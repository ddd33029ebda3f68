"""Tests for signed token helpers."""

from datetime import timedelta
from uuid import UUID

import jwt
import pytest

from bloglist.core.modules.token.models import TokenClaims
from bloglist.core.modules.token.utils import decode_token, encode_token
from bloglist.errors import AuthenticationError

SECRET = "unit-test-secret-with-enough-length"
ALGORITHM = "HS256"
CLAIMS = TokenClaims(id=UUID("87654321-4321-8765-4321-876543218765"), username="testuser")


class TestEncodeDecode:
    def test_claims_survive_signing(self):
        token = encode_token(CLAIMS, SECRET, ALGORITHM, timedelta(minutes=5))
        assert decode_token(token, SECRET, ALGORITHM) == CLAIMS

    def test_payload_contains_identity_and_expiry(self):
        token = encode_token(CLAIMS, SECRET, ALGORITHM, timedelta(minutes=5))
        payload = jwt.decode(token, options={"verify_signature": False})
        assert payload["username"] == "testuser"
        assert payload["id"] == "87654321-4321-8765-4321-876543218765"
        assert payload["exp"] > payload["iat"]


class TestRejectedTokens:
    def test_wrong_secret_rejected(self):
        token = encode_token(CLAIMS, SECRET, ALGORITHM, timedelta(minutes=5))
        with pytest.raises(AuthenticationError, match="token missing or invalid"):
            decode_token(token, "another-secret-with-enough-length", ALGORITHM)

    def test_expired_token_rejected(self):
        token = encode_token(CLAIMS, SECRET, ALGORITHM, timedelta(minutes=-1))
        with pytest.raises(AuthenticationError, match="token expired"):
            decode_token(token, SECRET, ALGORITHM)

    def test_garbage_rejected(self):
        with pytest.raises(AuthenticationError):
            decode_token("not.a.token", SECRET, ALGORITHM)

    def test_token_without_expiry_rejected(self):
        token = jwt.encode({"username": "testuser", "id": str(CLAIMS.id)}, SECRET, algorithm=ALGORITHM)
        with pytest.raises(AuthenticationError):
            decode_token(token, SECRET, ALGORITHM)

    def test_token_without_identity_rejected(self):
        token = jwt.encode({"username": "testuser", "iat": 1, "exp": 32503680000}, SECRET, algorithm=ALGORITHM)
        with pytest.raises(AuthenticationError):
            decode_token(token, SECRET, ALGORITHM)
