"""Tests for registration validators."""

import pytest

from bloglist.core.modules.user.validators import validate_password, validate_username
from bloglist.errors import ValidationError


class TestValidatePassword:
    """Tests for password validation."""

    def test_valid_password_returned(self):
        assert validate_password("abc") == "abc"
        assert validate_password("salainen") == "salainen"

    def test_short_password_raises_error(self):
        with pytest.raises(ValidationError, match="invalid password"):
            validate_password("12")

    def test_missing_password_raises_error(self):
        with pytest.raises(ValidationError, match="invalid password"):
            validate_password(None)
        with pytest.raises(ValidationError, match="invalid password"):
            validate_password("")


class TestValidateUsername:
    """Tests for username validation."""

    def test_valid_username_returned(self):
        assert validate_username("mluukkai") == "mluukkai"

    def test_surrounding_whitespace_stripped(self):
        assert validate_username("  root  ") == "root"

    def test_short_username_raises_error(self):
        with pytest.raises(ValidationError, match="User validation failed"):
            validate_username("1")

    def test_whitespace_padding_does_not_count_towards_length(self):
        with pytest.raises(ValidationError, match="shorter than the minimum allowed length"):
            validate_username(" ab ")

    def test_missing_username_raises_error(self):
        with pytest.raises(ValidationError, match="is required"):
            validate_username(None)
