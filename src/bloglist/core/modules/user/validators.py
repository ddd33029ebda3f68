from bloglist.errors import ValidationError

MIN_PASSWORD_LENGTH = 3
MIN_USERNAME_LENGTH = 3


def validate_password(password: str | None) -> str:
    """Validate password meets requirements.

    Requirements:
    - Present
    - Minimum length of 3 characters

    Returns:
        The validated password

    Raises:
        ValidationError: If password doesn't meet requirements
    """
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("invalid password")
    return password


def validate_username(username: str | None) -> str:
    """Validate username shape and return it stripped of surrounding whitespace.

    Uniqueness needs the store and is checked by UserService.
    """
    username = (username or "").strip()
    if not username:
        raise ValidationError("User validation failed: username: Path `username` is required")
    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError(
            f"User validation failed: username: Path `username` ('{username}') is shorter than "
            f"the minimum allowed length ({MIN_USERNAME_LENGTH})"
        )
    return username
