import bcrypt

# bcrypt only uses the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    """Hash a plain-text password with a fresh salt."""
    pw_bytes = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    """Verify a plain password against a stored hash. A malformed hash never matches."""
    pw_bytes = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False
