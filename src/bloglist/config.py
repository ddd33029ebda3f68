from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # MongoDB URL including database name, e.g. mongodb://localhost/bloglist
    host: str = "127.0.0.1"
    port: int = 3003
    debug: bool = False
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    token_expire_minutes: int = 60
    bcrypt_rounds: int = 10
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "BLOGLIST_",
        "extra": "ignore",
    }
