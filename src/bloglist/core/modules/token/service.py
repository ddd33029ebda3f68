from datetime import timedelta

from bloglist.core.core import Service
from bloglist.core.modules.token.models import AuthToken, TokenClaims
from bloglist.core.modules.token.utils import decode_token, encode_token
from bloglist.core.modules.user.models import User


class TokenService(Service):
    """Issues and verifies stateless signed tokens."""

    def create_token(self, user: User) -> AuthToken:
        config = self.core.config
        return encode_token(
            TokenClaims(id=user.id, username=user.username),
            config.jwt_secret_key,
            config.jwt_algorithm,
            timedelta(minutes=config.token_expire_minutes),
        )

    def get_claims(self, auth_token: AuthToken) -> TokenClaims:
        """Verify the token. Raises AuthenticationError if it is not valid."""
        return decode_token(auth_token, self.core.config.jwt_secret_key, self.core.config.jwt_algorithm)
