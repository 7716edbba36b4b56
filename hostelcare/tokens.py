from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from .config import Settings


class InvalidToken(Exception):
    """Raised when a token is malformed, has a bad signature or has expired."""


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Tokens are HS256 JWTs carrying the user id in the ``id`` claim. There is
    no revocation: a token stays valid until it expires.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_days: int = 7):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(days=expire_days)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expire_days=settings.token_expire_days,
        )

    def issue(self, user_id: int, expires_delta: Optional[timedelta] = None) -> str:
        expire = datetime.utcnow() + (expires_delta if expires_delta is not None else self.expires_delta)
        return jwt.encode({"id": user_id, "exp": expire}, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidToken(str(exc)) from exc

        user_id = payload.get("id")
        if not isinstance(user_id, int):
            raise InvalidToken("Token carries no user id")
        return user_id
