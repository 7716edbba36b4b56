import logging
from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from . import models
from .config import get_settings
from .database import SessionLocal
from .tokens import InvalidToken, TokenService

logger = logging.getLogger(__name__)


# ----- DB -----
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----- Passwords -----
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


# ----- Auth / JWT -----
@lru_cache()
def get_token_service() -> TokenService:
    return TokenService.from_settings(get_settings())


# auto_error=False: a missing header must produce our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> models.User:
    """
    Resolve the bearer token to a stored user.

    Raises 401 ``Unauthorized`` when no token is sent and 401 ``Invalid token``
    when it fails verification or names a user that no longer exists.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    invalid_token = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        user_id = tokens.verify(credentials.credentials)
    except InvalidToken as exc:
        logger.warning("Rejected token: %s", exc)
        raise invalid_token

    user = db.get(models.User, user_id)
    if user is None:
        logger.warning("Token for unknown user id %s", user_id)
        raise invalid_token
    return user


def require_roles(*allowed_roles: str):
    """
    Usage: current_user: models.User = Depends(require_roles("admin"))
    """
    def role_checker(current_user: models.User = Depends(get_current_user)) -> models.User:
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden",
            )
        return current_user

    return role_checker
