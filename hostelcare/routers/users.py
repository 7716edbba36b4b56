import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..deps import (
    get_db,
    get_password_hash,
    get_token_service,
    get_user_by_email,
    require_roles,
    verify_password,
)
from ..store import persist
from ..tokens import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/login", response_model=schemas.LoginResponse, tags=["auth"])
def login(
    credentials: schemas.LoginRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Authenticate a user by email and password.

    Returns a bearer token valid for seven days together with the user's
    profile.

    Raises
    ------
    HTTPException
        - 400 ``User not found`` if no account uses the email.
        - 400 ``Invalid password`` if the password does not match.
    """
    user = get_user_by_email(db, credentials.email)
    if not user:
        logger.warning("Login failed for %s: unknown email", credentials.email)
        raise HTTPException(status_code=400, detail="User not found")

    if not verify_password(credentials.password, user.hashed_password):
        logger.warning("Login failed for %s: wrong password", credentials.email)
        raise HTTPException(status_code=400, detail="Invalid password")

    logger.info("User %s logged in", user.id)
    return {"token": tokens.issue(user.id), "user": user}


@router.post("/create-user", response_model=schemas.UserOut)
def create_user(
    user_in: schemas.UserCreate,
    db: Session = Depends(get_db),
    _: models.User = Depends(require_roles("admin")),
):
    """
    Create a user account. *(Admin-only)*

    ``roomNo`` is only meaningful for students.

    Raises
    ------
    HTTPException
        - 400 ``Error creating user`` if a required field is missing, the
          email is taken, the role is unknown or the contact is not a number
          of at most ten digits.
    """
    error = "Error creating user"
    if not user_in.password:
        raise HTTPException(status_code=400, detail=error)

    try:
        user = models.User(
            name=user_in.name,
            email=user_in.email,
            contact=user_in.contact,
            hashed_password=get_password_hash(user_in.password),
            role=user_in.role,
            room_no=user_in.room_no,
        )
    except ValueError as exc:
        logger.info("%s: %s", error, exc)
        raise HTTPException(status_code=400, detail=error)

    user = persist(db, user, error)
    logger.info("Created %s user %s", user.role, user.id)
    return user


@router.get("/users", response_model=schemas.UserList)
def list_users(
    db: Session = Depends(get_db),
    _: models.User = Depends(require_roles("admin")),
):
    """List every user account. *(Admin-only)*"""
    return {"users": db.query(models.User).all()}
