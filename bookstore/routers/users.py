"""
Users Router

Account endpoints used by the UI client:
- POST /users/register: create a Customer account
- POST /users/login: exchange credentials for a JWT access token

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or returned
- Tokens carry the account's roles; the authors router checks them
- Both endpoints are rate limited more strictly than the rest
"""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, HTTPException, Request, status

from bookstore.config import get_settings
from bookstore.dependencies import DbSession
from bookstore.mappers import user_to_response
from bookstore.models.user import Role, User, UserRole
from bookstore.repositories import UserRepository
from bookstore.routers.errors import INTERNAL_ERROR_MESSAGE
from bookstore.schemas import TokenResponse, UserDTO, UserResponse
from bookstore.services.rate_limiter import limiter
from bookstore.services.security import (
    create_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        400: {"description": "Bad request"},
    },
)


# -------------------------------------------------------------------------
# Registration Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new customer",
    responses={409: {"description": "Email already registered"}},
)
@limiter.limit(settings.rate_limit_auth)
def register(
    request: Request,
    user_data: UserDTO,
    db: DbSession,
) -> UserResponse:
    """
    Register a new account with e-mail and password.

    1. Validates e-mail format and password length (Pydantic)
    2. Rejects an e-mail that is already registered
    3. Hashes the password and grants the Customer role
    """
    users = UserRepository(db)
    email = user_data.email_address.lower()

    if users.email_exists(email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    user = User(
        email=email,
        hashed_password=hash_password(user_data.password),
        roles=[UserRole(role=Role.CUSTOMER.value)],
    )

    if not users.create(user):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE,
        )

    logger.info(f"New user registered: {user.email}")

    return user_to_response(user)


# -------------------------------------------------------------------------
# Login Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
    description="""
    Authenticate and receive a JWT access token.

    Include it in the Authorization header of later requests:
    ```
    Authorization: Bearer <accessToken>
    ```
    """,
    responses={401: {"description": "Incorrect email or password"}},
)
@limiter.limit(settings.rate_limit_auth)
def login(
    request: Request,
    credentials: UserDTO,
    db: DbSession,
) -> TokenResponse:
    users = UserRepository(db)
    email = credentials.email_address.lower()
    user = users.find_by_email(email)

    # Same message for both cases so e-mails cannot be enumerated
    if user is None or not verify_password(credentials.password, user.hashed_password):
        logger.warning(f"Login failed for {email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        {"sub": str(user.id), "email": user.email, "roles": user.role_names}
    )

    if not users.record_login(user, datetime.now(UTC)):
        logger.warning(f"Could not record login time for {user.email}")

    logger.info(f"User logged in: {user.email}")

    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.access_token_expire_minutes * 60,
    )
