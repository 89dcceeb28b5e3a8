"""
FastAPI Dependencies Module

Reusable components injected into route handlers:
- DbSession: one SQLAlchemy session per request
- AuthorServiceDep / BookServiceDep: catalog services bound to it
- require_roles(): the role guard used by the authors router

Role Guard
==========
The guard reads the bearer token, decodes it and compares its "roles"
claim with the roles a route requires. It fails closed:
- no token, or a token that does not decode → 401
- a valid token without any of the required roles → 403

Usage:
    @router.post("")
    def create_author(author_data: AuthorCreate, _: AdministratorUser): ...
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from bookstore.database import get_db
from bookstore.models.user import Role
from bookstore.services.catalog import AuthorService, BookService
from bookstore.services.security import verify_access_token

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Catalog Services
# =============================================================================
def get_author_service(db: DbSession) -> AuthorService:
    return AuthorService.for_session(db)


def get_book_service(db: DbSession) -> BookService:
    return BookService.for_session(db)


AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]


# =============================================================================
# Authentication
# =============================================================================
# auto_error=False: a missing header reaches get_principal as None so the
# 401 body matches every other authentication failure.
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/users/login",
    auto_error=False,
)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as described by its access token."""

    user_id: int
    email: str | None
    roles: frozenset[str]

    def has_any_role(self, *roles: Role) -> bool:
        return any(role.value in self.roles for role in roles)


def get_principal(token: str | None = Depends(oauth2_scheme)) -> Principal:
    """
    Build the Principal from the bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        raise credentials_exception

    payload = verify_access_token(token)
    if payload is None:
        raise credentials_exception

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise credentials_exception

    roles = payload.get("roles") or []
    if not isinstance(roles, list):
        raise credentials_exception

    return Principal(
        user_id=int(subject),
        email=payload.get("email"),
        roles=frozenset(str(role) for role in roles),
    )


def require_roles(*roles: Role):
    """
    Dependency factory: admit callers holding at least one of roles.

    Raises:
        HTTPException: 403 if none of the roles is in the token
    """

    def guard(principal: Principal = Depends(get_principal)) -> Principal:
        if not principal.has_any_role(*roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You do not have permission to perform this action",
            )
        return principal

    return guard


CustomerUser = Annotated[Principal, Depends(require_roles(Role.CUSTOMER))]
AdministratorUser = Annotated[Principal, Depends(require_roles(Role.ADMINISTRATOR))]
