"""
Pydantic Schemas Package

DTOs are the only shapes that cross the HTTP boundary; SQLAlchemy
models never leave the repositories and mappers.

Schema Naming Convention:
- XxxCreate: body accepted when creating a record
- XxxUpdate: body accepted when replacing a record (carries its id)
- XxxRead: shape returned in responses
"""

from bookstore.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
)
from bookstore.schemas.book import (
    BookBase,
    BookCreate,
    BookRead,
    BookUpdate,
)
from bookstore.schemas.shared import AuthorSummary, BookSummary, CamelModel
from bookstore.schemas.user import TokenResponse, UserDTO, UserResponse

__all__ = [
    "CamelModel",
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorRead",
    "AuthorSummary",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookRead",
    "BookSummary",
    # User schemas
    "UserDTO",
    "UserResponse",
    "TokenResponse",
]
