"""
Entity <-> DTO Conversion

One function per direction and DTO pair. Routers and services never
copy fields by hand; they call these.

Create/update mappers return detached entities. Update mappers set
the id so the repository can replace the stored row in full.
"""

from bookstore.models import Author, Book, User
from bookstore.schemas import (
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
    BookCreate,
    BookRead,
    BookUpdate,
    UserResponse,
)


# =============================================================================
# Authors
# =============================================================================
def author_from_create(dto: AuthorCreate) -> Author:
    return Author(
        first_name=dto.first_name,
        last_name=dto.last_name,
        bio=dto.bio,
    )


def author_from_update(dto: AuthorUpdate) -> Author:
    return Author(
        id=dto.id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        bio=dto.bio,
    )


def author_to_read(author: Author) -> AuthorRead:
    return AuthorRead.model_validate(author)


def authors_to_read(authors: list[Author]) -> list[AuthorRead]:
    return [author_to_read(a) for a in authors]


# =============================================================================
# Books
# =============================================================================
def book_from_create(dto: BookCreate) -> Book:
    return Book(
        title=dto.title,
        year=dto.year,
        isbn=dto.isbn,
        summary=dto.summary,
        image=dto.image,
        price=dto.price,
        author_id=dto.author_id,
    )


def book_from_update(dto: BookUpdate) -> Book:
    return Book(
        id=dto.id,
        title=dto.title,
        year=dto.year,
        isbn=dto.isbn,
        summary=dto.summary,
        image=dto.image,
        price=dto.price,
        author_id=dto.author_id,
    )


def book_to_read(book: Book) -> BookRead:
    return BookRead.model_validate(book)


def books_to_read(books: list[Book]) -> list[BookRead]:
    return [book_to_read(b) for b in books]


# =============================================================================
# Users
# =============================================================================
def user_to_response(user: User) -> UserResponse:
    # roles is a computed list, not a mapped column
    return UserResponse(id=user.id, email=user.email, roles=user.role_names)
