"""
Catalog Service

The five operations of each catalog resource (list, get, create,
update, delete), independent of HTTP.

Every operation returns a Result instead of raising. A Result holds
either a value or an ErrorKind plus a message and field errors; the
routers translate the kind into a status code (see routers/errors.py).

Order of checks for mutations:
1. input checks (validation.py) → VALIDATION
2. existence check via the repository → NOT_FOUND
   (Book create checks the referenced author instead → VALIDATION)
3. the mutation itself → PERSISTENCE if the store reports False
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from bookstore import mappers
from bookstore.repositories import AuthorRepository, BookRepository
from bookstore.schemas import (
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
    BookCreate,
    BookRead,
    BookUpdate,
)
from bookstore.validation import FieldError, check_path_id, check_update

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Why an operation did not produce a value."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


@dataclass
class Result(Generic[T]):
    """
    Outcome of a catalog operation.

    Build with Result.ok(value) or Result.fail(kind, message).
    """

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""
    field_errors: list[FieldError] = field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        field_errors: list[FieldError] | None = None,
    ) -> "Result[T]":
        return cls(error=kind, message=message, field_errors=field_errors or [])

    @classmethod
    def invalid(cls, field_errors: list[FieldError]) -> "Result[T]":
        return cls.fail(ErrorKind.VALIDATION, "Invalid request", field_errors)


# =============================================================================
# Authors
# =============================================================================
class AuthorService:
    """Author operations over an AuthorRepository."""

    def __init__(self, authors: AuthorRepository) -> None:
        self.authors = authors

    @classmethod
    def for_session(cls, db: Session) -> "AuthorService":
        return cls(AuthorRepository(db))

    def list_all(self) -> Result[list[AuthorRead]]:
        authors = self.authors.find_all()
        return Result.ok(mappers.authors_to_read(authors))

    def get(self, author_id: int) -> Result[AuthorRead]:
        author = self.authors.find_by_id(author_id)
        if author is None:
            return _not_found("Author", author_id)
        return Result.ok(mappers.author_to_read(author))

    def create(self, dto: AuthorCreate | None) -> Result[AuthorRead]:
        if dto is None:
            return Result.invalid(
                [FieldError(field="body", message="Request body is required")]
            )

        author = mappers.author_from_create(dto)
        if not self.authors.create(author):
            return _persistence_failure("create", "Author")

        logger.info(f"Created author {author.id}")
        return Result.ok(mappers.author_to_read(author))

    def update(self, author_id: int, dto: AuthorUpdate | None) -> Result[None]:
        errors = check_update(author_id, dto)
        if errors:
            return Result.invalid(errors)

        if not self.authors.is_exists(author_id):
            return _not_found("Author", author_id)

        if not self.authors.update(mappers.author_from_update(dto)):
            return _persistence_failure("update", "Author", author_id)

        logger.info(f"Updated author {author_id}")
        return Result.ok()

    def delete(self, author_id: int) -> Result[None]:
        errors = check_path_id(author_id)
        if errors:
            return Result.invalid(errors)

        if not self.authors.is_exists(author_id):
            return _not_found("Author", author_id)

        # Not atomic with the check above
        author = self.authors.find_by_id(author_id)
        if author is None:
            return _not_found("Author", author_id)

        if not self.authors.delete(author):
            return _persistence_failure("delete", "Author", author_id)

        logger.info(f"Deleted author {author_id}")
        return Result.ok()


# =============================================================================
# Books
# =============================================================================
class BookService:
    """
    Book operations over a BookRepository.

    Needs the AuthorRepository too: creating a book requires the
    referenced author to exist.
    """

    def __init__(self, books: BookRepository, authors: AuthorRepository) -> None:
        self.books = books
        self.authors = authors

    @classmethod
    def for_session(cls, db: Session) -> "BookService":
        return cls(BookRepository(db), AuthorRepository(db))

    def list_all(self) -> Result[list[BookRead]]:
        books = self.books.find_all()
        return Result.ok(mappers.books_to_read(books))

    def get(self, book_id: int) -> Result[BookRead]:
        book = self.books.find_by_id(book_id)
        if book is None:
            return _not_found("Book", book_id)
        return Result.ok(mappers.book_to_read(book))

    def create(self, dto: BookCreate | None) -> Result[BookRead]:
        if dto is None:
            return Result.invalid(
                [FieldError(field="body", message="Request body is required")]
            )

        # A missing author is the caller's mistake, not a missing resource
        if not self.authors.is_exists(dto.author_id):
            logger.warning(f"Book create rejected: author {dto.author_id} not found")
            return Result.invalid(
                [
                    FieldError(
                        field="authorId",
                        message=f"Author with id {dto.author_id} does not exist",
                    )
                ]
            )

        book = mappers.book_from_create(dto)
        if not self.books.create(book):
            return _persistence_failure("create", "Book")

        logger.info(f"Created book {book.id}")
        return Result.ok(mappers.book_to_read(book))

    def update(self, book_id: int, dto: BookUpdate | None) -> Result[None]:
        errors = check_update(book_id, dto)
        if errors:
            return Result.invalid(errors)

        if not self.books.is_exists(book_id):
            return _not_found("Book", book_id)

        if not self.books.update(mappers.book_from_update(dto)):
            return _persistence_failure("update", "Book", book_id)

        logger.info(f"Updated book {book_id}")
        return Result.ok()

    def delete(self, book_id: int) -> Result[None]:
        errors = check_path_id(book_id)
        if errors:
            return Result.invalid(errors)

        if not self.books.is_exists(book_id):
            return _not_found("Book", book_id)

        book = self.books.find_by_id(book_id)
        if book is None:
            return _not_found("Book", book_id)

        if not self.books.delete(book):
            return _persistence_failure("delete", "Book", book_id)

        logger.info(f"Deleted book {book_id}")
        return Result.ok()


# =============================================================================
# Helpers
# =============================================================================
def _not_found(resource: str, resource_id: int) -> Result:
    logger.info(f"{resource} {resource_id} not found")
    return Result.fail(ErrorKind.NOT_FOUND, f"{resource} with id {resource_id} not found")


def _persistence_failure(action: str, resource: str, resource_id: int | None = None) -> Result:
    target = f"{resource} {resource_id}" if resource_id is not None else resource
    logger.error(f"Store failed to {action} {target}")
    return Result.fail(ErrorKind.PERSISTENCE, f"Could not {action} {resource.lower()}")
