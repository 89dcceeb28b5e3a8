"""
Books Router

CRUD endpoints for books. Open to any caller, authenticated or not.

Creating a book checks that the referenced author exists first; an
unknown authorId is a 400, since the caller sent a bad reference.
"""

from fastapi import APIRouter, status

from bookstore.dependencies import BookServiceDep
from bookstore.routers.errors import unwrap
from bookstore.schemas import BookCreate, BookRead, BookUpdate

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        500: {"description": "Something went wrong"},
    },
)


@router.get(
    "",
    response_model=list[BookRead],
    summary="List all books",
)
def list_books(service: BookServiceDep) -> list[BookRead]:
    """Get every book in the store, each with its author."""
    return unwrap(service.list_all())


@router.get(
    "/{book_id}",
    response_model=BookRead,
    summary="Get a book by ID",
    responses={404: {"description": "Book not found"}},
)
def get_book(book_id: int, service: BookServiceDep) -> BookRead:
    """Get a single book by its id."""
    return unwrap(service.get(book_id))


@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"description": "Invalid book or unknown author"}},
)
def create_book(book_data: BookCreate, service: BookServiceDep) -> BookRead:
    """
    Create a new book record.

    The author referenced by authorId must already exist.
    """
    return unwrap(service.create(book_data))


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a book",
    responses={
        400: {"description": "Invalid id or body, or path and body ids differ"},
        404: {"description": "Book not found"},
    },
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    service: BookServiceDep,
) -> None:
    """
    Replace a book's record.

    Every field is overwritten; the body id must equal the path id.
    """
    unwrap(service.update(book_id, book_data))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses={
        400: {"description": "Invalid id"},
        404: {"description": "Book not found"},
    },
)
def delete_book(book_id: int, service: BookServiceDep) -> None:
    """Delete a book."""
    unwrap(service.delete(book_id))
