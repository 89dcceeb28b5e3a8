"""
Authors Router

CRUD endpoints for authors.

Reading requires the Customer role; creating, replacing and deleting
require the Administrator role. Books carry no role restriction at all;
the two routers differ on purpose.
"""

from fastapi import APIRouter, status

from bookstore.dependencies import AdministratorUser, AuthorServiceDep, CustomerUser
from bookstore.routers.errors import unwrap
from bookstore.schemas import AuthorCreate, AuthorRead, AuthorUpdate

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Missing required role"},
        500: {"description": "Something went wrong"},
    },
)


@router.get(
    "",
    response_model=list[AuthorRead],
    summary="List all authors",
    description="Get every author in the store. Requires the Customer role.",
)
def list_authors(
    service: AuthorServiceDep,
    _: CustomerUser,
) -> list[AuthorRead]:
    """Get every author, with the books they wrote."""
    return unwrap(service.list_all())


@router.get(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Get an author by ID",
    responses={404: {"description": "Author not found"}},
)
def get_author(
    author_id: int,
    service: AuthorServiceDep,
    _: CustomerUser,
) -> AuthorRead:
    """Get a single author, with the books they wrote."""
    return unwrap(service.get(author_id))


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    responses={400: {"description": "Invalid author"}},
)
def create_author(
    author_data: AuthorCreate,
    service: AuthorServiceDep,
    _: AdministratorUser,
) -> AuthorRead:
    """
    Create a new author record.

    Returns the created author including its generated id.
    """
    return unwrap(service.create(author_data))


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace an author",
    responses={
        400: {"description": "Invalid id or body, or path and body ids differ"},
        404: {"description": "Author not found"},
    },
)
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    service: AuthorServiceDep,
    _: AdministratorUser,
) -> None:
    """
    Replace an author's record.

    Every field is overwritten; the body id must equal the path id.
    """
    unwrap(service.update(author_id, author_data))


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    responses={
        400: {"description": "Invalid id"},
        404: {"description": "Author not found"},
    },
)
def delete_author(
    author_id: int,
    service: AuthorServiceDep,
    _: AdministratorUser,
) -> None:
    """Delete an author. Their books stay, without an author."""
    unwrap(service.delete(author_id))
