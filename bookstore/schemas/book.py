"""
Book Pydantic Schemas

- BookCreate: body of POST /api/books, must reference an existing author
- BookUpdate: body of PUT /api/books/{id}, carries the id it replaces
- BookRead: what the API returns, with the author nested
"""

from decimal import Decimal

from pydantic import Field, field_validator

from bookstore.schemas.shared import AuthorSummary, CamelModel


class BookBase(CamelModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - Title (required, not blank)
    - ISBN (required)
    - Year and price bounds
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    year: int | None = Field(
        default=None,
        ge=0,
        le=9999,
        description="Year of publication",
        examples=[1949],
    )

    isbn: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="International Standard Book Number",
        examples=["978-0451524935"],
    )

    summary: str | None = Field(
        default=None,
        max_length=500,
        description="Book summary",
        examples=["A dystopian novel set in a totalitarian society."],
    )

    image: str | None = Field(
        default=None,
        max_length=255,
        description="Cover image file identifier",
        examples=["1984-cover.png"],
    )

    price: Decimal | None = Field(
        default=None,
        ge=0,
        le=Decimal("99999999.99"),
        decimal_places=2,
        description="Book price",
        examples=["12.99"],
    )

    @field_validator("title", "isbn")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Reject whitespace-only values and strip the rest."""
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "1984",
        "isbn": "978-0451524935",
        "year": 1949,
        "authorId": 1
    }
    """

    author_id: int = Field(
        ...,
        ge=1,
        description="Existing author who wrote the book",
        examples=[1],
    )


class BookUpdate(BookBase):
    """
    Schema for replacing an existing book.

    Full-record semantics, like AuthorUpdate. The author reference is
    not re-checked on update.
    """

    id: int = Field(
        ...,
        description="Identifier of the book being replaced",
        examples=[1],
    )

    author_id: int | None = Field(
        default=None,
        ge=1,
        description="Author who wrote the book",
    )


class BookRead(BookBase):
    """Schema for book responses."""

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1],
    )

    author_id: int | None = Field(
        default=None,
        description="Author who wrote the book",
    )

    author: AuthorSummary | None = Field(
        default=None,
        description="The referenced author, if it still exists",
    )
