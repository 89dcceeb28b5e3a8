"""
Author Pydantic Schemas

- AuthorCreate: body of POST /api/authors
- AuthorUpdate: body of PUT /api/authors/{id}, carries the id it replaces
- AuthorRead: what the API returns
"""

from pydantic import Field, field_validator

from bookstore.schemas.shared import BookSummary, CamelModel


class AuthorBase(CamelModel):
    """
    Shared author fields and their constraints.

    Names are required, 1 to 50 characters, and may not be whitespace.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Author's first name",
        examples=["George"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Author's last name",
        examples=["Orwell"],
    )

    bio: str | None = Field(
        default=None,
        max_length=250,
        description="Short author biography",
        examples=["English novelist and essayist."],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        """Reject whitespace-only names and strip the rest."""
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """Schema for creating a new author."""
    pass


class AuthorUpdate(AuthorBase):
    """
    Schema for replacing an existing author.

    Full-record semantics: every field is written, so an omitted bio
    clears the stored one. The id must equal the id in the URL.
    """

    id: int = Field(
        ...,
        description="Identifier of the author being replaced",
        examples=[1],
    )


class AuthorRead(AuthorBase):
    """Schema for author responses."""

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    books: list[BookSummary] = Field(
        default_factory=list,
        description="Books written by this author",
    )
