"""
Shared Schema Pieces

Common model configuration and the compact nested shapes used inside
read DTOs (an author's books, a book's author).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every DTO exposed by the API.

    Fields are declared in snake_case and travel as camelCase JSON
    (first_name <-> "firstName"). populate_by_name keeps snake_case
    input working as well.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AuthorSummary(CamelModel):
    """Author as nested inside a book."""

    id: int
    first_name: str
    last_name: str


class BookSummary(CamelModel):
    """Book as nested inside an author."""

    id: int
    title: str
    year: int | None = None
    isbn: str
