"""Book repository."""

from sqlalchemy.orm import selectinload

from bookstore.models import Book
from bookstore.repositories.base import Repository


class BookRepository(Repository[Book]):
    model = Book
    replace_columns = (
        "title",
        "year",
        "isbn",
        "summary",
        "image",
        "price",
        "author_id",
    )

    def load_options(self):
        return (selectinload(Book.author),)
