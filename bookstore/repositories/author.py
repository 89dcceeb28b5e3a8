"""Author repository."""

from sqlalchemy.orm import selectinload

from bookstore.models import Author
from bookstore.repositories.base import Repository


class AuthorRepository(Repository[Author]):
    model = Author
    replace_columns = ("first_name", "last_name", "bio")

    def load_options(self):
        return (selectinload(Author.books),)
