"""
SQLAlchemy Models Package

Model Relationships:
- Author -> Book: One-to-Many (Book.author_id is a plain foreign key,
                  an author may have zero or more books)
- User <-> Role: each user holds zero or more role names in user_roles

Import all models here so Alembic sees them in Base.metadata.
"""

from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.models.user import Role, User, UserRole

__all__ = [
    "Author",
    "Book",
    "Role",
    "User",
    "UserRole",
]
