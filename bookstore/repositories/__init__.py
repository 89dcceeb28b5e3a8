"""
Repositories Package

The persistence boundary. Services talk to repositories; repositories
talk to SQLAlchemy.
"""

from bookstore.repositories.author import AuthorRepository
from bookstore.repositories.base import Repository
from bookstore.repositories.book import BookRepository
from bookstore.repositories.user import UserRepository

__all__ = [
    "Repository",
    "AuthorRepository",
    "BookRepository",
    "UserRepository",
]
