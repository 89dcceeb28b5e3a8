"""
API Routers Package

Router Structure:
- authors.py: /api/authors/* endpoints (role gated)
- books.py: /api/books/* endpoints (open)
- users.py: /api/users/register and /api/users/login
- errors.py: Result → HTTPException translation shared by the above

Each router is imported and registered in main.py.
"""

from bookstore.routers.authors import router as authors_router
from bookstore.routers.books import router as books_router
from bookstore.routers.users import router as users_router

__all__ = [
    "authors_router",
    "books_router",
    "users_router",
]
