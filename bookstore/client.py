"""
UI Client Endpoints

The table of URLs a separate UI process uses to reach this API.
Only the addresses live here; the UI itself is a different program.

Usage:
    from bookstore.client import get_endpoints

    endpoints = get_endpoints()
    endpoints.authors       # "https://localhost:44380/api/Authors"
    endpoints.book(5)       # "https://localhost:44380/api/Books/5"
"""

from dataclasses import dataclass

from bookstore.config import get_settings


@dataclass(frozen=True)
class Endpoints:
    """
    Absolute endpoint URLs derived from one base URL.

    base_url is normalized to end with a single "/". The mixed-case
    paths and trailing slashes are what the UI sends; the server
    normalizes them in middleware.NormalizeApiPathMiddleware.
    """

    base_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/") + "/")

    @property
    def authors(self) -> str:
        return f"{self.base_url}api/Authors"

    @property
    def books(self) -> str:
        return f"{self.base_url}api/Books"

    @property
    def register(self) -> str:
        return f"{self.base_url}api/users/register/"

    @property
    def login(self) -> str:
        return f"{self.base_url}api/users/login/"

    def author(self, author_id: int) -> str:
        return f"{self.authors}/{author_id}"

    def book(self, book_id: int) -> str:
        return f"{self.books}/{book_id}"


def get_endpoints() -> Endpoints:
    """Endpoints for the configured client_base_url."""
    return Endpoints(get_settings().client_base_url)
