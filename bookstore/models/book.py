"""
Book Model

The central record of the catalog. Each book references at most one
author through a nullable foreign key.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.author import Author


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - title: Book title (required)
    - year: Publication year
    - isbn: International Standard Book Number (required, not unique)
    - summary: Short description
    - image: File identifier of the cover image
    - price: Book price with 2 decimal precision
    - author_id: Foreign key to authors.id

    The author must exist when the book is created. Nothing keeps the
    reference valid afterwards.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(50),
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Year of publication"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    summary: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Book summary"
    )

    image: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Cover image file identifier"
    )

    # Numeric(10, 2) keeps money exact
    price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Book price"
    )

    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("authors.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
        comment="Author who wrote the book"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    author: Mapped["Author | None"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
