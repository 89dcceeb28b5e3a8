"""
Author Model

Represents an author in the book store catalog.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Relationships:
    - books: One-to-Many, the inverse of Book.author

    Deleting an author does not delete its books. The ORM clears
    Book.author_id on the orphaned rows instead.

    Example:
        author = Author(first_name="George", last_name="Orwell")
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    first_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Author's first name"
    )

    last_name: Mapped[str] = mapped_column(
        String(50),
        index=True,
        nullable=False,
        comment="Author's last name"
    )

    bio: Mapped[str | None] = mapped_column(
        String(250),
        nullable=True,
        comment="Short author biography"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the author record was created"
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="When the author record was last updated"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
    )

    def __repr__(self) -> str:
        return (
            f"Author(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')"
        )
