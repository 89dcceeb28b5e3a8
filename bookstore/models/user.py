"""
User Model

Represents an account that can log in and carry role claims.

Roles are stored one row per (user, role) in user_roles and copied
into the "roles" claim of every access token issued at login.
"""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base


class Role(str, Enum):
    """
    Roles known to the authorization guard.

    - ADMINISTRATOR: may create, update and delete authors
    - CUSTOMER: may read authors
    """
    ADMINISTRATOR = "Administrator"
    CUSTOMER = "Customer"


class UserRole(Base):
    """Association of a user with one role name."""

    __tablename__ = "user_roles"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    role: Mapped[str] = mapped_column(
        String(50),
        primary_key=True,
        comment="Role name (Administrator, Customer)"
    )

    user: Mapped["User"] = relationship("User", back_populates="roles")

    def __repr__(self) -> str:
        return f"UserRole(user_id={self.user_id}, role='{self.role}')"


class User(Base):
    """
    User model representing registered accounts.

    Table: users

    Example:
        user = User(
            email="john@example.com",
            hashed_password=hash_password("secret1"),
            roles=[UserRole(role=Role.CUSTOMER.value)],
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address (used for login)"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the user registered"
    )

    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="When the user last logged in"
    )

    roles: Mapped[list[UserRole]] = relationship(
        UserRole,
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def role_names(self) -> list[str]:
        """Role names sorted for stable token claims."""
        return sorted(r.role for r in self.roles)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}')"
