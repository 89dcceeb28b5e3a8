"""User repository with lookups used by login and registration."""

from datetime import datetime

from sqlalchemy import select

from bookstore.models import User
from bookstore.repositories.base import Repository


class UserRepository(Repository[User]):
    model = User

    def find_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def email_exists(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def record_login(self, user: User, when: datetime) -> bool:
        user.last_login_at = when
        return self._save()
