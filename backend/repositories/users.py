"""
User repository backed by an in-memory list. Users are read-only.
"""
from typing import Callable, Iterable, List, Optional

from domain.models import User


class UsersRepository:
    """Lookup operations for users."""

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: List[User] = list(users or [])

    def list_users(self) -> List[User]:
        return list(self._users)

    def find_user(self, predicate: Callable[[User], bool]) -> Optional[User]:
        return next((u for u in self._users if predicate(u)), None)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.find_user(lambda u: u.email == email)
