from __future__ import annotations

import logging
from typing import List, Optional

from user_manager.models import AuthOutcome, DeleteOutcome, RegisterOutcome, User

logger = logging.getLogger("user_manager")


class InMemoryUserStore:
    """Ordered in-memory user store backing the console menu.

    Storage semantics:
    - Records live only in process memory (empty at every start).
    - Usernames are unique, compared exactly (case-sensitive, no stripping).
    - Insertion order is kept; it only matters for ``list_usernames``.

    Every lookup is a linear scan that stops at the first match. The intended
    scale is a handful of records, so no index is kept.

    Passwords are stored and compared as plain text. This is NOT suitable for
    real authentication.
    """

    def __init__(self):
        self._users: List[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def _index_of(self, username: str) -> Optional[int]:
        for idx, user in enumerate(self._users):
            if user.username == username:
                return idx
        return None

    def exists(self, *, username: str) -> bool:
        return self._index_of(username) is not None

    def register(self, *, username: str, password: str) -> RegisterOutcome:
        if self.exists(username=username):
            logger.info("Registration refused, username taken: %r", username)
            return RegisterOutcome.already_exists
        self._users.append(User(username=username, password=password))
        logger.info("Registered user %r (%d total)", username, len(self._users))
        return RegisterOutcome.registered

    def authenticate(self, *, username: str, password: str) -> AuthOutcome:
        # Unknown user and wrong password are reported the same way.
        for user in self._users:
            if user.username == username and user.password == password:
                logger.debug("Login accepted for %r", username)
                return AuthOutcome.authenticated
        logger.info("Login rejected for %r", username)
        return AuthOutcome.rejected

    def list_usernames(self) -> List[str]:
        return [u.username for u in self._users]

    def find(self, *, username: str) -> Optional[User]:
        idx = self._index_of(username)
        return None if idx is None else self._users[idx]

    def delete(self, *, username: str) -> DeleteOutcome:
        idx = self._index_of(username)
        if idx is None:
            return DeleteOutcome.not_found
        del self._users[idx]
        logger.info("Deleted user %r (%d left)", username, len(self._users))
        return DeleteOutcome.deleted
