"""
In-memory user store.

Holds the process-wide collection of users. Nothing is persisted; the store
starts from the seed users every time the application is created.
"""

import threading
from typing import Dict, List, Optional

from users_api.core.logging import get_logger
from users_api.models.user import User

logger = get_logger(__name__)

SEED_USERS = (
    User(id=1, name="Alice", age=25),
    User(id=2, name="Bob", age=30),
    User(id=3, name="Charlie", age=35),
)


class UserStore:
    """
    Mapping of user id to User guarded by a single lock.

    Callers validate candidates before handing them to create/update; the
    store only assigns ids and checks existence. Missing ids are reported
    through the return value rather than an exception.
    """

    def __init__(self, users=()):
        self._lock = threading.Lock()
        self._users: Dict[int, User] = {user.id: user for user in users}

    @classmethod
    def seeded(cls) -> "UserStore":
        """Create a store holding the example users"""
        return cls(SEED_USERS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users

    def list(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def get(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def create(self, name: str, age: int) -> User:
        """
        Insert a new user under the next free id.

        The id is one more than the largest id in the store, or 1 when the
        store is empty.
        """
        with self._lock:
            user_id = max(self._users, default=0) + 1
            user = User(id=user_id, name=name, age=age)
            self._users[user_id] = user
        logger.debug("user_created", user_id=user_id)
        return user

    def update(self, user_id: int, name: str, age: int) -> Optional[User]:
        """Replace the user stored under user_id, keeping the id"""
        with self._lock:
            if user_id not in self._users:
                return None
            user = User(id=user_id, name=name, age=age)
            self._users[user_id] = user
        logger.debug("user_updated", user_id=user_id)
        return user

    def delete(self, user_id: int) -> bool:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                return False
        logger.debug("user_deleted", user_id=user_id)
        return True
