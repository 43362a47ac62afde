"""
In-memory user store.

The store owns every user record and every complaint list. All access goes
through one re-entrant lock, and callers only ever get copies back, so the
records themselves never leave the lock.
"""

import logging
import threading
from typing import Dict, List, Optional

from errors import AdminAlreadyExists, DuplicateCredential, NotFound
from schemas import Complaint, User, ROLE_ADMIN, ROLE_USER

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self):
        self._lock = threading.RLock()
        # secret_code -> user, insertion ordered
        self._users: Dict[str, User] = {}
        self._next_id = 1

    def register(self, user: User) -> User:
        """Insert a new user and return the stored record.

        The admin check and the insert run under the same lock acquisition,
        so two concurrent admin registrations cannot both succeed.
        """
        with self._lock:
            if user.secret_code in self._users:
                raise DuplicateCredential()
            if user.role == ROLE_ADMIN and self._admin_exists():
                raise AdminAlreadyExists()
            record = user.model_copy(deep=True, update={"id": str(self._next_id)})
            self._next_id += 1
            self._users[record.secret_code] = record
            logger.info("Registered user %s with role %s", record.id, record.role)
            return record.model_copy(deep=True)

    def find_by_credential(self, secret_code: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(secret_code)
            return user.model_copy(deep=True) if user else None

    def append_complaint(self, secret_code: str, complaint: Complaint) -> Complaint:
        with self._lock:
            user = self._users.get(secret_code)
            if user is None:
                raise NotFound("User not found")
            stored = complaint.model_copy(deep=True)
            user.complaints.append(stored)
            return stored.model_copy()

    def all_users(self) -> List[User]:
        with self._lock:
            return [u.model_copy(deep=True) for u in self._users.values()]

    def mark_resolved(self, complaint_id: str) -> Complaint:
        """Resolve the first complaint with this id, searching every user."""
        with self._lock:
            for user in self._users.values():
                for complaint in user.complaints:
                    if complaint.id == complaint_id:
                        complaint.resolved = True
                        return complaint.model_copy()
        raise NotFound("Complaint not found")

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def seed(self) -> None:
        """Bootstrap users for local runs and tests."""
        self.register(User(secret_code="secret1", name="John Doe",
                           email="john@example.com", role=ROLE_USER))
        self.register(User(secret_code="secret2", name="Jane Smith",
                           email="jane@example.com", role=ROLE_ADMIN))

    def _admin_exists(self) -> bool:
        return any(u.role == ROLE_ADMIN for u in self._users.values())
