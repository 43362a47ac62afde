"""
Complaint operations: login, registration, submission, listings, resolution.

Ownership rules:
    * a user only ever sees complaints from their own list, even by id
    * the admin sees every complaint and may resolve any of them
"""

import logging
from typing import List, Optional

from auth import AuthGate
from database import UserStore
from errors import NotFound
from schemas import Complaint, ComplaintEntry, User

logger = logging.getLogger(__name__)


class ComplaintService:
    def __init__(self, store: UserStore, gate: Optional[AuthGate] = None):
        self.store = store
        self.gate = gate or AuthGate(store)

    def login(self, secret_code: str) -> User:
        user = self.store.find_by_credential(secret_code)
        if user is None:
            raise NotFound("User not found")
        return user

    def register_user(self, candidate: User) -> User:
        # Complaint history cannot be injected at registration
        return self.store.register(candidate.model_copy(update={"complaints": []}))

    def submit_complaint(self, secret_code: Optional[str], complaint: Complaint) -> Complaint:
        user = self.gate.authenticate(secret_code)
        stored = self.store.append_complaint(
            user.secret_code, complaint.model_copy(update={"resolved": False})
        )
        logger.info("User %s submitted complaint %s", user.id, stored.id)
        return stored

    def list_own_complaints(self, secret_code: Optional[str]) -> List[Complaint]:
        return self.gate.authenticate(secret_code).complaints

    def list_all_complaints(self, secret_code: Optional[str]) -> List[ComplaintEntry]:
        self.gate.require_admin(secret_code)
        return [
            ComplaintEntry(user_id=user.id, user_name=user.name, complaint=complaint)
            for user in self.store.all_users()
            for complaint in user.complaints
        ]

    def view_complaint(self, secret_code: Optional[str], complaint_id: str) -> Complaint:
        user = self.gate.authenticate(secret_code)
        for complaint in user.complaints:
            if complaint.id == complaint_id:
                return complaint
        raise NotFound("Complaint not found")

    def resolve_complaint(self, secret_code: Optional[str], complaint_id: str) -> Complaint:
        admin = self.gate.require_admin(secret_code)
        complaint = self.store.mark_resolved(complaint_id)
        logger.info("Admin %s resolved complaint %s", admin.id, complaint.id)
        return complaint
