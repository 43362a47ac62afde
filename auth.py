import logging
from typing import Optional

from database import UserStore
from errors import Unauthorized
from schemas import User

logger = logging.getLogger(__name__)


class AuthGate:
    """Resolves a presented secret code to a user."""

    def __init__(self, store: UserStore):
        self.store = store

    def authenticate(self, secret_code: Optional[str]) -> User:
        if not secret_code:
            logger.warning("Request without credential rejected")
            raise Unauthorized()
        user = self.store.find_by_credential(secret_code)
        if user is None:
            logger.warning("Request with unknown credential rejected")
            raise Unauthorized()
        return user

    def require_admin(self, secret_code: Optional[str]) -> User:
        user = self.authenticate(secret_code)
        if not user.is_admin:
            logger.warning("User %s denied admin access", user.id)
            raise Unauthorized()
        return user
