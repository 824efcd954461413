"""
Signup repository for store access.

Owns the "signups" collection and its unique indexes:
- email
- referral code
- confirmation token (while set)
- early-access code
"""

from typing import Optional

from shared.database import JsonDocumentStore
from shared.repository import BaseRepository

from .models import Signup

SIGNUPS = "signups"


class SignupRepository(BaseRepository[Signup]):
    """
    Repository for signup data access.

    Note: This repository does NOT open transactions or enforce business
    rules. The service layer is responsible for both.
    """

    def __init__(self, db: JsonDocumentStore) -> None:
        super().__init__(db)
        self._signups = db.collection(
            SIGNUPS,
            Signup,
            unique=("email", "referral_code", "confirmation_token", "early_access_code"),
        )

    def count(self) -> int:
        return len(self._signups)

    def list_all(self) -> list[Signup]:
        """All signups in creation order."""
        return list(self._signups)

    def get_by_id(self, signup_id: str) -> Optional[Signup]:
        return self._signups.get(signup_id)

    def get_by_email(self, email: str) -> Optional[Signup]:
        return self._signups.find("email", email)

    def get_by_referral_code(self, code: str) -> Optional[Signup]:
        return self._signups.find("referral_code", code)

    def get_by_confirmation_token(self, token: str) -> Optional[Signup]:
        return self._signups.find("confirmation_token", token)

    def get_by_access_code(self, code: str) -> Optional[Signup]:
        return self._signups.find("early_access_code", code)

    def referral_code_taken(self, code: str) -> bool:
        return self.get_by_referral_code(code) is not None

    def access_code_taken(self, code: str) -> bool:
        return self.get_by_access_code(code) is not None

    def token_taken(self, token: str) -> bool:
        return self.get_by_confirmation_token(token) is not None

    def add(self, signup: Signup) -> Signup:
        return self._signups.add(signup)

    def save(self, signup: Signup) -> Signup:
        """Replace the stored version of an existing signup."""
        return self._signups.replace(signup)
