"""
Signup service implementation.

Implements the signup lifecycle on top of the JSON document store:
idempotent upsert with referral credit, single-use email confirmation,
and early-access code redemption.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional

from shared.config import Settings, get_settings
from shared.database import JsonDocumentStore
from shared.models import ensure_utc, format_timestamp, utc_now

from .codes import (
    CodeSpaceExhaustedError,
    generate_access_code,
    generate_confirmation_token,
    generate_referral_code,
    unique_code,
)
from .exceptions import CodeGenerationError
from .interfaces import ISignupService
from .models import (
    CodeRedemption,
    RedemptionFailure,
    RedemptionFailureReason,
    RedemptionSuccess,
    Signup,
    SignupFilter,
    SignupResult,
)
from .repository import SignupRepository

logger = logging.getLogger(__name__)


class SignupService(ISignupService):
    """
    Signup service backed by the document store.

    Every public method holds the store lock for its whole duration;
    mutations run inside a store transaction, so the file is rewritten
    before the method returns.
    """

    def __init__(
        self,
        db: JsonDocumentStore,
        clock: Callable[[], datetime] = utc_now,
        settings: Optional[Settings] = None,
    ):
        self._db = db
        self._repo = SignupRepository(db)
        self._clock = clock
        self._settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def upsert_signup(
        self,
        name: str,
        email: str,
        size: str,
        referred_by_code: Optional[str] = None,
    ) -> SignupResult:
        """Create a signup, or return the existing record for this email."""
        with self._db.lock:
            existing = self._repo.get_by_email(email)
            if existing is not None:
                logger.debug(f"Signup already exists for {email}")
                return SignupResult(existing=True, record=existing)
            record = self._create(name, email, size, referred_by_code)

        logger.info(f"Created signup {record.id} (size {size})")
        return SignupResult(existing=False, record=record)

    def _create(
        self,
        name: str,
        email: str,
        size: str,
        referred_by_code: Optional[str],
    ) -> Signup:
        with self._db.transaction():
            now = self._now()
            record = Signup(
                id=str(uuid.uuid4()),
                name=name,
                email=email,
                size=size,
                referral_code=self._new_code(
                    "referral code", generate_referral_code, self._repo.referral_code_taken
                ),
                referred_by_code=referred_by_code,
                referral_count=0,
                confirmed=False,
                confirmation_token=self._new_code(
                    "confirmation token", generate_confirmation_token, self._repo.token_taken
                ),
                early_access_code=self._new_code(
                    "early-access code",
                    lambda: generate_access_code(self._settings.access_code_prefix),
                    self._repo.access_code_taken,
                ),
                early_access_max_uses=self._settings.early_access_max_uses,
                early_access_uses=0,
                early_access_expires_at=now + timedelta(days=self._settings.early_access_days),
                created_at=now,
                updated_at=now,
            )
            self._repo.add(record)

            if referred_by_code:
                referrer = self._repo.get_by_referral_code(referred_by_code)
                if referrer is not None:
                    self._repo.save(
                        referrer.model_copy(
                            update={
                                "referral_count": referrer.referral_count + 1,
                                "updated_at": now,
                            }
                        )
                    )
                    logger.info(f"Credited referral {referred_by_code} for new signup {record.id}")
        return record

    def confirm_signup(self, token: str) -> Optional[Signup]:
        """Consume a confirmation token; None if unknown or already used."""
        with self._db.lock:
            signup = self._repo.get_by_confirmation_token(token)
            if signup is None:
                return None
            with self._db.transaction():
                confirmed = self._repo.save(
                    signup.model_copy(
                        update={
                            "confirmed": True,
                            "confirmation_token": None,
                            "updated_at": self._now(),
                        }
                    )
                )

        logger.info(f"Confirmed signup {confirmed.id}")
        return confirmed

    def increment_code_usage(self, code: str) -> CodeRedemption:
        """
        Redeem one use of an early-access code.

        Checks run in a fixed order: unknown code, then expiry (a code is
        still valid at exactly its expiry instant), then exhaustion.
        """
        with self._db.lock:
            signup = self._repo.get_by_access_code(code)
            if signup is None:
                return RedemptionFailure(reason=RedemptionFailureReason.NOT_FOUND)

            now = self._now()
            if now > signup.early_access_expires_at:
                return RedemptionFailure(reason=RedemptionFailureReason.EXPIRED)

            if signup.early_access_uses >= signup.early_access_max_uses:
                return RedemptionFailure(reason=RedemptionFailureReason.ALREADY_USED)

            with self._db.transaction():
                redeemed = self._repo.save(
                    signup.model_copy(
                        update={
                            "early_access_uses": signup.early_access_uses + 1,
                            "updated_at": now,
                        }
                    )
                )

        logger.info(f"Redeemed early-access code for signup {redeemed.id}")
        return RedemptionSuccess(signup=redeemed)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_signups(self, filters: Optional[SignupFilter] = None) -> list[Signup]:
        """List signups matching every provided filter, in creation order."""
        filters = filters or SignupFilter()
        with self._db.lock:
            return [s for s in self._repo.list_all() if _matches(s, filters)]

    def get_signup(self, signup_id: str) -> Optional[Signup]:
        with self._db.lock:
            return self._repo.get_by_id(signup_id)

    def get_by_email(self, email: str) -> Optional[Signup]:
        with self._db.lock:
            return self._repo.get_by_email(email)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _now(self) -> datetime:
        """Clock reading at stored precision; model_copy() skips validators."""
        return ensure_utc(self._clock())

    @staticmethod
    def _new_code(
        kind: str,
        generate: Callable[[], str],
        taken: Callable[[str], bool],
    ) -> str:
        try:
            return unique_code(generate, taken)
        except CodeSpaceExhaustedError as e:
            raise CodeGenerationError(kind) from e


def _matches(signup: Signup, filters: SignupFilter) -> bool:
    if filters.size and signup.size != filters.size:
        return False
    if filters.confirmed is not None and signup.confirmed != filters.confirmed:
        return False
    created = format_timestamp(signup.created_at)
    if filters.start and created < filters.start:
        return False
    if filters.end and created > filters.end:
        return False
    return True
