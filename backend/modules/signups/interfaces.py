"""
Signups module interface.

The HTTP layer depends on ISignupService, not the concrete implementation.
This enables route tests with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CodeRedemption, Signup, SignupFilter, SignupResult


@runtime_checkable
class ISignupService(Protocol):
    """
    Interface for signup lifecycle operations.

    Inputs are expected to be validated and normalized by the caller.
    """

    def upsert_signup(
        self,
        name: str,
        email: str,
        size: str,
        referred_by_code: Optional[str] = None,
    ) -> SignupResult:
        """
        Create a signup, or return the existing one for this email.

        Args:
            name: Display name
            email: Lowercased, trimmed email
            size: Garment size from the allowed set
            referred_by_code: Referral code of the referring signup, if any

        Returns:
            SignupResult with existing=True and the untouched record when
            the email is already registered, otherwise existing=False and
            the newly created record
        """
        ...

    def confirm_signup(self, token: str) -> Optional[Signup]:
        """
        Consume a confirmation token.

        Returns:
            The confirmed signup, or None if the token is unknown or was
            already used
        """
        ...

    def increment_code_usage(self, code: str) -> CodeRedemption:
        """
        Redeem one use of an early-access code.

        Returns:
            RedemptionSuccess with the owning signup, or RedemptionFailure
            with the reason (not found, expired, already used)
        """
        ...

    def list_signups(self, filters: Optional[SignupFilter] = None) -> list[Signup]:
        """
        List signups matching every provided filter, in creation order.
        """
        ...

    def get_signup(self, signup_id: str) -> Optional[Signup]:
        """Get a signup by id."""
        ...

    def get_by_email(self, email: str) -> Optional[Signup]:
        """Get a signup by normalized email."""
        ...
