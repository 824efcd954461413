"""
Signups module.

Handles waitlist registration, referral credit, email confirmation and
early-access code redemption.

Public API:
- ISignupService: Interface for signup operations
- SignupService: Store-backed implementation
- Signup: Stored signup record
- SignupResult, CodeRedemption: Tagged operation results
"""

from .interfaces import ISignupService
from .models import (
    Signup,
    SignupResult,
    SignupFilter,
    CodeRedemption,
    RedemptionSuccess,
    RedemptionFailure,
    RedemptionFailureReason,
)
from .exceptions import (
    SignupError,
    CodeGenerationError,
)
from .codes import (
    generate_referral_code,
    generate_access_code,
    generate_confirmation_token,
    unique_code,
)
from .export import signups_to_csv
from .repository import SignupRepository, SIGNUPS
from .service import SignupService

__all__ = [
    # Interfaces
    "ISignupService",
    # Models
    "Signup",
    "SignupResult",
    "SignupFilter",
    "CodeRedemption",
    "RedemptionSuccess",
    "RedemptionFailure",
    "RedemptionFailureReason",
    # Exceptions
    "SignupError",
    "CodeGenerationError",
    # Codes
    "generate_referral_code",
    "generate_access_code",
    "generate_confirmation_token",
    "unique_code",
    # Export
    "signups_to_csv",
    # Storage
    "SignupRepository",
    "SIGNUPS",
    # Service
    "SignupService",
]
