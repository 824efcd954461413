"""
Signups module data models.

These models define the waitlist signup record, the tagged results returned
by signup operations, and the HTTP request/response payloads.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import EmailStr, Field, field_validator

from shared.config import get_settings
from shared.models import CamelModel, StoreRecord, Timestamp


class Signup(StoreRecord):
    """
    A waitlist registration, one per normalized email.

    referral_count only grows; early_access_uses never exceeds
    early_access_max_uses; a cleared confirmation_token stays cleared.
    """

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Normalized (lowercase, trimmed) email")
    size: str = Field(..., description="Garment size")

    referral_code: str = Field(..., description="This signup's own referral code")
    referred_by_code: Optional[str] = Field(
        None,
        description="Referral code captured at creation, never changed",
    )
    referral_count: int = Field(default=0, ge=0, description="Signups citing this code")

    confirmed: bool = Field(default=False, description="Email ownership confirmed")
    confirmation_token: Optional[str] = Field(
        None,
        description="Single-use confirmation token; null once consumed",
    )

    early_access_code: str = Field(..., description="Early-access redemption code")
    early_access_max_uses: int = Field(default=1, ge=0)
    early_access_uses: int = Field(default=0, ge=0)
    early_access_expires_at: Timestamp = Field(..., description="Code expiry")

    created_at: Timestamp
    updated_at: Timestamp


class SignupResult(CamelModel):
    """Outcome of an upsert: the stored record and whether it already existed."""

    existing: bool
    record: Signup


class RedemptionFailureReason(str, Enum):
    """Why an early-access code was rejected. Values are shown to users."""

    NOT_FOUND = "Code not found"
    EXPIRED = "Code expired"
    ALREADY_USED = "Code already used"


class RedemptionSuccess(CamelModel):
    """The code was valid and one use has been recorded."""

    success: Literal[True] = True
    signup: Signup


class RedemptionFailure(CamelModel):
    """The code was rejected; nothing was changed."""

    success: Literal[False] = False
    reason: RedemptionFailureReason


CodeRedemption = Union[RedemptionSuccess, RedemptionFailure]


class SignupFilter(CamelModel):
    """
    Filters for listing signups. All provided filters must match.

    start/end are ISO-8601 strings compared against the stored createdAt.
    """

    size: Optional[str] = None
    confirmed: Optional[bool] = None
    start: Optional[str] = None
    end: Optional[str] = None


# -----------------------------------------------------------------------------
# HTTP payloads
# -----------------------------------------------------------------------------


class SignupRequest(CamelModel):
    """Public signup form submission."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    size: str = Field(..., description="One of the configured garment sizes")
    referral_code: Optional[str] = Field(
        None,
        description="Referral code of the signup that referred this one",
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("size", mode="before")
    @classmethod
    def normalize_size(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("size")
    @classmethod
    def check_size(cls, value: str) -> str:
        allowed = get_settings().allowed_sizes
        if value not in allowed:
            raise ValueError(f"size must be one of {', '.join(allowed)}")
        return value

    @field_validator("referral_code", mode="before")
    @classmethod
    def blank_referral_is_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class SignupResponse(CamelModel):
    """Result of a signup submission."""

    status: Literal["pending", "confirmed"]
    message: str
    early_access_code: str
    referral_link: str


class CodeValidationRequest(CamelModel):
    """Early-access code redemption request."""

    code: str = Field(..., min_length=1)

    @field_validator("code", mode="before")
    @classmethod
    def normalize_code(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class RedeemedSignup(CamelModel):
    """Public projection of the signup that owns a redeemed code."""

    email: str
    name: str


class CodeValidationResponse(CamelModel):
    """Successful code redemption."""

    success: bool = True
    signup: RedeemedSignup
