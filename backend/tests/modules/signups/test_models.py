"""Tests for signup request models."""

import pytest
from pydantic import ValidationError

from modules.signups.models import (
    CodeValidationRequest,
    RedemptionFailure,
    RedemptionFailureReason,
    SignupRequest,
)


class TestSignupRequest:
    def test_normalizes_fields(self):
        """Email should be trimmed and lowercased, size uppercased."""
        request = SignupRequest(
            name="  Ann  ",
            email="  Ann@Example.COM ",
            size=" m ",
        )
        assert request.name == "Ann"
        assert request.email == "ann@example.com"
        assert request.size == "M"
        assert request.referral_code is None

    def test_accepts_camel_case_referral(self):
        request = SignupRequest.model_validate({
            "name": "Bo",
            "email": "bo@example.com",
            "size": "L",
            "referralCode": "REF-ABC123",
        })
        assert request.referral_code == "REF-ABC123"

    def test_blank_referral_is_none(self):
        request = SignupRequest(name="Bo", email="bo@example.com", size="L", referral_code="   ")
        assert request.referral_code is None

    def test_rejects_unknown_size(self):
        with pytest.raises(ValidationError):
            SignupRequest(name="Ann", email="ann@example.com", size="XXXL")

    def test_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            SignupRequest(name="   ", email="ann@example.com", size="M")

    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError):
            SignupRequest(name="Ann", email="not-an-email", size="M")

    def test_size_list_comes_from_settings(self, monkeypatch):
        """Allowed sizes should follow configuration."""
        monkeypatch.setenv("ALLOWED_SIZES", '["ONE"]')
        request = SignupRequest(name="Ann", email="ann@example.com", size="one")
        assert request.size == "ONE"
        with pytest.raises(ValidationError):
            SignupRequest(name="Ann", email="ann@example.com", size="M")


class TestCodeValidationRequest:
    def test_normalizes_code(self):
        assert CodeValidationRequest(code=" snooom-abc123 ").code == "SNOOOM-ABC123"

    def test_rejects_empty_code(self):
        with pytest.raises(ValidationError):
            CodeValidationRequest(code="  ")


class TestRedemptionFailureReason:
    def test_reason_messages(self):
        """Reasons should carry the user-facing messages."""
        assert RedemptionFailureReason.NOT_FOUND.value == "Code not found"
        assert RedemptionFailureReason.EXPIRED.value == "Code expired"
        assert RedemptionFailureReason.ALREADY_USED.value == "Code already used"

    def test_failure_is_tagged(self):
        failure = RedemptionFailure(reason=RedemptionFailureReason.EXPIRED)
        assert failure.success is False
