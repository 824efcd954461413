"""Tests for signup code generation."""

import re

import pytest

from modules.signups.codes import (
    MAX_ATTEMPTS,
    CodeSpaceExhaustedError,
    generate_access_code,
    generate_confirmation_token,
    generate_referral_code,
    unique_code,
)


class TestGenerators:
    def test_referral_code_format(self):
        """Referral codes should be REF- plus six uppercase hex characters."""
        assert re.fullmatch(r"REF-[0-9A-F]{6}", generate_referral_code())

    def test_access_code_default_prefix(self):
        assert re.fullmatch(r"SNOOOM-[0-9A-F]{6}", generate_access_code())

    def test_access_code_custom_prefix(self):
        assert generate_access_code("VIP").startswith("VIP-")

    def test_confirmation_token_format(self):
        """Tokens should be 48 lowercase hex characters."""
        assert re.fullmatch(r"[0-9a-f]{48}", generate_confirmation_token())

    def test_tokens_differ(self):
        tokens = {generate_confirmation_token() for _ in range(50)}
        assert len(tokens) == 50


class TestUniqueCode:
    def test_returns_first_free_code(self):
        draws = iter(["A", "B", "C"])
        taken = {"A", "B"}
        assert unique_code(lambda: next(draws), taken.__contains__) == "C"

    def test_gives_up_after_max_attempts(self):
        """Should raise once every draw collides."""
        calls = []

        def generate():
            calls.append(1)
            return "SAME"

        with pytest.raises(CodeSpaceExhaustedError):
            unique_code(generate, lambda code: True)
        assert len(calls) == MAX_ATTEMPTS
