"""
Code generation for signups.

Referral codes, early-access codes and confirmation tokens are all drawn
from the secrets module. Codes are short enough to share by hand, so
collisions are possible; unique_code() retries against a caller-supplied
existence check.
"""

import secrets
from typing import Callable

REFERRAL_PREFIX = "REF"
DEFAULT_ACCESS_PREFIX = "SNOOOM"

# 3 random bytes -> 6 hex characters
CODE_BYTES = 3
# 24 random bytes -> 48 hex characters
TOKEN_BYTES = 24

MAX_ATTEMPTS = 32


class CodeSpaceExhaustedError(RuntimeError):
    """No free code was found within MAX_ATTEMPTS draws."""


def _short_code(prefix: str) -> str:
    return f"{prefix}-{secrets.token_hex(CODE_BYTES).upper()}"


def generate_referral_code() -> str:
    """Referral code, e.g. REF-1A2B3C."""
    return _short_code(REFERRAL_PREFIX)


def generate_access_code(prefix: str = DEFAULT_ACCESS_PREFIX) -> str:
    """Early-access code, e.g. SNOOOM-9F00AB."""
    return _short_code(prefix)


def generate_confirmation_token() -> str:
    """Single-use email confirmation token (48 lowercase hex characters)."""
    return secrets.token_hex(TOKEN_BYTES)


def unique_code(generate: Callable[[], str], exists: Callable[[str], bool]) -> str:
    """
    Draw codes from generate() until one is not taken.

    Args:
        generate: Zero-argument code factory
        exists: Returns True if a code is already in use

    Returns:
        A code for which exists() is False

    Raises:
        CodeSpaceExhaustedError: If MAX_ATTEMPTS draws all collide
    """
    for _ in range(MAX_ATTEMPTS):
        code = generate()
        if not exists(code):
            return code
    raise CodeSpaceExhaustedError(
        f"Could not find a free code after {MAX_ATTEMPTS} attempts"
    )
