"""
Signups module exceptions.

Unknown tokens and codes are reported through return values, not these.
"""

from shared.exceptions import WaitlistError


class SignupError(WaitlistError):
    """Base exception for signup-related errors."""

    pass


class CodeGenerationError(SignupError):
    """Raised when no unused code could be generated."""

    def __init__(self, kind: str):
        super().__init__(
            f"Could not generate a unique {kind}",
            code="CODE_GENERATION_FAILED",
            details={"kind": kind},
        )
