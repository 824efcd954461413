"""
Notifications module data models.
"""

from html import escape

from pydantic import BaseModel, Field


class ConfirmationEmail(BaseModel):
    """
    Confirmation email sent after a brand-new signup.

    Carries everything the recipient needs: the confirmation link, the
    early-access code, and the referral link to share.
    """

    to: str = Field(..., description="Recipient email")
    confirm_url: str = Field(..., description="Link that consumes the confirmation token")
    early_access_code: str = Field(..., description="Signup's early-access code")
    referral_link: str = Field(..., description="Shareable referral link")
    subject: str = Field(default="Confirm your SNOOOM waitlist spot")

    model_config = {"frozen": True}

    def render_html(self) -> str:
        return (
            "<h2>Confirm your SNOOOM Hoodie waitlist spot</h2>\n"
            "<p>Tap the link below to confirm:</p>\n"
            f'<p><a href="{escape(self.confirm_url)}">Confirm my spot</a></p>\n'
            f"<p>Your early access code: <strong>{escape(self.early_access_code)}</strong></p>\n"
            f"<p>Share your referral link: <strong>{escape(self.referral_link)}</strong></p>\n"
        )

    def render_text(self) -> str:
        return (
            "Confirm your SNOOOM Hoodie waitlist spot:\n"
            f"{self.confirm_url}\n\n"
            f"Your early access code: {self.early_access_code}\n"
            f"Share your referral link: {self.referral_link}\n"
        )
