"""
Email notifier backed by the Resend HTTP API.

Sending is fire-and-forget: the signup route schedules it as a background
task, failures are logged and never retried.
"""

import logging
from typing import Optional

import httpx

from shared.config import Settings, get_settings

from .interfaces import INotifier
from .models import ConfirmationEmail

logger = logging.getLogger(__name__)


class ResendNotifier(INotifier):
    """Sends email through Resend's /emails endpoint."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the notifier.

        Args:
            settings: Optional settings override (defaults to get_settings())
            transport: Optional httpx transport, used by tests to stub the API
        """
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._settings.resend_api_key and self._settings.email_from)

    async def send_confirmation(self, email: ConfirmationEmail) -> bool:
        """Send a confirmation email; returns False on skip or failure."""
        if not self.configured:
            logger.info("Confirmation email skipped: RESEND_API_KEY or EMAIL_FROM not set")
            return False

        payload = {
            "from": self._settings.email_from,
            "to": email.to,
            "subject": email.subject,
            "html": email.render_html(),
            "text": email.render_text(),
        }
        url = self._settings.resend_api_url.rstrip("/") + "/emails"

        try:
            async with httpx.AsyncClient(
                timeout=self._settings.resend_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url,
                    headers={
                        "Authorization": f"Bearer {self._settings.resend_api_key}",
                        "Content-Type": "application/json",
                    },
                    json=payload,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Confirmation email to {email.to} failed: {e}")
            return False

        if response.status_code >= 300:
            logger.error(
                f"Confirmation email to {email.to} rejected: "
                f"{response.status_code} {response.text}"
            )
            return False

        logger.info(f"Confirmation email sent to {email.to}")
        return True

