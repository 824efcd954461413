"""
Notifications module.

Sends the confirmation email that follows a new signup.

Public API:
- INotifier: Interface for outbound email
- ConfirmationEmail: Confirmation message contents
- ResendNotifier: Resend-backed implementation
"""

from .interfaces import INotifier
from .models import ConfirmationEmail
from .service import ResendNotifier

__all__ = [
    "INotifier",
    "ConfirmationEmail",
    "ResendNotifier",
]
