"""
Notifications module interface.
"""

from typing import Protocol, runtime_checkable

from .models import ConfirmationEmail


@runtime_checkable
class INotifier(Protocol):
    """
    Interface for outbound email.

    Implementations must never raise: a failed send is logged and reported
    through the return value only.
    """

    async def send_confirmation(self, email: ConfirmationEmail) -> bool:
        """
        Send a signup confirmation email.

        Returns:
            True if the provider accepted the message, False if it was
            skipped or failed
        """
        ...
