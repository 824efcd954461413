"""
Admin authentication.

Admin routes are guarded by a shared secret, sent either as the
X-Admin-Token header or as a ?token= query parameter.
"""

import secrets
from typing import Optional

from fastapi import Depends, Header, Query

from shared.config import Settings, get_settings
from shared.exceptions import AuthenticationError


def _matches(candidate: Optional[str], expected: str) -> bool:
    if not candidate or not expected:
        return False
    return secrets.compare_digest(candidate.encode(), expected.encode())


async def require_admin(
    x_admin_token: Optional[str] = Header(default=None),
    token: Optional[str] = Query(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    FastAPI dependency that rejects requests without the admin token.

    Raises:
        AuthenticationError: If neither the header nor the query parameter
            carries the configured token
    """
    if _matches(x_admin_token, settings.admin_token) or _matches(token, settings.admin_token):
        return
    raise AuthenticationError("Unauthorized", code="UNAUTHORIZED")
