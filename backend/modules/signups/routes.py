"""
Signup API endpoints.

Public endpoints for joining the waitlist, confirming an email address and
redeeming an early-access code.
"""

import logging
from html import escape
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Response
from fastapi.responses import HTMLResponse

from api.dependencies import get_notifier, get_signup_service
from modules.notifications.interfaces import INotifier
from modules.notifications.models import ConfirmationEmail
from shared.config import Settings, get_settings

from .interfaces import ISignupService
from .models import (
    CodeValidationRequest,
    CodeValidationResponse,
    RedeemedSignup,
    RedemptionFailure,
    Signup,
    SignupRequest,
    SignupResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def referral_link(settings: Settings, signup: Signup) -> str:
    return f"{settings.app_base_url.rstrip('/')}/?ref={signup.referral_code}"


def confirm_link(settings: Settings, token: str) -> str:
    return f"{settings.app_base_url.rstrip('/')}/api/signups/confirm?token={token}"


async def send_confirmation(notifier: INotifier, email: ConfirmationEmail) -> None:
    """Background task; the signup response never waits on this."""
    sent = await notifier.send_confirmation(email)
    if not sent:
        logger.warning(f"Confirmation email for {email.to} was not sent")


@router.post("/signups", response_model=SignupResponse, status_code=201)
async def create_signup(
    request: SignupRequest,
    response: Response,
    background_tasks: BackgroundTasks,
    ref: Optional[str] = Query(default=None, description="Referral code from a shared link"),
    service: ISignupService = Depends(get_signup_service),
    notifier: INotifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> SignupResponse:
    """
    Join the waitlist.

    Resubmitting an email already on the list returns 200 with the
    existing signup's codes and sends nothing. A new signup returns 201
    and schedules the confirmation email.
    """
    referred_by = request.referral_code or (ref.strip() if ref and ref.strip() else None)
    result = service.upsert_signup(
        name=request.name,
        email=request.email,
        size=request.size,
        referred_by_code=referred_by,
    )
    record = result.record
    link = referral_link(settings, record)

    if result.existing:
        response.status_code = 200
        return SignupResponse(
            status="confirmed" if record.confirmed else "pending",
            message=(
                "You are already confirmed."
                if record.confirmed
                else "Check your inbox to confirm your spot."
            ),
            early_access_code=record.early_access_code,
            referral_link=link,
        )

    background_tasks.add_task(
        send_confirmation,
        notifier,
        ConfirmationEmail(
            to=record.email,
            confirm_url=confirm_link(settings, record.confirmation_token or ""),
            early_access_code=record.early_access_code,
            referral_link=link,
        ),
    )
    return SignupResponse(
        status="pending",
        message="Check your email to confirm your spot.",
        early_access_code=record.early_access_code,
        referral_link=link,
    )


@router.get("/signups/confirm", response_class=HTMLResponse)
async def confirm_signup(
    token: Optional[str] = Query(default=None),
    service: ISignupService = Depends(get_signup_service),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """
    Consume a confirmation token from an email link.

    Returns an HTML page: 400 without a token, 404 if the token is unknown
    or was already used.
    """
    if not token:
        return HTMLResponse("<h2>Missing confirmation token.</h2>", status_code=400)

    signup = service.confirm_signup(token)
    if signup is None:
        return HTMLResponse(
            "<h2>Confirmation link is invalid or already used.</h2>",
            status_code=404,
        )

    home = escape(settings.app_base_url)
    return HTMLResponse(
        "<style>\n"
        "  body { font-family: Arial, sans-serif; background:#050c1c; color:#f7f9ff;"
        " text-align:center; padding:60px; }\n"
        "  a { color:#d8b46d; }\n"
        "</style>\n"
        "<h1>Confirmed.</h1>\n"
        "<p>You are officially on the list. Your code "
        f"<strong>{escape(signup.early_access_code)}</strong> will unlock early access "
        "once the drop opens.</p>\n"
        f'<p><a href="{home}">Return to SNOOOM</a></p>\n'
    )


@router.post("/codes/validate", response_model=CodeValidationResponse)
async def validate_code(
    request: CodeValidationRequest,
    service: ISignupService = Depends(get_signup_service),
) -> CodeValidationResponse:
    """
    Redeem one use of an early-access code.

    Rejections return 400 with the reason as detail.
    """
    result = service.increment_code_usage(request.code)
    if isinstance(result, RedemptionFailure):
        raise HTTPException(status_code=400, detail=result.reason.value)
    return CodeValidationResponse(
        signup=RedeemedSignup(email=result.signup.email, name=result.signup.name),
    )
