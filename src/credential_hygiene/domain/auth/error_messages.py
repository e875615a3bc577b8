"""User-facing wording for raw identity-provider error messages."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

RATE_LIMITED_MESSAGE: Final[str] = (
    "Too many attempts right now. Please wait about a minute and try again."
)
INVALID_CREDENTIALS_MESSAGE: Final[str] = "Invalid email or password"
EMAIL_NOT_CONFIRMED_MESSAGE: Final[str] = "Email not confirmed. Check your inbox."
EXPIRED_LINK_MESSAGE: Final[str] = "This link is invalid or has expired. Request a new one."
EXPIRED_RESET_LINK_MESSAGE: Final[str] = (
    "This reset link is invalid or has expired. Request a new one from the login page."
)
SIGN_IN_FALLBACK_MESSAGE: Final[str] = "Something went wrong. Please try again."
PASSWORD_RESET_FALLBACK_MESSAGE: Final[str] = "Could not update password. Please try again."


class AuthFlow(StrEnum):
    """Screens that surface provider errors."""

    SIGN_IN = "sign_in"
    PASSWORD_RESET = "password_reset"


def friendly_error_message(message: str | None, *, flow: AuthFlow = AuthFlow.SIGN_IN) -> str:
    """Map a raw provider error message to text safe to show the user."""

    lowered = (message or "").lower()

    if _is_rate_limited(lowered):
        return RATE_LIMITED_MESSAGE

    if flow is AuthFlow.SIGN_IN:
        if "invalid email or password" in lowered or "invalid login" in lowered:
            return INVALID_CREDENTIALS_MESSAGE
        if "email not confirmed" in lowered:
            return EMAIL_NOT_CONFIRMED_MESSAGE

    if "expired" in lowered or "invalid" in lowered:
        if flow is AuthFlow.PASSWORD_RESET:
            return EXPIRED_RESET_LINK_MESSAGE
        return EXPIRED_LINK_MESSAGE

    if message:
        return message
    if flow is AuthFlow.PASSWORD_RESET:
        return PASSWORD_RESET_FALLBACK_MESSAGE
    return SIGN_IN_FALLBACK_MESSAGE


def _is_rate_limited(lowered: str) -> bool:
    if "rate" not in lowered:
        return False
    return "limit" in lowered or "too many" in lowered or "requests" in lowered
