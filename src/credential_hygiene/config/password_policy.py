"""Build the password policy described by runtime settings."""

from __future__ import annotations

from credential_hygiene.config.settings import Settings
from credential_hygiene.domain.password_policy import PasswordPolicy, parse_banned_substrings


def build_password_policy(settings: Settings) -> PasswordPolicy:
    """Return the immutable policy configured through PASSWORD_* variables."""

    return PasswordPolicy(
        min_length=settings.password_min_length,
        require_lower=settings.password_require_lower,
        require_upper=settings.password_require_upper,
        require_digit=settings.password_require_digit,
        require_symbol=settings.password_require_symbol,
        banned_substrings=parse_banned_substrings(settings.password_banned_substrings),
        max_repeat=settings.password_max_repeat,
    )
