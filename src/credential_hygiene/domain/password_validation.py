"""Collect-all password policy validation with context placeholders."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from credential_hygiene.domain.auth.credentials import email_local_part
from credential_hygiene.domain.password_characters import (
    detect_categories,
    has_excessive_repeat,
)
from credential_hygiene.domain.password_policy import (
    BannedSubstring,
    LiteralSubstring,
    PasswordPolicy,
    PlaceholderKind,
    PolicyContext,
)


class RuleKind(StrEnum):
    """Policy rules a password can violate."""

    MIN_LENGTH = "min_length"
    REQUIRE_LOWER = "require_lower"
    REQUIRE_UPPER = "require_upper"
    REQUIRE_DIGIT = "require_digit"
    REQUIRE_SYMBOL = "require_symbol"
    MAX_REPEAT = "max_repeat"
    BANNED_SUBSTRING = "banned_substring"


@dataclass(frozen=True)
class PolicyViolation:
    """One violated rule with its user-facing message."""

    rule: RuleKind
    message: str


def expand_dynamic_substrings(
    banned_substrings: Sequence[BannedSubstring],
    context: PolicyContext | None = None,
) -> list[str]:
    """Resolve placeholders against context and drop unresolved or blank entries."""

    resolved_context = context or PolicyContext()
    expanded: list[str] = []
    for entry in banned_substrings:
        if isinstance(entry, LiteralSubstring):
            value: str | None = entry.value
        else:
            value = _resolve_placeholder(entry.kind, resolved_context)
        if value is None or not value.strip():
            continue
        expanded.append(value)
    return expanded


def validate_password(
    policy: PasswordPolicy,
    password: str,
    context: PolicyContext | None = None,
) -> list[PolicyViolation]:
    """Return every violated rule in fixed order; an empty list means valid."""

    violations: list[PolicyViolation] = []

    if len(password) < policy.min_length:
        violations.append(
            PolicyViolation(
                rule=RuleKind.MIN_LENGTH,
                message=f"Password must be at least {policy.min_length} characters",
            )
        )

    categories = detect_categories(password)
    if policy.require_lower and not categories.has_lower:
        violations.append(
            PolicyViolation(rule=RuleKind.REQUIRE_LOWER, message="Add a lowercase letter")
        )
    if policy.require_upper and not categories.has_upper:
        violations.append(
            PolicyViolation(rule=RuleKind.REQUIRE_UPPER, message="Add an uppercase letter")
        )
    if policy.require_digit and not categories.has_digit:
        violations.append(PolicyViolation(rule=RuleKind.REQUIRE_DIGIT, message="Include a number"))
    if policy.require_symbol and not categories.has_symbol:
        violations.append(PolicyViolation(rule=RuleKind.REQUIRE_SYMBOL, message="Add a symbol"))

    if has_excessive_repeat(password, max_repeat=policy.max_repeat):
        violations.append(
            PolicyViolation(
                rule=RuleKind.MAX_REPEAT,
                message=(
                    "Avoid repeating the same character more than "
                    f"{policy.max_repeat} times in a row"
                ),
            )
        )

    banned = expand_dynamic_substrings(policy.banned_substrings, context)
    lowered_password = password.lower()
    if any(fragment.lower() in lowered_password for fragment in banned):
        violations.append(
            PolicyViolation(
                rule=RuleKind.BANNED_SUBSTRING,
                message="Password contains a disallowed word",
            )
        )

    return violations


def _resolve_placeholder(kind: PlaceholderKind, context: PolicyContext) -> str | None:
    if kind is PlaceholderKind.EMAIL_LOCAL_PART:
        return email_local_part(email=context.email)
    return None
