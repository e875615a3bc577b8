"""Declarative password policy model and banned-substring variants."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum


class PlaceholderKind(StrEnum):
    """Context values a banned-substring entry can be resolved from."""

    EMAIL_LOCAL_PART = "<emailLocalPart>"


@dataclass(frozen=True)
class LiteralSubstring:
    """Banned fragment fixed at policy definition time."""

    value: str


@dataclass(frozen=True)
class PlaceholderSubstring:
    """Banned fragment resolved from the validation context."""

    kind: PlaceholderKind


BannedSubstring = LiteralSubstring | PlaceholderSubstring


@dataclass(frozen=True)
class PolicyContext:
    """Runtime values available to placeholder resolution."""

    email: str | None = None


@dataclass(frozen=True)
class PasswordPolicy:
    """Password requirements supplied by the caller.

    max_repeat of 0 disables the consecutive-repeat rule.
    """

    min_length: int
    require_lower: bool = False
    require_upper: bool = False
    require_digit: bool = False
    require_symbol: bool = False
    banned_substrings: tuple[BannedSubstring, ...] = ()
    max_repeat: int = 0


DEFAULT_POLICY = PasswordPolicy(
    min_length=12,
    require_lower=True,
    require_upper=True,
    require_digit=True,
    require_symbol=True,
    banned_substrings=(),
    max_repeat=3,
)


def parse_banned_substrings(raw_values: Iterable[str]) -> tuple[BannedSubstring, ...]:
    """Convert configured strings into tagged literal/placeholder entries."""

    placeholder_tokens = {kind.value: kind for kind in PlaceholderKind}
    parsed: list[BannedSubstring] = []
    for raw_value in raw_values:
        kind = placeholder_tokens.get(raw_value)
        if kind is not None:
            parsed.append(PlaceholderSubstring(kind=kind))
        else:
            parsed.append(LiteralSubstring(value=raw_value))
    return tuple(parsed)
