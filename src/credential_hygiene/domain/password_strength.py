"""Strength scoring and checklist hints for password inputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from credential_hygiene.domain.password_characters import (
    detect_categories,
    has_excessive_repeat,
)
from credential_hygiene.domain.password_policy import PasswordPolicy

# Length that earns the full length bonus even when the policy asks for less.
_STRONG_LENGTH: Final[int] = 12
_MAX_SCORE: Final[int] = 4
_MAX_CATEGORY_POINTS: Final[int] = 3

SCORE_LABELS: Final[tuple[str, ...]] = (
    "Very weak",
    "Weak",
    "Okay",
    "Strong",
    "Very strong",
)


@dataclass(frozen=True)
class ScoreResult:
    """Strength score with the category flags it was derived from."""

    score: int
    label: str
    has_lower: bool
    has_upper: bool
    has_digit: bool
    has_symbol: bool


@dataclass(frozen=True)
class Hint:
    """One checklist line shown next to a password input."""

    label: str
    satisfied: bool


def score_password(policy: PasswordPolicy, password: str) -> ScoreResult:
    """Score password strength on a 0-4 scale."""

    categories = detect_categories(password)
    score = min(_MAX_CATEGORY_POINTS, categories.count)

    if len(password) >= max(policy.min_length, _STRONG_LENGTH):
        score += 2
    elif len(password) >= policy.min_length:
        score += 1

    score = max(0, min(_MAX_SCORE, score))
    return ScoreResult(
        score=score,
        label=SCORE_LABELS[score],
        has_lower=categories.has_lower,
        has_upper=categories.has_upper,
        has_digit=categories.has_digit,
        has_symbol=categories.has_symbol,
    )


def build_hints(policy: PasswordPolicy, password: str) -> list[Hint]:
    """Return checklist hints ordered: length, symbol, digit, upper, lower, repeat."""

    result = score_password(policy, password)
    hints = [
        Hint(
            label=f"Use {policy.min_length}+ characters",
            satisfied=len(password) >= policy.min_length,
        )
    ]
    if policy.require_symbol:
        hints.append(Hint(label="Add a symbol", satisfied=result.has_symbol))
    if policy.require_digit:
        hints.append(Hint(label="Include a number", satisfied=result.has_digit))
    if policy.require_upper:
        hints.append(Hint(label="Add an uppercase letter", satisfied=result.has_upper))
    if policy.require_lower:
        hints.append(Hint(label="Add a lowercase letter", satisfied=result.has_lower))

    if policy.max_repeat > 0:
        hints.append(
            Hint(
                label=f"Avoid {policy.max_repeat}+ repeats in a row",
                satisfied=not has_excessive_repeat(password, max_repeat=policy.max_repeat),
            )
        )
    return hints
