"""Password assessment used by sign-up and set-new-password flows."""

from __future__ import annotations

from dataclasses import dataclass

from credential_hygiene.domain.password_policy import PasswordPolicy, PolicyContext
from credential_hygiene.domain.password_strength import (
    Hint,
    ScoreResult,
    build_hints,
    score_password,
)
from credential_hygiene.domain.password_validation import (
    PolicyViolation,
    validate_password,
)

CONFIRMATION_MISMATCH_MESSAGE = "Passwords do not match"


@dataclass(frozen=True)
class PasswordAssessment:
    """Strength, hints and violations computed for one password input."""

    strength: ScoreResult
    hints: list[Hint]
    violations: list[PolicyViolation]
    confirmation_error: str | None = None

    @property
    def is_acceptable(self) -> bool:
        return not self.violations and self.confirmation_error is None


class PasswordPolicyService:
    """Evaluate password inputs against one configured policy."""

    def __init__(self, *, policy: PasswordPolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    def assess(
        self,
        *,
        password: str,
        confirm: str | None = None,
        email: str | None = None,
    ) -> PasswordAssessment:
        """Score and validate password; check confirm only when it is supplied."""

        confirmation_error = None
        if confirm is not None and confirm != password:
            confirmation_error = CONFIRMATION_MISMATCH_MESSAGE

        return PasswordAssessment(
            strength=score_password(self._policy, password),
            hints=build_hints(self._policy, password),
            violations=validate_password(self._policy, password, PolicyContext(email=email)),
            confirmation_error=confirmation_error,
        )
