from __future__ import annotations

import pytest

from credential_hygiene.domain.password_policy import (
    DEFAULT_POLICY,
    LiteralSubstring,
    PasswordPolicy,
    PlaceholderKind,
    PlaceholderSubstring,
    PolicyContext,
)
from credential_hygiene.domain.password_strength import score_password
from credential_hygiene.domain.password_validation import (
    PolicyViolation,
    RuleKind,
    expand_dynamic_substrings,
    validate_password,
)

_EMAIL_PLACEHOLDER = PlaceholderSubstring(kind=PlaceholderKind.EMAIL_LOCAL_PART)


def _strict_policy(**overrides: object) -> PasswordPolicy:
    values: dict[str, object] = {
        "min_length": 12,
        "require_lower": True,
        "require_upper": True,
        "require_digit": True,
        "require_symbol": True,
        "banned_substrings": (_EMAIL_PLACEHOLDER,),
        "max_repeat": 3,
    }
    values.update(overrides)
    return PasswordPolicy(**values)  # type: ignore[arg-type]


def test_scenario_reports_repeat_and_banned_violations_while_score_stays_high() -> None:
    policy = _strict_policy()
    context = PolicyContext(email="aaaa@x.com")

    violations = validate_password(policy, "aaaaPassword1!", context)

    assert [violation.rule for violation in violations] == [
        RuleKind.MAX_REPEAT,
        RuleKind.BANNED_SUBSTRING,
    ]
    result = score_password(policy, "aaaaPassword1!")
    assert result.score == 4
    assert result.label == "Very strong"


def test_collects_every_violation_in_fixed_order() -> None:
    violations = validate_password(DEFAULT_POLICY, "")

    assert violations == [
        PolicyViolation(
            rule=RuleKind.MIN_LENGTH,
            message="Password must be at least 12 characters",
        ),
        PolicyViolation(rule=RuleKind.REQUIRE_LOWER, message="Add a lowercase letter"),
        PolicyViolation(rule=RuleKind.REQUIRE_UPPER, message="Add an uppercase letter"),
        PolicyViolation(rule=RuleKind.REQUIRE_DIGIT, message="Include a number"),
        PolicyViolation(rule=RuleKind.REQUIRE_SYMBOL, message="Add a symbol"),
    ]


def test_valid_password_returns_empty_outcome() -> None:
    assert validate_password(_strict_policy(), "Correct-Horse-42", PolicyContext()) == []


def test_validation_is_idempotent() -> None:
    policy = _strict_policy()
    context = PolicyContext(email="bob@example.org")

    first = validate_password(policy, "bobbb", context)
    second = validate_password(policy, "bobbb", context)

    assert first == second
    assert first


@pytest.mark.parametrize(
    ("password", "violates"),
    [
        ("Ab1!-xyz-aaa", False),
        ("Ab1!-xyz-aaaa", True),
        ("Ab1!-111-xyz", False),
        ("Ab1!-1111-xyz", True),
    ],
)
def test_repeat_rule_boundary(password: str, violates: bool) -> None:
    policy = _strict_policy(min_length=1, banned_substrings=())

    rules = [violation.rule for violation in validate_password(policy, password)]

    assert (RuleKind.MAX_REPEAT in rules) is violates


def test_repeat_violation_message_names_limit() -> None:
    policy = PasswordPolicy(min_length=1, max_repeat=2)

    assert validate_password(policy, "zzz") == [
        PolicyViolation(
            rule=RuleKind.MAX_REPEAT,
            message="Avoid repeating the same character more than 2 times in a row",
        )
    ]


def test_zero_max_repeat_disables_rule() -> None:
    policy = PasswordPolicy(min_length=1, max_repeat=0)

    assert validate_password(policy, "a" * 50) == []


@pytest.mark.parametrize("password", ["mySECRETpass", "secret", "xSeCrEtx"])
def test_banned_substring_matching_ignores_case(password: str) -> None:
    policy = PasswordPolicy(min_length=1, banned_substrings=(LiteralSubstring(value="Secret"),))

    assert validate_password(policy, password) == [
        PolicyViolation(
            rule=RuleKind.BANNED_SUBSTRING,
            message="Password contains a disallowed word",
        )
    ]


def test_email_placeholder_matches_local_part_case_insensitively() -> None:
    policy = PasswordPolicy(min_length=1, banned_substrings=(_EMAIL_PLACEHOLDER,))

    violations = validate_password(policy, "xxJohn.Doexx", PolicyContext(email="john.doe@x.com"))

    assert [violation.rule for violation in violations] == [RuleKind.BANNED_SUBSTRING]


@pytest.mark.parametrize("context", [None, PolicyContext(), PolicyContext(email="@x.com")])
def test_placeholder_is_dropped_without_usable_email(context: PolicyContext | None) -> None:
    policy = PasswordPolicy(min_length=1, banned_substrings=(_EMAIL_PLACEHOLDER,))

    assert validate_password(policy, "anything", context) == []


def test_expand_dynamic_substrings_resolves_in_order_and_drops_blanks() -> None:
    banned = (
        LiteralSubstring(value="acme"),
        _EMAIL_PLACEHOLDER,
        LiteralSubstring(value="   "),
        LiteralSubstring(value=""),
        LiteralSubstring(value="2024"),
    )

    expanded = expand_dynamic_substrings(banned, PolicyContext(email="bob@example.org"))

    assert expanded == ["acme", "bob", "2024"]


def test_expand_dynamic_substrings_without_context_keeps_literals_only() -> None:
    banned = (_EMAIL_PLACEHOLDER, LiteralSubstring(value="acme"))

    assert expand_dynamic_substrings(banned) == ["acme"]


def test_email_without_at_sign_uses_whole_value() -> None:
    assert expand_dynamic_substrings((_EMAIL_PLACEHOLDER,), PolicyContext(email="alice")) == [
        "alice"
    ]


def test_policy_is_not_mutated_by_validation() -> None:
    policy = _strict_policy()
    before = policy

    validate_password(policy, "whatever", PolicyContext(email="w@x.com"))

    assert policy == before
    assert policy.banned_substrings == (_EMAIL_PLACEHOLDER,)


def test_email_local_part_keeps_surrounding_whitespace() -> None:
    assert expand_dynamic_substrings((_EMAIL_PLACEHOLDER,), PolicyContext(email=" bob @x.com")) == [
        " bob "
    ]


def test_blank_email_local_part_is_dropped() -> None:
    assert expand_dynamic_substrings((_EMAIL_PLACEHOLDER,), PolicyContext(email="   @x.com")) == []
