"""credential hygiene command-line entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from credential_hygiene.application.ports.key_value_backend_port import StorageBackendError
from credential_hygiene.application.services.auth_storage import AuthStorage
from credential_hygiene.application.services.password_policy_service import (
    PasswordAssessment,
    PasswordPolicyService,
)
from credential_hygiene.application.services.remember_me_service import RememberMeService
from credential_hygiene.config.password_policy import build_password_policy
from credential_hygiene.config.settings import Settings, load_settings
from credential_hygiene.domain.storage_mode import StorageMode
from credential_hygiene.infrastructure.db.session import create_session_factory
from credential_hygiene.infrastructure.logging import configure_logging
from credential_hygiene.infrastructure.storage.backends import build_mode_backends

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_POLICY_VIOLATION = 1
EXIT_STORAGE_ERROR = 2


@dataclass(frozen=True)
class CliServices:
    """Services wired from settings for one CLI invocation."""

    auth_storage: AuthStorage
    remember_me: RememberMeService
    password_policy: PasswordPolicyService


def build_cli_services(*, settings: Settings) -> CliServices:
    """Wire storage backends and policy services from runtime settings."""

    session_factory = create_session_factory(
        settings.credential_store_url,
        echo=settings.credential_store_echo_sql,
    )
    backends = build_mode_backends(
        session_factory=session_factory,
        session_id=settings.browser_session_id,
    )
    auth_storage = AuthStorage.load(backends=backends)
    return CliServices(
        auth_storage=auth_storage,
        remember_me=RememberMeService(auth_storage=auth_storage),
        password_policy=PasswordPolicyService(policy=build_password_policy(settings)),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="credential-hygiene",
        description="Password policy checks and auth token storage maintenance.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    assess = subcommands.add_parser("assess", help="Score and validate a password.")
    assess.add_argument("password")
    assess.add_argument("--confirm", default=None, help="Confirmation input to compare.")
    assess.add_argument("--email", default=None, help="Account email for placeholder rules.")

    mode = subcommands.add_parser("mode", help="Show or change the token storage mode.")
    mode.add_argument(
        "value",
        nargs="?",
        choices=[member.value for member in StorageMode],
        help="New mode; omit to print the current one.",
    )

    remember = subcommands.add_parser("remember", help="Apply a remember-me decision.")
    remember.add_argument("choice", choices=["yes", "no"])

    subcommands.add_parser("purge", help="Remove durable identity-provider tokens.")
    subcommands.add_parser("end-session", help="Clear session-scoped token storage.")
    return parser


def format_assessment(assessment: PasswordAssessment) -> list[str]:
    """Render an assessment as plain text lines."""

    lines = [f"score: {assessment.strength.score} ({assessment.strength.label})"]
    for hint in assessment.hints:
        marker = "x" if hint.satisfied else " "
        lines.append(f"[{marker}] {hint.label}")
    for violation in assessment.violations:
        lines.append(f"violation {violation.rule.value}: {violation.message}")
    if assessment.confirmation_error is not None:
        lines.append(f"confirm: {assessment.confirmation_error}")
    return lines


def run_command(args: argparse.Namespace, *, services: CliServices) -> int:
    """Execute one parsed command and return its exit code."""

    if args.command == "assess":
        assessment = services.password_policy.assess(
            password=args.password,
            confirm=args.confirm,
            email=args.email,
        )
        for line in format_assessment(assessment):
            print(line)
        return EXIT_OK if assessment.is_acceptable else EXIT_POLICY_VIOLATION

    try:
        if args.command == "mode":
            if args.value is not None:
                services.auth_storage.set_mode(StorageMode(args.value))
            print(services.auth_storage.get_mode().value)
        elif args.command == "remember":
            result = services.remember_me.apply_choice(remember=args.choice == "yes")
            print(f"mode: {result.mode.value} purged: {result.purged_tokens}")
        elif args.command == "purge":
            print(f"purged: {services.auth_storage.purge_tokens()}")
        elif args.command == "end-session":
            services.auth_storage.end_session()
    except StorageBackendError as error:
        logger.error("cli_storage_error command=%s error=%s", args.command, error)
        return EXIT_STORAGE_ERROR
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, wire services from settings and run the command."""

    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(
        level=settings.log_level,
        sql_echo=settings.credential_store_echo_sql,
    )
    services = build_cli_services(settings=settings)
    return run_command(args, services=services)


if __name__ == "__main__":
    sys.exit(main())
