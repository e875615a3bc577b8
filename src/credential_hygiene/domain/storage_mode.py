"""Token storage modes and the durable key conventions they rely on."""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Final


class StorageMode(StrEnum):
    """Where session tokens are persisted."""

    DURABLE = "local"
    SESSION_SCOPED = "session"
    EPHEMERAL = "memory"


DEFAULT_STORAGE_MODE: Final[StorageMode] = StorageMode.DURABLE

# Durable key holding the serialized StorageMode preference.
REMEMBER_MODE_KEY: Final[str] = "sb-remember-mode"

_PROVIDER_TOKEN_KEY_PATTERN = re.compile(r"^sb-(?P<project_ref>.+)-auth-token$")


def parse_storage_mode(raw_value: str | None) -> StorageMode | None:
    """Return the mode serialized in raw_value, or None when unknown."""

    if raw_value is None:
        return None
    try:
        return StorageMode(raw_value.strip())
    except ValueError:
        return None


def is_provider_token_key(key: str) -> bool:
    """Return whether key names an identity-provider session token."""

    return _PROVIDER_TOKEN_KEY_PATTERN.fullmatch(key) is not None


def provider_token_key(*, project_ref: str) -> str:
    """Build the durable key the identity provider client writes tokens under."""

    if not project_ref.strip():
        raise ValueError("project_ref cannot be blank")
    return f"sb-{project_ref}-auth-token"
