"""Shared helpers for user credential inputs."""

from __future__ import annotations


def email_local_part(*, email: str | None) -> str | None:
    """Return the part of an email before '@', or None when it is blank."""

    if email is None:
        return None
    local_part = email.split("@", 1)[0]
    if not local_part.strip():
        return None
    return local_part
