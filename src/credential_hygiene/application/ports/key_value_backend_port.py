"""Port for string key/value storage backends holding auth tokens."""

from __future__ import annotations

from typing import Protocol


class StorageBackendError(RuntimeError):
    """Raised when a storage backend cannot complete an operation."""

    def __init__(self, *, operation: str, key: str | None = None, detail: str = "") -> None:
        self.operation = operation
        self.key = key
        message = f"Storage backend {operation} failed"
        if key is not None:
            message = f"{message} for key '{key}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class KeyValueBackendPort(Protocol):
    """Key/value storage contract shared by durable, session and memory backends."""

    def get(self, key: str) -> str | None:
        """Return stored value for key, or None when absent."""

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    def remove(self, key: str) -> None:
        """Delete key if present."""

    def keys(self) -> list[str]:
        """Return all keys currently stored."""

    def clear(self) -> None:
        """Delete every stored key."""
