"""Process-local key/value backend with no persistence."""

from __future__ import annotations

from credential_hygiene.application.ports.key_value_backend_port import KeyValueBackendPort


class InMemoryKeyValueBackend(KeyValueBackendPort):
    """Dictionary-backed storage discarded when the process exits."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)

    def clear(self) -> None:
        self._values.clear()
