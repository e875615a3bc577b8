"""Mode-switched token storage facade used by the identity-provider client."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from credential_hygiene.application.ports.key_value_backend_port import (
    KeyValueBackendPort,
    StorageBackendError,
)
from credential_hygiene.domain.storage_mode import (
    DEFAULT_STORAGE_MODE,
    REMEMBER_MODE_KEY,
    StorageMode,
    is_provider_token_key,
    parse_storage_mode,
)

logger = logging.getLogger(__name__)


class AuthStorage:
    """Route get/set/remove to the backend selected by the current storage mode.

    The backend is resolved on every call, so a mode change applies to the next
    operation. Values written under a previous mode are never migrated.
    """

    def __init__(
        self,
        *,
        backends: Mapping[StorageMode, KeyValueBackendPort],
        mode: StorageMode = DEFAULT_STORAGE_MODE,
    ) -> None:
        missing = [member.value for member in StorageMode if member not in backends]
        if missing:
            raise ValueError(f"missing storage backends for modes: {', '.join(missing)}")
        self._backends = dict(backends)
        self._mode = mode

    @classmethod
    def load(cls, *, backends: Mapping[StorageMode, KeyValueBackendPort]) -> AuthStorage:
        """Build storage with the mode preference persisted in the durable backend."""

        storage = cls(backends=backends)
        try:
            raw_mode = storage._backends[StorageMode.DURABLE].get(REMEMBER_MODE_KEY)
        except StorageBackendError as error:
            logger.warning(
                "auth_storage_mode_read_failed fallback=%s error=%s",
                DEFAULT_STORAGE_MODE.value,
                error,
            )
            return storage

        mode = parse_storage_mode(raw_mode)
        if mode is None:
            if raw_mode is not None:
                logger.warning(
                    "auth_storage_mode_unknown value=%r fallback=%s",
                    raw_mode,
                    DEFAULT_STORAGE_MODE.value,
                )
            mode = DEFAULT_STORAGE_MODE
        logger.debug("auth_storage_mode_loaded mode=%s", mode.value)
        storage._mode = mode
        return storage

    def get_mode(self) -> StorageMode:
        return self._mode

    def set_mode(self, mode: StorageMode) -> None:
        """Select the backend for subsequent operations and persist the preference."""

        previous = self._mode
        self._mode = mode
        self._backends[StorageMode.DURABLE].set(REMEMBER_MODE_KEY, mode.value)
        if previous is not mode:
            logger.info(
                "auth_storage_mode_changed from=%s to=%s",
                previous.value,
                mode.value,
            )

    def get(self, key: str) -> str | None:
        return self._active_backend().get(key)

    def set(self, key: str, value: str) -> None:
        self._active_backend().set(key, value)

    def remove(self, key: str) -> None:
        self._active_backend().remove(key)

    def purge_tokens(self) -> int:
        """Remove identity-provider token keys from the durable backend only.

        Failures are logged and never raised; returns the number of keys removed.
        """

        durable = self._backends[StorageMode.DURABLE]
        try:
            token_keys = [key for key in durable.keys() if is_provider_token_key(key)]
        except Exception as error:  # noqa: BLE001
            logger.warning("auth_token_purge_failed stage=list error=%s", error)
            return 0

        removed_count = 0
        for key in token_keys:
            try:
                durable.remove(key)
            except Exception as error:  # noqa: BLE001
                logger.warning(
                    "auth_token_purge_failed stage=remove key=%s error=%s",
                    key,
                    error,
                )
                continue
            removed_count += 1

        if removed_count:
            logger.info("auth_tokens_purged removed=%s", removed_count)
        return removed_count

    def end_session(self) -> None:
        """Discard everything held by the session-scoped backend."""

        self._backends[StorageMode.SESSION_SCOPED].clear()
        logger.info("auth_storage_session_ended")

    def _active_backend(self) -> KeyValueBackendPort:
        return self._backends[self._mode]
