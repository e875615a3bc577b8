"""Apply the user's remember-me choice after a successful sign-in."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from credential_hygiene.application.services.auth_storage import AuthStorage
from credential_hygiene.domain.storage_mode import StorageMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RememberChoiceResult:
    """Storage mode selected for the choice and durable tokens purged."""

    mode: StorageMode
    purged_tokens: int


class RememberMeService:
    """Switch token persistence according to remember-me and clean up on opt-out."""

    def __init__(self, *, auth_storage: AuthStorage) -> None:
        self._auth_storage = auth_storage

    def apply_choice(self, *, remember: bool) -> RememberChoiceResult:
        """Persist tokens durably when remembered, otherwise keep them in memory only.

        Declining purges durable provider tokens the client may already have written.
        """

        if remember:
            self._auth_storage.set_mode(StorageMode.DURABLE)
            return RememberChoiceResult(mode=StorageMode.DURABLE, purged_tokens=0)

        self._auth_storage.set_mode(StorageMode.EPHEMERAL)
        purged = self._auth_storage.purge_tokens()
        logger.info("remember_me_declined purged_tokens=%s", purged)
        return RememberChoiceResult(mode=StorageMode.EPHEMERAL, purged_tokens=purged)
