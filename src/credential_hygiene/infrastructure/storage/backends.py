"""Assemble the backend used for each storage mode."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from credential_hygiene.application.ports.key_value_backend_port import KeyValueBackendPort
from credential_hygiene.domain.storage_mode import StorageMode
from credential_hygiene.infrastructure.storage.memory_backend import InMemoryKeyValueBackend
from credential_hygiene.infrastructure.storage.sqlalchemy_backend import (
    DURABLE_SCOPE,
    SqlAlchemyKeyValueBackend,
    session_scope,
)


def build_mode_backends(
    *,
    session_factory: sessionmaker[Session],
    session_id: str,
) -> dict[StorageMode, KeyValueBackendPort]:
    """Return one backend per storage mode sharing the given database."""

    return {
        StorageMode.DURABLE: SqlAlchemyKeyValueBackend(session_factory, scope=DURABLE_SCOPE),
        StorageMode.SESSION_SCOPED: SqlAlchemyKeyValueBackend(
            session_factory,
            scope=session_scope(session_id),
        ),
        StorageMode.EPHEMERAL: InMemoryKeyValueBackend(),
    }
