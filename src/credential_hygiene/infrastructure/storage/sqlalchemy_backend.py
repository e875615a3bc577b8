"""SQLAlchemy key/value backend for durable and session-scoped token storage."""

from __future__ import annotations

from typing import Any, Final, cast

import sqlalchemy as sa
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from credential_hygiene.application.ports.key_value_backend_port import (
    KeyValueBackendPort,
    StorageBackendError,
)
from credential_hygiene.infrastructure.db.metadata import auth_storage_entries

DURABLE_SCOPE: Final[str] = "local"
_SESSION_SCOPE_PREFIX: Final[str] = "session:"


def session_scope(session_id: str) -> str:
    """Return the row scope used for one browsing session."""

    if not session_id.strip():
        raise ValueError("session_id cannot be blank")
    return f"{_SESSION_SCOPE_PREFIX}{session_id}"


class SqlAlchemyKeyValueBackend(KeyValueBackendPort):
    """Key/value rows partitioned by scope in the auth_storage_entries table."""

    def __init__(self, session_factory: sessionmaker[Session], *, scope: str) -> None:
        self._session_factory = session_factory
        self._scope = scope

    @property
    def scope(self) -> str:
        return self._scope

    def get(self, key: str) -> str | None:
        statement = sa.select(auth_storage_entries.c.value).where(
            auth_storage_entries.c.scope == self._scope,
            auth_storage_entries.c.key == key,
        )
        try:
            with self._session_factory() as session:
                value = cast(str | None, session.execute(statement).scalar_one_or_none())
        except SQLAlchemyError as error:
            raise StorageBackendError(operation="get", key=key, detail=str(error)) from error
        return value

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under key."""

        update_statement = (
            sa.update(auth_storage_entries)
            .where(
                auth_storage_entries.c.scope == self._scope,
                auth_storage_entries.c.key == key,
            )
            .values(value=value, updated_at=sa.func.current_timestamp())
        )
        try:
            with self._session_factory() as session, session.begin():
                result = cast(CursorResult[Any], session.execute(update_statement))
                if not result.rowcount:
                    session.execute(
                        sa.insert(auth_storage_entries).values(
                            scope=self._scope,
                            key=key,
                            value=value,
                        )
                    )
        except SQLAlchemyError as error:
            raise StorageBackendError(operation="set", key=key, detail=str(error)) from error

    def remove(self, key: str) -> None:
        statement = sa.delete(auth_storage_entries).where(
            auth_storage_entries.c.scope == self._scope,
            auth_storage_entries.c.key == key,
        )
        try:
            with self._session_factory() as session, session.begin():
                session.execute(statement)
        except SQLAlchemyError as error:
            raise StorageBackendError(operation="remove", key=key, detail=str(error)) from error

    def keys(self) -> list[str]:
        statement = (
            sa.select(auth_storage_entries.c.key)
            .where(auth_storage_entries.c.scope == self._scope)
            .order_by(auth_storage_entries.c.key)
        )
        try:
            with self._session_factory() as session:
                return list(session.execute(statement).scalars())
        except SQLAlchemyError as error:
            raise StorageBackendError(operation="keys", detail=str(error)) from error

    def clear(self) -> None:
        statement = sa.delete(auth_storage_entries).where(
            auth_storage_entries.c.scope == self._scope,
        )
        try:
            with self._session_factory() as session, session.begin():
                session.execute(statement)
        except SQLAlchemyError as error:
            raise StorageBackendError(operation="clear", detail=str(error)) from error
