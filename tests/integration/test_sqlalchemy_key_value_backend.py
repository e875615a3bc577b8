from __future__ import annotations

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.config import Config

from alembic import command
from credential_hygiene.application.ports.key_value_backend_port import StorageBackendError
from credential_hygiene.infrastructure.db.session import create_session_factory
from credential_hygiene.infrastructure.storage.sqlalchemy_backend import (
    DURABLE_SCOPE,
    SqlAlchemyKeyValueBackend,
    session_scope,
)


def _upgrade_head(tmp_path: Path, filename: str) -> str:
    db_path = tmp_path / filename
    sync_url = f"sqlite+pysqlite:///{db_path}"

    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", sync_url)
    command.upgrade(alembic_config, "head")

    return sync_url


def test_migration_creates_auth_storage_entries_table(tmp_path: Path) -> None:
    url = _upgrade_head(tmp_path, "schema.db")

    inspector = sa.inspect(sa.create_engine(url))

    assert "auth_storage_entries" in inspector.get_table_names()
    columns = {column["name"] for column in inspector.get_columns("auth_storage_entries")}
    assert columns == {"scope", "key", "value", "updated_at"}
    assert inspector.get_pk_constraint("auth_storage_entries")["constrained_columns"] == [
        "scope",
        "key",
    ]


def test_set_get_replace_and_remove(tmp_path: Path) -> None:
    url = _upgrade_head(tmp_path, "crud.db")
    backend = SqlAlchemyKeyValueBackend(create_session_factory(url), scope=DURABLE_SCOPE)

    assert backend.get("sb-ref-auth-token") is None

    backend.set("sb-ref-auth-token", "first")
    backend.set("sb-ref-auth-token", "second")

    assert backend.get("sb-ref-auth-token") == "second"
    assert backend.keys() == ["sb-ref-auth-token"]

    backend.remove("sb-ref-auth-token")
    backend.remove("sb-ref-auth-token")

    assert backend.get("sb-ref-auth-token") is None
    assert backend.keys() == []


def test_scopes_are_isolated(tmp_path: Path) -> None:
    url = _upgrade_head(tmp_path, "scopes.db")
    session_factory = create_session_factory(url)
    durable = SqlAlchemyKeyValueBackend(session_factory, scope=DURABLE_SCOPE)
    tab_one = SqlAlchemyKeyValueBackend(session_factory, scope=session_scope("tab-1"))
    tab_two = SqlAlchemyKeyValueBackend(session_factory, scope=session_scope("tab-2"))

    durable.set("k", "durable")
    tab_one.set("k", "tab-1")
    tab_one.set("other", "x")

    assert durable.get("k") == "durable"
    assert tab_one.get("k") == "tab-1"
    assert tab_two.get("k") is None
    assert tab_one.keys() == ["k", "other"]

    tab_one.clear()

    assert tab_one.keys() == []
    assert durable.get("k") == "durable"


def test_session_scope_rejects_blank_identifier() -> None:
    with pytest.raises(ValueError, match="session_id cannot be blank"):
        session_scope(" ")


def test_missing_schema_surfaces_storage_backend_error(tmp_path: Path) -> None:
    url = f"sqlite+pysqlite:///{tmp_path / 'empty.db'}"
    backend = SqlAlchemyKeyValueBackend(create_session_factory(url), scope=DURABLE_SCOPE)

    with pytest.raises(StorageBackendError, match="get failed for key 'k'") as error_info:
        backend.get("k")
    assert error_info.value.operation == "get"
    assert error_info.value.key == "k"

    with pytest.raises(StorageBackendError, match="set failed"):
        backend.set("k", "v")
    with pytest.raises(StorageBackendError, match="keys failed"):
        backend.keys()
