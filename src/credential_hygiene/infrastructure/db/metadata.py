"""SQLAlchemy metadata definitions for credential storage tables."""

from __future__ import annotations

import sqlalchemy as sa

metadata = sa.MetaData()

auth_storage_entries = sa.Table(
    "auth_storage_entries",
    metadata,
    sa.Column("scope", sa.Text(), primary_key=True, nullable=False),
    sa.Column("key", sa.Text(), primary_key=True, nullable=False),
    sa.Column("value", sa.Text(), nullable=False),
    sa.Column(
        "updated_at",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    ),
)

sa.Index("ix_auth_storage_entries_scope", auth_storage_entries.c.scope)
