"""Key/value table backing durable and session-scoped token storage."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_auth_storage_entries"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "auth_storage_entries",
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
    op.create_index(
        "ix_auth_storage_entries_scope",
        "auth_storage_entries",
        ["scope"],
    )


def downgrade() -> None:
    op.drop_index("ix_auth_storage_entries_scope", table_name="auth_storage_entries")
    op.drop_table("auth_storage_entries")
