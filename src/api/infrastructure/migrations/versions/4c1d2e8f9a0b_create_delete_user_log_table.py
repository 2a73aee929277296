"""create delete_user_log table

Revision ID: 4c1d2e8f9a0b
Revises:
Create Date: 2026-10-19

Creates the audit table recording users removed from tenants.
Rows are append-only; tenant_id is indexed for the per-tenant audit query.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4c1d2e8f9a0b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create delete_user_log table and its tenant index."""
    op.create_table(
        "delete_user_log",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("tenant_id", sa.String(100), nullable=False),
        sa.Column("user_id", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column(
            "delete_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_index(
        "ix_delete_user_log_tenant_id",
        "delete_user_log",
        ["tenant_id"],
    )


def downgrade() -> None:
    """Drop delete_user_log table."""
    op.drop_index("ix_delete_user_log_tenant_id", table_name="delete_user_log")
    op.drop_table("delete_user_log")
