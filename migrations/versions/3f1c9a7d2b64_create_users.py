"""create_users

Create the accounts schema: one row per user, keyed by the stable id
(provider-issued id for federated accounts, UUID for local ones).

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-17 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("stable_id", sa.String(length=255), nullable=False),
        sa.Column("handle", sa.String(length=30), nullable=True),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("provider", sa.String(length=20), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("stable_id", name="users_pkey"),
        sa.UniqueConstraint("handle", name="uq_users_handle"),
        sa.CheckConstraint(
            "provider IN ('local', 'kakao', 'google')", name="ck_users_provider"
        ),
    )
    op.create_index("idx_users_email", "users", ["email"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")
