"""SQLAlchemy table definitions for Gather.

They mirror the schema created by the Alembic migrations, constraint names
included: repositories recognise violations by those names.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("stable_id", String(255), nullable=False),  # Provider id or local UUID
    Column("handle", String(30), nullable=True),  # Unique public username
    Column("display_name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("password_hash", Text, nullable=False),
    Column("provider", String(20), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    PrimaryKeyConstraint("stable_id", name="users_pkey"),
    UniqueConstraint("handle", name="uq_users_handle"),
    CheckConstraint(
        "provider IN ('local', 'kakao', 'google')", name="ck_users_provider"
    ),
)

Index("idx_users_email", users_table.c.email)
