"""SQLAlchemy table definitions.

These table definitions are used for classical mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("inviter_id", UUID, nullable=False),  # Owned by the host service
    Column("email", String(255), nullable=True),
    Column("phone", String(64), nullable=True),
    Column("main", Boolean, nullable=False, server_default="false"),
    Column("accepted", Boolean, nullable=False, server_default="false"),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("accepted_by_user_id", UUID, nullable=True),
    Column(
        "clicks",
        ARRAY(TIMESTAMP(timezone=True)),
        nullable=False,
        server_default="{}",
    ),
    Column("click_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("click_count >= 0", name="click_count_non_negative"),
    CheckConstraint(
        "(accepted AND accepted_at IS NOT NULL AND accepted_by_user_id IS NOT NULL)"
        " OR (NOT accepted AND accepted_at IS NULL AND accepted_by_user_id IS NULL)",
        name="acceptance_details_match_status",
    ),
)

Index("idx_invites_inviter_id", invites_table.c.inviter_id)
Index("idx_invites_email", invites_table.c.email)
Index("idx_invites_phone", invites_table.c.phone)
Index("idx_invites_created_at", invites_table.c.created_at)
Index("idx_invites_accepted_at", invites_table.c.accepted_at)

# One main invite per inviter
Index(
    "idx_invites_unique_main",
    invites_table.c.inviter_id,
    unique=True,
    postgresql_where=text("main"),
)
