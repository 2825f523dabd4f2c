"""create_invites_table

Create the invites table:
- Main (one per inviter) and one-off invite links
- Acceptance details, set once
- Append-only click log with a denormalized counter

Revision ID: 3c1f9a7e2b40
Revises:
Create Date: 2026-10-18 10:12:03.514220

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "invites",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("inviter_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("main", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("accepted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("accepted_by_user_id", sa.UUID(), nullable=True),
        sa.Column(
            "clicks",
            postgresql.ARRAY(sa.TIMESTAMP(timezone=True)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("click_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("click_count >= 0", name="click_count_non_negative"),
        sa.CheckConstraint(
            "(accepted AND accepted_at IS NOT NULL AND accepted_by_user_id IS NOT NULL)"
            " OR (NOT accepted AND accepted_at IS NULL AND accepted_by_user_id IS NULL)",
            name="acceptance_details_match_status",
        ),
    )

    op.create_index("idx_invites_inviter_id", "invites", ["inviter_id"])
    op.create_index("idx_invites_email", "invites", ["email"])
    op.create_index("idx_invites_phone", "invites", ["phone"])
    op.create_index("idx_invites_created_at", "invites", ["created_at"])
    op.create_index("idx_invites_accepted_at", "invites", ["accepted_at"])

    # One main invite per inviter; also the ON CONFLICT target for find-or-create
    op.execute("""
        CREATE UNIQUE INDEX idx_invites_unique_main
        ON invites (inviter_id)
        WHERE main
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_invites_unique_main", table_name="invites")
    op.drop_index("idx_invites_accepted_at", table_name="invites")
    op.drop_index("idx_invites_created_at", table_name="invites")
    op.drop_index("idx_invites_phone", table_name="invites")
    op.drop_index("idx_invites_email", table_name="invites")
    op.drop_index("idx_invites_inviter_id", table_name="invites")
    op.drop_table("invites")
