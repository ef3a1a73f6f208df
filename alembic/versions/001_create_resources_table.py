"""Create resources table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `resources` table used by SQLResourceStorage.
Rollback: downgrade() drops the table (all catalog data is lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the resources table; column docs live in edulibrary/models/resource.py."""
    op.create_table(
        "resources",
        # Assigned by the storage id generator, not by the database
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        # Category / SkillLevel label strings
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("skill_level", sa.String(20), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("resource_type", sa.Text(), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # list() orders by insertion time
    op.create_index("idx_resources_created_at", "resources", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_resources_created_at", table_name="resources")
    op.drop_table("resources")
