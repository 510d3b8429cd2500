"""Create logos table

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "logos",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("type", sa.String(20), nullable=False, server_default="text"),
        sa.Column("text", sa.Text(), nullable=False, server_default=""),
        sa.Column("image_url", sa.Text(), nullable=False, server_default=""),
        sa.Column("font_family", sa.String(100), nullable=False, server_default="Arial"),
        sa.Column("font_size", sa.Integer(), nullable=False, server_default="24"),
        sa.Column("color", sa.String(20), nullable=False, server_default="#007AFF"),
        sa.Column("font_weight", sa.Integer(), nullable=False, server_default="700"),
        sa.Column("text_effect", sa.String(20), nullable=False, server_default="none"),
        sa.Column("layout", sa.String(20), nullable=False, server_default="left-right"),
        sa.Column("spacing", sa.Integer(), nullable=False, server_default="8"),
        sa.Column("alignment", sa.String(20), nullable=False, server_default="center"),
        sa.Column("width", sa.Integer(), nullable=False, server_default="150"),
        sa.Column("height", sa.Integer(), nullable=False, server_default="50"),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column(
            "created_time",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_time",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_logos_is_active", "logos", ["is_active"])

    # At most one active logo
    op.execute("CREATE UNIQUE INDEX uq_logos_single_active ON logos (is_active) WHERE is_active")


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS uq_logos_single_active")
    op.drop_index("ix_logos_is_active", table_name="logos")
    op.drop_table("logos")
