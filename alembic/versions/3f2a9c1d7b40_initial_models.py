"""initial models

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "canteens",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("ratings", sa.Float, nullable=True),
    )
    op.create_index("ix_canteens_id", "canteens", ["id"])

    op.create_table(
        "canteen_items",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("rating", sa.Float, nullable=True),
        sa.Column("is_veg", sa.Boolean, nullable=False),
        sa.Column("canteen_id", sa.Integer, sa.ForeignKey("canteens.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_canteen_items_id", "canteen_items", ["id"])
    op.create_index("ix_canteen_items_canteen_id", "canteen_items", ["canteen_id"])

    op.create_table(
        "students",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("number", sa.String(32), nullable=False),
        sa.Column("branch", sa.String(128), nullable=True),
        sa.Column("roll_number", sa.String(64), nullable=True),
        sa.Column("password", sa.String(128), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_students_id", "students", ["id"])
    op.create_index("ix_students_email", "students", ["email"], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_students_email", table_name="students")
    op.drop_index("ix_students_id", table_name="students")
    op.drop_table("students")
    op.drop_index("ix_canteen_items_canteen_id", table_name="canteen_items")
    op.drop_index("ix_canteen_items_id", table_name="canteen_items")
    op.drop_table("canteen_items")
    op.drop_index("ix_canteens_id", table_name="canteens")
    op.drop_table("canteens")
