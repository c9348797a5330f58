"""create games table

Revision ID: 002
Revises: 001
Create Date: 2025-02-03 10:05:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image", sa.Text(), nullable=False, server_default=""),
        sa.Column("stock_total", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("price_per_day", sa.Numeric(10, 2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.UniqueConstraint("name", name="uq_games_name"),
        # A game needs at least one copy and a positive daily price
        sa.CheckConstraint("stock_total >= 1", name="ck_games_stock_total_positive"),
        sa.CheckConstraint("price_per_day >= 1", name="ck_games_price_per_day_min"),
    )
    op.create_index("ix_games_id", "games", ["id"], unique=False)
    op.create_index("ix_games_category_id", "games", ["category_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_games_category_id", table_name="games")
    op.drop_index("ix_games_id", table_name="games")
    op.drop_table("games")
