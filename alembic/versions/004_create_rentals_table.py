"""create rentals table

Revision ID: 004
Revises: 003
Create Date: 2025-02-03 10:15:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "rentals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("game_id", sa.Integer(), nullable=False),
        sa.Column("rent_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("days_rented", sa.Integer(), nullable=False),
        sa.Column("original_price", sa.Numeric(18, 2), nullable=False),
        sa.Column("return_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("delay_fee", sa.Numeric(18, 2), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"]),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"]),
        sa.CheckConstraint("days_rented >= 1", name="ck_rentals_days_rented_positive"),
        # A delay fee only exists on a returned rental
        sa.CheckConstraint(
            "delay_fee IS NULL OR return_date IS NOT NULL",
            name="ck_rentals_delay_fee_requires_return",
        ),
    )
    op.create_index("ix_rentals_id", "rentals", ["id"], unique=False)
    op.create_index("ix_rentals_customer_id", "rentals", ["customer_id"], unique=False)
    # Open-rental counts per game filter on both columns
    op.create_index(
        "ix_rentals_game_id_return_date", "rentals", ["game_id", "return_date"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_rentals_game_id_return_date", table_name="rentals")
    op.drop_index("ix_rentals_customer_id", table_name="rentals")
    op.drop_index("ix_rentals_id", table_name="rentals")
    op.drop_table("rentals")
