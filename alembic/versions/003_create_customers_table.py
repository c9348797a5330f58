"""create customers table

Revision ID: 003
Revises: 002
Create Date: 2025-02-03 10:10:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=11), nullable=False),
        sa.Column("cpf", sa.String(length=11), nullable=False),
        sa.Column("birthday", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cpf", name="uq_customers_cpf"),
        sa.CheckConstraint("LENGTH(cpf) = 11", name="ck_customers_cpf_length"),
        sa.CheckConstraint(
            "LENGTH(phone) BETWEEN 10 AND 11", name="ck_customers_phone_length"
        ),
    )
    op.create_index("ix_customers_id", "customers", ["id"], unique=False)
    op.create_index("ix_customers_cpf", "customers", ["cpf"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_customers_cpf", table_name="customers")
    op.drop_index("ix_customers_id", table_name="customers")
    op.drop_table("customers")
