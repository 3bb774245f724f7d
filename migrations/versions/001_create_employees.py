"""Create the employees table.

CONCEPT: The UNIQUE constraint on email is the store-side backstop for the
service's "email already in use" pre-check. Two concurrent inserts with the
same address can both pass the pre-check; only one survives this constraint.

Revision ID: 001
Create Date: 2025-01-01
"""

from alembic import op
import sqlalchemy as sa

# Revision identifiers
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
    )
    op.create_index("ix_employees_email", "employees", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_employees_email", table_name="employees")
    op.drop_table("employees")
